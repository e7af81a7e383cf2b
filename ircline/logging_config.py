r"""
Logging configuration module for ircline.

Provides a clean, configurable logging setup using colorlog library with
structured error logging and aggregation capabilities.
"""

import logging
import sys
import threading
import time
from collections import Counter, deque
from typing import Any

import colorlog

from .constants import (
    ERROR_AGGREGATOR_MAX_PER_TYPE,
    ERROR_ALERT_RATE_PER_HOUR,
    ERROR_RECENT_WINDOW_SECONDS,
    debug_enabled,
)


class ErrorAggregator:
    """Counts rejected lines and other errors by type.

    Only the newest ``max_per_type`` entries of each type are kept for
    reporting; ``total_count`` still counts every occurrence. High-rate
    alerts fire at most once per type until :meth:`reset`.
    """

    def __init__(self, max_per_type: int = ERROR_AGGREGATOR_MAX_PER_TYPE):
        self.max_per_type = max_per_type
        self.lock = threading.Lock()
        self.reset()

    def reset(self) -> None:
        with self.lock:
            self.entries: dict[str, deque[dict[str, Any]]] = {}
            self.totals: Counter[str] = Counter()
            self.alerted: set[str] = set()
            self.start_time = time.time()

    def record_error(self, error_type: str, message: str, context: dict[str, Any] = None) -> None:
        with self.lock:
            bucket = self.entries.setdefault(error_type, deque(maxlen=self.max_per_type))
            bucket.append(
                {"timestamp": time.time(), "message": message, "context": context or {}}
            )
            self.totals[error_type] += 1

    def _rate_per_hour(self, error_type: str, now: float) -> float:
        elapsed_hours = (now - self.start_time) / 3600
        return self.totals[error_type] / max(elapsed_hours, 1)

    def get_error_summary(self) -> dict[str, Any]:
        with self.lock:
            now = time.time()
            return {
                error_type: {
                    "total_count": self.totals[error_type],
                    "recent_count": sum(
                        1 for e in bucket if now - e["timestamp"] < ERROR_RECENT_WINDOW_SECONDS
                    ),
                    "rate_per_hour": self._rate_per_hour(error_type, now),
                    "last_occurrence": bucket[-1] if bucket else None,
                }
                for error_type, bucket in self.entries.items()
            }

    def should_alert(self, error_type: str, threshold_rate: float = ERROR_ALERT_RATE_PER_HOUR) -> bool:
        """True once the rate of ``error_type`` first exceeds ``threshold_rate``.

        Later calls return False for the same type until :meth:`reset`.
        """
        with self.lock:
            if error_type in self.alerted or not self.totals[error_type]:
                return False
            if self._rate_per_hour(error_type, time.time()) <= threshold_rate:
                return False
            self.alerted.add(error_type)
            return True

    def log_summary_report(self) -> None:
        summary = self.get_error_summary()
        if not summary:
            logging.info("No errors recorded in current session")
            return

        logging.warning("🚨 ERROR SUMMARY REPORT")
        for error_type, stats in summary.items():
            logging.warning(
                f"  {error_type}: {stats['total_count']} total, "
                f"{stats['recent_count']} recent, "
                f"{stats['rate_per_hour']:.1f}/hour"
            )
            if stats["last_occurrence"]:
                logging.warning(f"    Last: {stats['last_occurrence']['message']}")


# Global error aggregator instance
error_aggregator = ErrorAggregator()


def log_structured_error(
    error_type: str,
    message: str,
    exception: Exception = None,
    context: dict[str, Any] = None,
    level: int = logging.ERROR
) -> None:
    """Log an error with structured context and aggregation.

    Args:
        error_type: Category of the error (e.g., 'empty_input', 'missing_command', 'io')
        message: Descriptive error message
        exception: The exception that occurred (optional)
        context: Additional context data for debugging
        level: Logging level (default: ERROR)
    """
    structured_message = f"[{error_type.upper()}] {message}"

    if exception:
        structured_message += f" | Exception: {type(exception).__name__}: {str(exception)}"

    if context:
        context_str = " | ".join(f"{k}={v}" for k, v in context.items())
        structured_message += f" | Context: {context_str}"

    logging.log(level, structured_message)

    error_aggregator.record_error(error_type, message, context)

    if error_aggregator.should_alert(error_type):
        logging.critical(
            f"🚨 HIGH ERROR RATE ALERT: {error_type} occurring at "
            f"{error_aggregator.get_error_summary()[error_type]['rate_per_hour']:.1f}/hour"
        )


class LoggerConfigurator:
    """Handles logging configuration cleanly using colorlog.

    Supports environment variable configuration for log levels.
    """

    def __init__(self, config=None):
        """Initialize the configurator.

        Args:
            config: Optional config dict; ``stream`` overrides the output stream.
        """
        self.config = config or {}

    def configure(self):
        """Configure logging with colored output using colorlog.

        Uses environment variables:
        - DEBUG: Set to 'true', '1', or 'yes' for DEBUG level, otherwise INFO
        """
        log_level = logging.DEBUG if debug_enabled() else logging.INFO

        formatter = colorlog.ColoredFormatter(
            "%(asctime)s %(log_color)s%(levelname)-8s%(reset)s %(message_log_color)s%(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "magenta",
            },
            secondary_log_colors={
                "message": {
                    "ERROR": "red",
                    "CRITICAL": "magenta",
                }
            },
            reset=True,
        )

        # stderr keeps stdout free for parsed output
        handler = logging.StreamHandler(self.config.get("stream", sys.stderr))
        handler.setFormatter(formatter)

        logging.basicConfig(
            level=log_level,
            handlers=[handler],
            format="%(message)s",
        )

        root_logger = logging.getLogger()
        root_logger.setLevel(log_level)

        # Apply formatter to all existing handlers (in case any were added)
        for h in root_logger.handlers:
            h.setFormatter(formatter)
