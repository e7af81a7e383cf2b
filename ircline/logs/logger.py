"""Event logger used across ircline.

Events are named ``<domain>_<action>``; their human text comes from the
JSON template catalog or, failing that, is derived from the name.
"""

from __future__ import annotations

import logging

from ..constants import debug_enabled


class EventLogger:
    def __init__(self, name: str = "ircline") -> None:
        # Fixed width for event name column when in debug (alignment)
        self._event_name_width = 32
        self.logger = logging.getLogger(name)

    def log_event(
        self,
        domain: str,
        action: str,
        level: int = logging.INFO,
        human: str | None = None,
        *,
        exc_info: bool = False,
        **kwargs: object,
    ) -> None:
        # The parser logs from its hot path; skip all formatting when muted.
        if not self.logger.isEnabledFor(level):
            return
        event_name = f"{domain}_{action}".lower()
        human_text = human
        if human_text is None:
            # Local import to avoid cyclic import issues during module init.
            from .event_catalog import EVENT_TEMPLATES

            template = EVENT_TEMPLATES.get((domain, action))
            if template:
                try:
                    human_text = template.format(**kwargs)
                except (KeyError, IndexError, ValueError):
                    human_text = template
            else:
                human_text = f"{domain.replace('_', ' ')}: {action.replace('_', ' ')}"
                kwargs.setdefault("derived", True)
        msg = (
            self._build_debug_message(event_name, human_text, kwargs)
            if debug_enabled()
            else human_text
        )
        self.logger.log(level, msg, exc_info=exc_info)

    def _build_debug_message(
        self, event_name: str, human_text: str, kwargs: dict[str, object]
    ) -> str:
        context = ", ".join(f"{k}={v!r}" for k, v in kwargs.items())
        width = self._event_name_width
        # Pad / truncate event name to a fixed column for alignment
        if len(event_name) <= width:
            ev = event_name.ljust(width)
        else:
            ev = event_name[: width - 1] + "…"
        base = f"{ev} {human_text}"
        if context:
            base = f"{base} ({context})"
        return base


logger = EventLogger()
