"""Human-readable templates for logged events.

``event_templates.json`` maps ``domain -> action -> template``; it is
flattened here into ``(domain, action) -> template``. Entries that are not
strings are ignored.
"""

from __future__ import annotations

import json
from pathlib import Path

DEFAULT_TEMPLATES_PATH = Path(__file__).with_name("event_templates.json")

EVENT_TEMPLATES: dict[tuple[str, str], str] = {}


def _flatten(raw: object) -> dict[tuple[str, str], str]:
    if not isinstance(raw, dict):
        return {}
    return {
        (domain, action): template
        for domain, actions in raw.items()
        if isinstance(actions, dict)
        for action, template in actions.items()
        if isinstance(template, str)
    }


def load_event_templates(path: Path = DEFAULT_TEMPLATES_PATH) -> dict[tuple[str, str], str]:
    """Read and flatten a template file.

    A missing or broken file yields a single ``("app", "load_error")`` entry
    instead of raising; the logger then falls back to derived messages.
    """
    try:
        return _flatten(json.loads(path.read_text(encoding="utf-8")))
    except FileNotFoundError:
        return {("app", "load_error"): "Event templates file missing"}
    except (OSError, ValueError) as e:
        return {("app", "load_error"): f"Failed to load event templates: {e}"[:200]}


def reload_event_templates(path: Path | None = None) -> None:
    global EVENT_TEMPLATES  # noqa: PLW0603
    EVENT_TEMPLATES = load_event_templates(path or DEFAULT_TEMPLATES_PATH)


reload_event_templates()

__all__ = [
    "DEFAULT_TEMPLATES_PATH",
    "EVENT_TEMPLATES",
    "load_event_templates",
    "reload_event_templates",
]
