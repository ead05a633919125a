"""Human-readable text for ``BotLogger.log_event``, keyed by (domain, action).

The templates ship as package data next to this module; placeholders are
filled from the keyword arguments of the logging call.
"""

from __future__ import annotations

import json
from pathlib import Path

TEMPLATES_PATH = Path(__file__).with_name("event_templates.json")


def load_templates(path: Path = TEMPLATES_PATH) -> dict[tuple[str, str], str]:
    """Flatten ``{"domain": {"action": "text"}}`` into a lookup table."""
    with path.open("r", encoding="utf-8") as f:
        raw: dict[str, dict[str, str]] = json.load(f)
    return {
        (domain, action): text
        for domain, actions in raw.items()
        for action, text in actions.items()
    }


EVENT_TEMPLATES = load_templates()

__all__ = ["EVENT_TEMPLATES", "TEMPLATES_PATH", "load_templates"]
