"""Read commands for the metascry CLI."""

import json
from datetime import date, datetime
from typing import Any

from ...app import open_vault
from ...core.config import ScryConfig
from ...metadata.sections import Section, Sections


def handle_get(args, config: ScryConfig) -> None:
    """Handle get command.

    A single note prints its record; several notes print a map keyed by
    identifier.

    Args:
        args: Parsed command arguments.
        config: Library configuration.
    """
    source = args.notes[0] if len(args.notes) == 1 else list(args.notes)

    with open_vault(config=config) as session:
        result = session.scrier.get(source, args.path)
        print(to_json(result))


def to_json(value: Any) -> str:
    """Serialize metadata for display."""
    return json.dumps(_display(value), indent=2, ensure_ascii=False, default=_json_default)


def _display(value: Any) -> Any:
    # Sections is a dict subclass; show heading names rather than objects
    if isinstance(value, Sections):
        return value.headings
    if isinstance(value, dict):
        return {
            key if isinstance(key, (str, int, float, bool)) else str(key): _display(item)
            for key, item in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [_display(item) for item in value]
    return value


def _json_default(value: Any) -> Any:
    if isinstance(value, Section):
        return value.heading
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=str)
    return str(value)
