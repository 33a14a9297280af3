"""Load recorded package updates from a JSON file."""

import json
from pathlib import Path

from .exceptions import UpdatesFileError
from .models import PackageUpdateEvent

REQUIRED_FIELDS = ("name", "from_version", "to_version")
OPERATIONS = ("install", "update", "uninstall")


def event_from_dict(data: dict) -> PackageUpdateEvent:
    """
    Build a package event from a JSON object.

    Pretty versions default to the raw versions and the pretty name to the
    package name.

    Raises:
        UpdatesFileError: If a required field is missing or a value is invalid
    """
    if not isinstance(data, dict):
        raise UpdatesFileError(f"Expected an object per update, got {type(data).__name__}")

    missing = [field for field in REQUIRED_FIELDS if not data.get(field)]
    if missing:
        raise UpdatesFileError(f"Update record is missing {', '.join(missing)}: {data}")

    operation = data.get("operation", "update")
    if operation not in OPERATIONS:
        raise UpdatesFileError(f"Unknown operation '{operation}' for {data['name']}")

    return PackageUpdateEvent(
        name=str(data["name"]),
        pretty_name=str(data.get("pretty_name") or data["name"]),
        source_url=str(data.get("source_url") or ""),
        from_version=str(data["from_version"]),
        from_version_pretty=str(data.get("from_version_pretty") or data["from_version"]),
        to_version=str(data["to_version"]),
        to_version_pretty=str(data.get("to_version_pretty") or data["to_version"]),
        operation=operation,
    )


def load_update_events(path: Path) -> list[PackageUpdateEvent]:
    """
    Load package events from a JSON file holding a list of update records.

    Args:
        path: Path to the JSON file

    Returns:
        Events in file order

    Raises:
        UpdatesFileError: If the file cannot be read or parsed
    """
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise UpdatesFileError(f"Updates file not found: {path}")
    except (OSError, json.JSONDecodeError) as e:
        raise UpdatesFileError(f"Could not load updates from {path}: {e}") from e

    if not isinstance(data, list):
        raise UpdatesFileError(f"Expected a list of updates in {path}")

    return [event_from_dict(item) for item in data]
