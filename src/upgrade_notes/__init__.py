"""Show the upgrade notes relevant to package version changes."""

from .events import EventDispatcher, LifecycleEvent, UpgradeNotesPlugin
from .extractor import apply_display_limit, extract_relevant_notes, find_upgrade_notes
from .models import Direction, PackageTransition, PackageUpdateEvent
from .recorder import UpdateRecorder
from .versions import get_major_version, is_numeric_version

__all__ = [
    "Direction",
    "EventDispatcher",
    "LifecycleEvent",
    "PackageTransition",
    "PackageUpdateEvent",
    "UpdateRecorder",
    "UpgradeNotesPlugin",
    "apply_display_limit",
    "extract_relevant_notes",
    "find_upgrade_notes",
    "get_major_version",
    "is_numeric_version",
]
