"""Data models for package transitions observed during an update run."""

from dataclasses import dataclass
from enum import Enum
from typing import Literal


class Direction(str, Enum):
    """Direction of a version transition."""

    UPGRADE = "up"
    DOWNGRADE = "down"


@dataclass(frozen=True)
class PackageUpdateEvent:
    """A single package operation reported by the dependency manager."""

    name: str
    pretty_name: str
    source_url: str
    from_version: str
    from_version_pretty: str
    to_version: str
    to_version_pretty: str
    operation: Literal["install", "update", "uninstall"] = "update"


@dataclass
class PackageTransition:
    """Net version transition of one package within a run."""

    name: str
    pretty_name: str
    source_url: str
    from_version: str
    from_version_pretty: str
    to_version: str
    to_version_pretty: str
    direction: Direction

    @property
    def is_noop(self) -> bool:
        """Check if the pretty versions are identical (e.g. dev-main to dev-main)."""
        return self.from_version_pretty == self.to_version_pretty
