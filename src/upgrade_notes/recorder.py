"""Run-scoped bookkeeping of package version transitions."""

from common.logger import get_logger

from .models import Direction, PackageTransition, PackageUpdateEvent
from .versions import is_upgrade

logger = get_logger(__name__)


class UpdateRecorder:
    """Accumulates the net transition of each package during one update run.

    A recorder is created when a run starts and dropped once the run has been
    reported. Recording the same package twice keeps only the latest data.
    """

    def __init__(self):
        self._transitions: dict[str, PackageTransition] = {}

    def record(
        self,
        name: str,
        pretty_name: str,
        source_url: str,
        from_version: str,
        from_version_pretty: str,
        to_version: str,
        to_version_pretty: str,
    ) -> PackageTransition:
        """Store or overwrite the transition for a package.

        Args:
            name: Canonical package name, used as the key
            pretty_name: Display name of the package
            source_url: Repository URL of the package, possibly empty
            from_version: Normalized version before the update
            from_version_pretty: Human-readable version before the update
            to_version: Normalized version after the update
            to_version_pretty: Human-readable version after the update

        Returns:
            The recorded transition
        """
        direction = (
            Direction.UPGRADE if is_upgrade(from_version, to_version) else Direction.DOWNGRADE
        )
        transition = PackageTransition(
            name=name,
            pretty_name=pretty_name,
            source_url=source_url or "",
            from_version=from_version,
            from_version_pretty=from_version_pretty,
            to_version=to_version,
            to_version_pretty=to_version_pretty,
            direction=direction,
        )

        if name in self._transitions:
            logger.debug(f"Replacing recorded transition for {name}")
        self._transitions[name] = transition
        return transition

    def record_event(self, event: PackageUpdateEvent) -> PackageTransition | None:
        """Record a package event, ignoring anything that is not an update."""
        if event.operation != "update":
            logger.debug(f"Ignoring {event.operation} of {event.name}")
            return None

        return self.record(
            name=event.name,
            pretty_name=event.pretty_name,
            source_url=event.source_url,
            from_version=event.from_version,
            from_version_pretty=event.from_version_pretty,
            to_version=event.to_version,
            to_version_pretty=event.to_version_pretty,
        )

    def all_transitions(self) -> list[PackageTransition]:
        """Return recorded transitions in the order packages were first seen."""
        return list(self._transitions.values())

    def __len__(self) -> int:
        return len(self._transitions)

    def __contains__(self, name: object) -> bool:
        return name in self._transitions
