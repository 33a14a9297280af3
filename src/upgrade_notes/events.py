"""Lifecycle events and the plugin that listens to them."""

from collections import defaultdict
from collections.abc import Callable
from enum import Enum
from pathlib import Path
from typing import Any

from common.constants import NOTES_LIMIT
from common.logger import get_logger

from .models import PackageUpdateEvent
from .output import OutputSink
from .recorder import UpdateRecorder
from .reporter import UpgradeNotesReporter

logger = get_logger(__name__)

Handler = Callable[[Any], object]


class LifecycleEvent(str, Enum):
    """Events emitted by the dependency manager during an update run."""

    PRE_UPDATE_CMD = "pre-update-cmd"
    POST_PACKAGE_UPDATE = "post-package-update"
    POST_UPDATE_CMD = "post-update-cmd"


class EventDispatcher:
    """Registration table mapping each lifecycle event to its handlers."""

    def __init__(self):
        self._listeners: dict[LifecycleEvent, list[Handler]] = defaultdict(list)

    def add_listener(self, event: LifecycleEvent, handler: Handler) -> None:
        self._listeners[event].append(handler)

    def remove_listener(self, event: LifecycleEvent, handler: Handler) -> None:
        if handler in self._listeners.get(event, []):
            self._listeners[event].remove(handler)

    def listeners(self, event: LifecycleEvent) -> list[Handler]:
        return list(self._listeners.get(event, []))

    def dispatch(self, event: LifecycleEvent, payload: Any = None) -> None:
        """Call every handler registered for an event, in registration order."""
        for handler in self.listeners(event):
            handler(payload)


class UpgradeNotesPlugin:
    """Records package updates during a run and prints upgrade notes at its end."""

    def __init__(
        self,
        vendor_dir: Path,
        output: OutputSink,
        notes_limit: int = NOTES_LIMIT,
    ):
        """Initialize the plugin.

        Args:
            vendor_dir: Directory packages are installed into
            output: Sink the upgrade notes are written to
            notes_limit: Maximum number of note lines shown per package
        """
        self.reporter = UpgradeNotesReporter(vendor_dir, output, notes_limit)
        self.recorder: UpdateRecorder | None = None

    @staticmethod
    def subscribed_events() -> dict[LifecycleEvent, str]:
        """Map each event this plugin listens to onto the name of its handler."""
        return {
            LifecycleEvent.PRE_UPDATE_CMD: "start_run",
            LifecycleEvent.POST_PACKAGE_UPDATE: "check_package_update",
            LifecycleEvent.POST_UPDATE_CMD: "show_upgrade_notes",
        }

    def activate(self, dispatcher: EventDispatcher) -> None:
        for event, method_name in self.subscribed_events().items():
            dispatcher.add_listener(event, getattr(self, method_name))

    def deactivate(self, dispatcher: EventDispatcher) -> None:
        for event, method_name in self.subscribed_events().items():
            dispatcher.remove_listener(event, getattr(self, method_name))

    def uninstall(self) -> None:
        """Nothing is persisted, so there is nothing to clean up."""
        pass

    def start_run(self, _payload: Any = None) -> None:
        self.recorder = UpdateRecorder()

    def check_package_update(self, event: PackageUpdateEvent) -> None:
        if self.recorder is None:
            self.start_run()
        self.recorder.record_event(event)

    def show_upgrade_notes(self, _payload: Any = None) -> int:
        """Report the run's transitions and discard the recorder.

        Returns:
            Number of packages for which notes were printed
        """
        recorder, self.recorder = self.recorder, None
        if recorder is None:
            logger.debug("No package updates recorded in this run")
            return 0
        return self.reporter.report(recorder)
