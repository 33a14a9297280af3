"""Turn recorded package transitions into upgrade-notes messages."""

from pathlib import Path

from rich.markup import escape

from common.constants import (
    ALL_NOTES_ONLINE_MESSAGE,
    CHECK_NOTES_MESSAGE,
    NOTES_LIMIT,
    NOTES_ONLINE_MESSAGE,
)
from common.logger import get_logger

from .extractor import apply_display_limit, find_upgrade_notes
from .models import Direction, PackageTransition
from .output import OutputSink
from .recorder import UpdateRecorder
from .versions import is_numeric_version

logger = get_logger(__name__)


class UpgradeNotesReporter:
    """Decides what to show for each transition and writes it to an output sink."""

    def __init__(self, vendor_dir: Path, output: OutputSink, notes_limit: int = NOTES_LIMIT):
        """Initialize the reporter.

        Args:
            vendor_dir: Directory packages are installed into
            output: Sink the messages are written to
            notes_limit: Maximum number of note lines shown per package
        """
        self.vendor_dir = Path(vendor_dir)
        self.output = output
        self.notes_limit = notes_limit

    def report(self, recorder: UpdateRecorder) -> int:
        """Report every transition of a finished run.

        Returns:
            Number of packages for which a message was written
        """
        reported = 0
        for transition in recorder.all_transitions():
            if self.report_transition(transition):
                reported += 1
        return reported

    def report_transition(self, transition: PackageTransition) -> bool:
        """Write the message for a single transition.

        Returns:
            True if anything was written
        """
        # Moves between identical pretty versions (dev-main to dev-main) are not upgrades
        if transition.is_noop:
            logger.debug(f"Skipping {transition.name}: version unchanged")
            return False

        # Notes can only be matched on upgrades from a known numeric version
        if transition.direction == Direction.UPGRADE and is_numeric_version(
            transition.from_version_pretty
        ):
            notes = find_upgrade_notes(
                self.vendor_dir, transition.name, transition.from_version_pretty
            )
            if not notes:
                logger.debug(f"Skipping {transition.name}: no relevant upgrade notes")
                return False

            self._write_intro(transition)
            # The overflow marker carries markup, the notes themselves are shown verbatim
            too_long = len(notes) > self.notes_limit
            self.output.write(
                "\n" + apply_display_limit(notes, self.notes_limit), markup=too_long
            )
            self.output.write("\n" + ALL_NOTES_ONLINE_MESSAGE, newline=False)
        else:
            self._write_intro(transition)
            self.output.write("\n" + NOTES_ONLINE_MESSAGE, newline=False)

        self.output.write(transition.source_url, markup=False)
        return True

    def _write_intro(self, transition: PackageTransition) -> None:
        verb = "upgraded" if transition.direction == Direction.UPGRADE else "downgraded"
        self.output.write(
            f"\n  [bold yellow]Seems you have {verb} {escape(transition.pretty_name)}"
            f" from version {escape(transition.from_version_pretty)}"
            f" to {escape(transition.to_version_pretty)}.[/]"
        )
        self.output.write("\n" + CHECK_NOTES_MESSAGE)
