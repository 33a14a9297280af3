#!/usr/bin/env python3
"""CLI interface for upgrade_notes module."""

import argparse
from pathlib import Path

from rich.markup import escape

from common.env import env
from common.logger import error, get_logger, setup_logging

from .events import EventDispatcher, LifecycleEvent, UpgradeNotesPlugin
from .exceptions import UpdatesFileError
from .extractor import apply_display_limit, extract_relevant_notes
from .notes_reader import read_notes_file
from .output import ConsoleOutput
from .updates_io import load_update_events
from .versions import is_numeric_version

logger = get_logger(__name__)


def cmd_extract(args):
    """Print the notes of a single file relevant to an upgrade.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    if not is_numeric_version(args.from_version):
        error(f"'{escape(args.from_version)}' is not a numeric version")
        return 1

    lines = read_notes_file(args.file)
    if lines is None:
        error(f"No readable notes file at {escape(str(args.file))}")
        return 1

    notes = extract_relevant_notes(lines, args.from_version)
    if not notes:
        logger.info(f"No relevant upgrade notes for version {escape(args.from_version)}")
        return 0

    output = ConsoleOutput()
    output.write(apply_display_limit(notes, args.limit), markup=len(notes) > args.limit)
    return 0


def cmd_report(args):
    """Replay recorded package updates and print their upgrade notes.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    try:
        events = load_update_events(args.updates)
    except UpdatesFileError as e:
        error(escape(str(e)))
        return 1

    dispatcher = EventDispatcher()
    plugin = UpgradeNotesPlugin(args.vendor_dir, ConsoleOutput(), args.limit)
    plugin.activate(dispatcher)

    dispatcher.dispatch(LifecycleEvent.PRE_UPDATE_CMD)
    for event in events:
        dispatcher.dispatch(LifecycleEvent.POST_PACKAGE_UPDATE, event)
    dispatcher.dispatch(LifecycleEvent.POST_UPDATE_CMD)

    plugin.deactivate(dispatcher)
    return 0


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Show the upgrade notes relevant to package version changes"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # Extract command
    extract_parser = subparsers.add_parser(
        "extract", help="Print the notes of one UPGRADE.md relevant to an upgrade"
    )
    extract_parser.add_argument(
        "--file",
        type=Path,
        required=True,
        help="Path to the upgrade notes file",
    )
    extract_parser.add_argument(
        "--from-version",
        required=True,
        help="Version the package was upgraded from (e.g. 2.0.10)",
    )
    extract_parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Maximum number of lines to display (default: UPGRADE_NOTES_LIMIT or 250)",
    )
    extract_parser.set_defaults(func=cmd_extract)

    # Report command
    report_parser = subparsers.add_parser(
        "report", help="Print upgrade notes for package updates listed in a JSON file"
    )
    report_parser.add_argument(
        "--updates",
        type=Path,
        required=True,
        help="JSON file with a list of package update records",
    )
    report_parser.add_argument(
        "--vendor-dir",
        type=Path,
        default=None,
        help="Directory packages are installed into (default: UPGRADE_NOTES_VENDOR_DIR or ./vendor)",
    )
    report_parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Maximum number of lines to display per package (default: UPGRADE_NOTES_LIMIT or 250)",
    )
    report_parser.set_defaults(func=cmd_report)

    args = parser.parse_args(argv)
    setup_logging(level=env.log_level())

    # Fall back to the environment for options left unset
    if args.command == "report" and args.vendor_dir is None:
        args.vendor_dir = env.vendor_dir()
    if args.limit is None:
        try:
            args.limit = env.notes_limit()
        except ValueError:
            error("UPGRADE_NOTES_LIMIT must be a whole number")
            return 1

    return args.func(args)


if __name__ == "__main__":
    exit(main())
