"""
Extract the part of an upgrade-notes file that applies to one upgrade.

Notes files are a sequence of sections, each opened by a heading such as
"Upgrade from Widgets 2.5.0". Sections are read top to bottom starting at
the first heading, and reading stops at the first heading that is older than
the version being upgraded from, provided that either the exact starting
version has already been seen or the heading predates its major line.
"""

import re
from pathlib import Path

from common.constants import NOTES_LIMIT, NOTES_LIMIT_MESSAGE
from common.logger import get_logger

from .notes_reader import read_notes_lines
from .versions import get_major_version, version_lt

logger = get_logger(__name__)

HEADING_PATTERN = re.compile(
    r"^Upgrade from (?P<name>\w+) (?P<version>[0-9]\.[0-9]+\.?[0-9.]*)", re.IGNORECASE
)


def parse_heading_version(line: str) -> str | None:
    """Return the version of an "Upgrade from <name> <version>" heading, or None."""
    match = HEADING_PATTERN.match(line)
    if match:
        return match.group("version")
    return None


def extract_relevant_notes(lines: list[str], from_version: str) -> list[str]:
    """
    Collect the lines relevant to an upgrade starting at from_version.

    Args:
        lines: Lines of the notes file
        from_version: Human-readable version the package was upgraded from

    Returns:
        Relevant lines including their headings; empty if nothing applies
    """
    from_version_major = get_major_version(from_version)

    relevant_lines: list[str] = []
    consuming = False
    found_exact_match = False

    for line in lines:
        version = parse_heading_version(line)
        if version is not None:
            if version == from_version:
                found_exact_match = True
            if version_lt(version, from_version) and (
                found_exact_match or version_lt(version, from_version_major)
            ):
                break
            consuming = True

        if consuming:
            relevant_lines.append(line)

    return relevant_lines


def find_upgrade_notes(vendor_dir: Path, package_name: str, from_version: str) -> list[str] | None:
    """
    Read a package's notes file and extract the lines relevant to its upgrade.

    Returns:
        Relevant lines (possibly empty), or None when the package has no
        readable notes file
    """
    lines = read_notes_lines(vendor_dir, package_name)
    if lines is None:
        return None

    notes = extract_relevant_notes(lines, from_version)
    logger.debug(f"Found {len(notes)} relevant note lines for {package_name} from {from_version}")
    return notes


def apply_display_limit(notes: list[str], limit: int = NOTES_LIMIT) -> str:
    """
    Render notes for display, or a warning marker if there are too many lines.

    Args:
        notes: Relevant note lines
        limit: Maximum number of lines to display

    Returns:
        Indented notes text, or the "too long" marker when len(notes) > limit
    """
    if len(notes) > limit:
        return NOTES_LIMIT_MESSAGE
    return "  " + "\n ".join(notes).strip()
