"""Locate and read the UPGRADE.md shipped with an installed package."""

import re
from pathlib import Path

from common.constants import UPGRADE_FILE_NAME
from common.logger import get_logger

logger = get_logger(__name__)

# Any newline convention: \r\n, \n or \r
LINE_BREAK_PATTERN = re.compile(r"\r\n|\n|\r")


def upgrade_file_path(vendor_dir: Path, package_name: str) -> Path:
    """Return <vendor_dir>/<package_name>/UPGRADE.md."""
    return Path(vendor_dir) / package_name / UPGRADE_FILE_NAME


def split_lines(text: str) -> list[str]:
    """Split text on any newline convention, keeping empty lines."""
    return LINE_BREAK_PATTERN.split(text)


def read_notes_file(path: Path) -> list[str] | None:
    """
    Read a notes file as a list of lines.

    Args:
        path: Path to the notes file

    Returns:
        Lines of the file, or None if it is missing, unreadable or empty
    """
    if not path.is_file():
        logger.debug(f"No notes file found at {path}")
        return None

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Could not read {path}: {e}")
        return None

    if not text:
        logger.debug(f"{path} is empty")
        return None

    return split_lines(text)


def read_notes_lines(vendor_dir: Path, package_name: str) -> list[str] | None:
    """Read the UPGRADE.md of a package installed under vendor_dir."""
    return read_notes_file(upgrade_file_path(vendor_dir, package_name))
