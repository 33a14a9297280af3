"""Shared constants for the upgrade-notes plugin.

For environment-based configuration (vendor directory, display limit), use the env module:
    from common.env import env
    vendor_dir = env.vendor_dir()
"""

# Name of the notes file shipped inside each package directory
UPGRADE_FILE_NAME = "UPGRADE.md"

# Maximum number of relevant lines printed for a single package
NOTES_LIMIT = 250

# Root directory packages are installed into, relative to the project
DEFAULT_VENDOR_DIR = "vendor"

# Default branch names the dependency manager treats as the newest version
DEFAULT_BRANCH_NAMES: set[str] = {"dev-master", "dev-trunk", "dev-default"}
DEFAULT_BRANCH_ALIAS = "9999999-dev"

NOTES_LIMIT_MESSAGE = (
    "  [bold yellow]The relevant notes for your upgrade are too long to be displayed here.[/]"
)
CHECK_NOTES_MESSAGE = (
    "  [bold]Please check the upgrade notes for possible incompatible changes"
    " and adjust your application code accordingly.[/]"
)
ALL_NOTES_ONLINE_MESSAGE = "  You can find the upgrade notes for all versions online at: "
NOTES_ONLINE_MESSAGE = "  You can find the upgrade notes online at: "
