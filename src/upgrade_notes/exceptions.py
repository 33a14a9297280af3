"""Exceptions raised by the upgrade-notes plugin."""


class UpgradeNotesError(Exception):
    """Base exception for upgrade-notes operations."""

    pass


class UpdatesFileError(UpgradeNotesError):
    """A file of recorded package updates could not be loaded."""

    pass
