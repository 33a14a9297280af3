"""Environment configuration interface for upgrade-notes.

This module provides a clean interface for accessing environment variables,
centralizing all environment variable access in one place.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

from .constants import DEFAULT_VENDOR_DIR, NOTES_LIMIT

# Load environment variables from .env file if it exists
load_dotenv()


class Environment:
    """Interface for accessing environment configuration."""

    @staticmethod
    def vendor_dir() -> Path:
        """Get the directory packages are installed into.

        Returns:
            Vendor directory path, defaults to ./vendor
        """
        raw = os.getenv("UPGRADE_NOTES_VENDOR_DIR", DEFAULT_VENDOR_DIR).rstrip("/")
        return Path(raw or "/")

    @staticmethod
    def notes_limit() -> int:
        """Get the maximum number of note lines shown per package.

        Returns:
            Line limit, defaults to 250
        """
        return int(os.getenv("UPGRADE_NOTES_LIMIT", str(NOTES_LIMIT)))

    @staticmethod
    def log_level() -> str:
        """Get the logging level.

        Returns:
            Upper-cased level name, defaults to 'INFO'
        """
        return os.getenv("LOG_LEVEL", "INFO").upper()


# Singleton instance for convenient access
env = Environment()
