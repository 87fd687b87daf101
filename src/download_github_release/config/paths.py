"""Path constants and utilities for configuration."""

import os
from pathlib import Path

from download_github_release.constants import (
    CONFIG_DIR_ENV,
    CONFIG_DIR_NAME,
    CONFIG_FILE_NAME,
    DEFAULT_CONFIG_SUBDIR,
)


class Paths:
    """Application paths and directory structure."""

    HOME_DIR = Path.home()
    CONFIG_BASE_DIR = HOME_DIR / DEFAULT_CONFIG_SUBDIR
    CONFIG_DIR = CONFIG_BASE_DIR / CONFIG_DIR_NAME

    @classmethod
    def config_dir(cls) -> Path:
        """Return the config directory, honoring the environment override."""
        env_dir = os.getenv(CONFIG_DIR_ENV)
        if env_dir:
            return cls.expand_path(env_dir)
        return cls.CONFIG_DIR

    @classmethod
    def settings_file(cls) -> Path:
        """Return the path of settings.conf."""
        return cls.config_dir() / CONFIG_FILE_NAME

    @classmethod
    def expand_path(cls, path_str: str) -> Path:
        """Expand ``~`` and resolve a path string.

        Args:
            path_str: Path that may start with ~ or be relative

        Returns:
            Absolute path

        """
        return Path(path_str).expanduser().resolve()
