"""Configuration management - settings file and path utilities."""

from download_github_release.config.paths import Paths
from download_github_release.config.settings import (
    SettingsManager,
    get_default_global_config,
)

__all__ = ["Paths", "SettingsManager", "get_default_global_config"]
