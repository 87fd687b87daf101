"""Global settings manager for the INI settings file.

The settings file is optional. A build step must not write into the
user's home directory on its own, so a missing file simply means
defaults.
"""

import configparser
from pathlib import Path

from download_github_release.config.parser import create_config_parser
from download_github_release.config.paths import Paths
from download_github_release.constants import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    DEFAULT_LOG_TO_FILE,
    DEFAULT_TIMEOUT_SECONDS,
    GITHUB_API_URL,
    KEY_API_URL,
    KEY_CHUNK_SIZE,
    KEY_CONSOLE_LOG_LEVEL,
    KEY_LOG_LEVEL,
    KEY_LOG_TO_FILE,
    KEY_TIMEOUT_SECONDS,
    SECTION_NETWORK,
)
from download_github_release.domain.types import GlobalConfig, NetworkConfig
from download_github_release.logger import get_logger

logger = get_logger(__name__)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_default_global_config() -> GlobalConfig:
    """Get default global configuration values."""
    return GlobalConfig(
        log_level=DEFAULT_LOG_LEVEL,
        console_log_level=DEFAULT_CONSOLE_LOG_LEVEL,
        log_to_file=DEFAULT_LOG_TO_FILE,
        network=NetworkConfig(
            timeout_seconds=DEFAULT_TIMEOUT_SECONDS,
            api_url=GITHUB_API_URL,
            chunk_size=DEFAULT_CHUNK_SIZE,
        ),
    )


class SettingsManager:
    """Loads settings.conf into a typed GlobalConfig."""

    def __init__(self, settings_file: Path | None = None) -> None:
        """Initialize settings manager.

        Args:
            settings_file: Settings file path
                (defaults to Paths.settings_file())

        """
        self.settings_file = settings_file or Paths.settings_file()

    def load_global_config(self) -> GlobalConfig:
        """Load global configuration, falling back to defaults.

        Invalid values are logged and replaced by their default; a file
        that cannot be parsed at all yields the full defaults.
        """
        defaults = get_default_global_config()
        if not self.settings_file.exists():
            logger.debug(
                "No settings file at %s, using defaults", self.settings_file
            )
            return defaults

        config = create_config_parser()
        try:
            config.read(self.settings_file, encoding="utf-8")
        except (configparser.Error, OSError, UnicodeDecodeError) as e:
            logger.warning(
                "Could not read %s (%s), using defaults", self.settings_file, e
            )
            return defaults

        return self._convert_to_global_config(config, defaults)

    def _convert_to_global_config(
        self, config: configparser.ConfigParser, defaults: GlobalConfig
    ) -> GlobalConfig:
        """Convert a parsed INI file to typed GlobalConfig."""
        main = config.defaults()
        network = (
            dict(config.items(SECTION_NETWORK, raw=True))
            if config.has_section(SECTION_NETWORK)
            else {}
        )
        default_network = defaults["network"]

        return GlobalConfig(
            log_level=self._get_level(
                main, KEY_LOG_LEVEL, defaults["log_level"]
            ),
            console_log_level=self._get_level(
                main, KEY_CONSOLE_LOG_LEVEL, defaults["console_log_level"]
            ),
            log_to_file=self._get_bool(
                main, KEY_LOG_TO_FILE, defaults["log_to_file"]
            ),
            network=NetworkConfig(
                timeout_seconds=self._get_int(
                    network,
                    KEY_TIMEOUT_SECONDS,
                    default_network["timeout_seconds"],
                ),
                api_url=network.get(
                    KEY_API_URL, default_network["api_url"]
                ).rstrip("/"),
                chunk_size=self._get_int(
                    network, KEY_CHUNK_SIZE, default_network["chunk_size"]
                )
                or default_network["chunk_size"],
            ),
        )

    @staticmethod
    def _get_level(section: dict[str, str], key: str, default: str) -> str:
        value = section.get(key, default).strip().upper()
        if value not in VALID_LOG_LEVELS:
            logger.warning(
                "Invalid %s '%s' in settings, using %s", key, value, default
            )
            return default
        return value

    @staticmethod
    def _get_int(section: dict[str, str], key: str, default: int) -> int:
        raw = section.get(key)
        if raw is None:
            return default
        try:
            value = int(raw)
        except ValueError:
            logger.warning(
                "Invalid %s '%s' in settings, using %s", key, raw, default
            )
            return default
        return max(value, 0)

    @staticmethod
    def _get_bool(
        section: dict[str, str],
        key: str,
        default: bool,  # noqa: FBT001
    ) -> bool:
        raw = section.get(key)
        if raw is None:
            return default
        value = raw.strip().lower()
        if value in ("1", "yes", "true", "on"):
            return True
        if value in ("0", "no", "false", "off"):
            return False
        logger.warning(
            "Invalid %s '%s' in settings, using %s", key, raw, default
        )
        return default
