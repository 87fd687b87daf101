"""Application-wide constants for download-github-release."""

from typing import Final

# Configuration layout
CONFIG_DIR_NAME: Final = "download-github-release"
CONFIG_FILE_NAME: Final = "settings.conf"
DEFAULT_CONFIG_SUBDIR: Final = ".config"
LOG_FILE_NAME: Final = "download-github-release.log"

CONFIG_DIR_ENV: Final = "DOWNLOAD_GITHUB_RELEASE_CONFIG_DIR"
LOG_DIR_ENV: Final = "DOWNLOAD_GITHUB_RELEASE_LOG_DIR"

SECTION_NETWORK: Final = "network"

KEY_LOG_LEVEL: Final = "log_level"
KEY_CONSOLE_LOG_LEVEL: Final = "console_log_level"
KEY_LOG_TO_FILE: Final = "log_to_file"
KEY_TIMEOUT_SECONDS: Final = "timeout_seconds"
KEY_API_URL: Final = "api_url"
KEY_CHUNK_SIZE: Final = "chunk_size"

# Defaults
DEFAULT_LOG_LEVEL: Final = "INFO"
DEFAULT_CONSOLE_LOG_LEVEL: Final = "WARNING"
DEFAULT_LOG_TO_FILE: Final = False
DEFAULT_TIMEOUT_SECONDS: Final = 0  # 0 keeps aiohttp's own default timeout
DEFAULT_CHUNK_SIZE: Final = 8192

# GitHub API
GITHUB_API_URL: Final = "https://api.github.com"
GITHUB_ACCEPT_HEADER: Final = "application/vnd.github+json"
USER_AGENT: Final = "Download-Github-Releases-Task"

# Logging formats
LOG_CONSOLE_FORMAT: Final = (
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
LOG_CONSOLE_DATE_FORMAT: Final = "%H:%M:%S"
LOG_FILE_FORMAT: Final = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "[%(funcName)s:%(lineno)d] - %(message)s"
)
LOG_FILE_DATE_FORMAT: Final = "%Y-%m-%d %H:%M:%S"
LOG_ROTATION_THRESHOLD_BYTES: Final = 10 * 1024 * 1024
LOG_BACKUP_COUNT: Final = 3

LOG_COLORS: Final = {
    "DEBUG": "\033[36m",
    "INFO": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[35m",
    "RESET": "\033[0m",
}
