"""Logging utilities for download-github-release.

All loggers hang below the ``download_github_release`` root logger, which
writes through a QueueHandler to a QueueListener thread owning the console
handler (stderr) and, when enabled, a rotating file handler.

Usage:
    >>> from download_github_release.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Downloading %s", asset_name)  # %-style, no f-strings

Environment Variables:
    DOWNLOAD_GITHUB_RELEASE_LOG_DIR: Override the log file directory.

Rules:
    1. Always use ``logger = get_logger(__name__)``
    2. Never call logging.basicConfig()
    3. Never attach handlers to child loggers
"""

from download_github_release.logger.config import (
    update_logger_from_config as _update_config,
)
from download_github_release.logger.formatters import (
    ColoredConsoleFormatter,
    HybridConsoleFormatter,
)
from download_github_release.logger.handlers import ConfigurationError
from download_github_release.logger.logger import (
    clear_logger_state,
    flush_all_handlers,
    get_logger,
    setup_logging,
)
from download_github_release.logger.state import get_state

__all__ = [
    "ColoredConsoleFormatter",
    "ConfigurationError",
    "HybridConsoleFormatter",
    "clear_logger_state",
    "flush_all_handlers",
    "get_logger",
    "setup_logging",
    "update_logger_from_config",
]


def update_logger_from_config(config=None) -> None:  # noqa: ANN001
    """Apply log levels (and opt-in file logging) from global config.

    Args:
        config: Loaded GlobalConfig; read from settings.conf when omitted.

    """
    if config is None:
        # Loaded before taking the lock; the loader logs through get_logger
        from download_github_release.config import (  # noqa: PLC0415
            SettingsManager,
        )

        config = SettingsManager().load_global_config()

    state = get_state()
    with state.lock:
        _update_config(state, config)
