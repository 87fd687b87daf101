"""Configuration loading and updating for logging system.

Logger bootstrap happens at import time, before settings.conf is read, so
this module hands out safe defaults first and applies configured levels
later through update_logger_from_config().
"""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from download_github_release.constants import (
    CONFIG_DIR_NAME,
    DEFAULT_CONFIG_SUBDIR,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    LOG_DIR_ENV,
    LOG_FILE_NAME,
)
from download_github_release.logger.handlers import setup_root_logger

if TYPE_CHECKING:
    from download_github_release.domain.types import GlobalConfig
    from download_github_release.logger.state import _LoggerState


def load_log_settings() -> tuple[str, str, Path]:
    """Load default console level, file level, and file path.

    Environment Variable Override:
        DOWNLOAD_GITHUB_RELEASE_LOG_DIR: Overrides the log directory.
        Used by the test suite to keep logs out of the home directory.

    Returns:
        Tuple of (console_level, file_level, log_path)

    """
    env_log_dir = os.getenv(LOG_DIR_ENV)
    if env_log_dir:
        log_path = Path(env_log_dir).expanduser() / LOG_FILE_NAME
    else:
        log_path = (
            Path.home()
            / DEFAULT_CONFIG_SUBDIR
            / CONFIG_DIR_NAME
            / "logs"
            / LOG_FILE_NAME
        )

    return DEFAULT_CONSOLE_LOG_LEVEL, DEFAULT_LOG_LEVEL, log_path


def update_logger_from_config(
    state: _LoggerState, config: GlobalConfig
) -> None:
    """Update logger handler levels from global config.

    Handler levels are updated in place. The only time handlers change is
    when ``log_to_file`` is enabled and the listener has no file handler
    yet; the listener is then rebuilt with one.

    Args:
        state: Logger state object (from logger.state module)
        config: Loaded global configuration

    """
    if config["log_to_file"] and not _has_file_handler(state):
        _, _, log_file = load_log_settings()
        if state.queue_listener is not None:
            state.queue_listener.stop()
        setup_root_logger(
            state,
            config["console_log_level"],
            config["log_level"],
            log_file,
            enable_file_logging=True,
        )
        state.config_applied = True
        return

    console_level = getattr(
        logging, config["console_log_level"], logging.WARNING
    )
    file_level = getattr(logging, config["log_level"], logging.INFO)

    if state.queue_listener is not None:
        for handler in state.queue_listener.handlers:
            if isinstance(handler, RotatingFileHandler):
                handler.setLevel(file_level)
            elif isinstance(handler, logging.StreamHandler):
                handler.setLevel(console_level)

    state.config_applied = True


def _has_file_handler(state: _LoggerState) -> bool:
    """Return True if the running listener already writes to a file."""
    if state.queue_listener is None:
        return False
    return any(
        isinstance(handler, RotatingFileHandler)
        for handler in state.queue_listener.handlers
    )
