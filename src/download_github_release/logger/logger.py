"""Main logger module providing public API functions.

- setup_logging(): Configure logging with the QueueHandler architecture
- get_logger(): Get or create a logger under the package root
- flush_all_handlers(): Ensure pending log records are written out
- clear_logger_state(): Clear global logger state for testing
"""

import atexit
import contextlib
import logging
import time
from pathlib import Path

from download_github_release.logger.config import load_log_settings
from download_github_release.logger.handlers import (
    ROOT_LOGGER_NAME,
    setup_root_logger,
)
from download_github_release.logger.state import get_state

FLUSH_TIMEOUT_SECONDS = 5.0


def flush_all_handlers() -> None:
    """Flush all handlers in the QueueListener to ensure writes complete.

    Waits for the queue to drain, then flushes each handler. Safe to call
    from any thread.
    """
    state = get_state()
    if state.queue_listener is None or state.log_queue is None:
        return

    # QueueListener doesn't use task_done(), so poll the queue
    start_time = time.time()
    while not state.log_queue.empty():
        if time.time() - start_time > FLUSH_TIMEOUT_SECONDS:
            break
        time.sleep(0.01)

    time.sleep(0.1)

    for handler in state.queue_listener.handlers:
        with contextlib.suppress(OSError, ValueError):
            handler.flush()


def _cleanup_logging() -> None:
    """Stop the QueueListener on interpreter exit."""
    state = get_state()
    if state.queue_listener is not None:
        flush_all_handlers()
        state.queue_listener.stop()
        state.queue_listener = None


atexit.register(_cleanup_logging)


def setup_logging(
    name: str = ROOT_LOGGER_NAME,
    console_level: str | None = None,
    file_level: str | None = None,
    log_file: Path | None = None,
    enable_file_logging: bool = False,  # noqa: FBT001, FBT002
) -> logging.Logger:
    """Configure logging and return the named logger.

    The root ``download_github_release`` logger is initialized once;
    child loggers propagate to it.

    Args:
        name: Logger name, typically __name__
        console_level: Console log level ("DEBUG", "INFO", "WARNING")
        file_level: File log level ("DEBUG", "INFO")
        log_file: Path to log file
        enable_file_logging: Whether to enable file logging

    Returns:
        Logger instance

    Raises:
        ConfigurationError: If file logging setup fails

    """
    state = get_state()
    with state.lock:
        if not state.root_initialized:
            if console_level is None or file_level is None or log_file is None:
                cfg_console, cfg_file, cfg_path = load_log_settings()
                console_level = console_level or cfg_console
                file_level = file_level or cfg_file
                log_file = log_file or cfg_path

            setup_root_logger(
                state,
                console_level,
                file_level,
                log_file,
                enable_file_logging,
            )

    return logging.getLogger(name)


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Get a logger, initializing the root logger on first use.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Resolving %s", repo_name)

    """
    return setup_logging(name=name)


def clear_logger_state() -> None:
    """Clear global logger state for testing purposes.

    Stops the QueueListener and closes the handlers of every logger in
    the package namespace. Logger objects are kept, so module-level
    loggers stay attached to the root. Not meant for production code.
    """
    state = get_state()
    with state.lock:
        if state.queue_listener is not None:
            flush_all_handlers()
            state.queue_listener.stop()
            for handler in state.queue_listener.handlers:
                handler.close()
            state.queue_listener = None

        state.log_queue = None
        state.root_initialized = False
        state.config_applied = False

        for logger_name in list(logging.Logger.manager.loggerDict.keys()):
            if logger_name.startswith(ROOT_LOGGER_NAME):
                log_instance = logging.getLogger(logger_name)
                for handler in log_instance.handlers[:]:
                    handler.close()
                    log_instance.removeHandler(handler)
