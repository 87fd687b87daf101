"""Pytest configuration and fixtures for download-github-release tests.

Provides:
- Log propagation so caplog sees records from the package loggers
- Isolation of the config and log directories from the real home
- Mock aiohttp session and response factories
"""

import logging
from collections.abc import AsyncGenerator, Callable
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from download_github_release.constants import CONFIG_DIR_ENV, LOG_DIR_ENV


async def async_chunk_gen(
    chunks: list[bytes],
    error: BaseException | None = None,
) -> AsyncGenerator[bytes, None]:
    """Yield chunks like ``response.content.iter_chunked``, then fail.

    Args:
        chunks: Byte chunks to yield
        error: Raised after the last chunk when given

    """
    for chunk in chunks:
        yield chunk
    if error is not None:
        raise error


@pytest.fixture(autouse=True)
def enable_log_propagation():
    """Enable log propagation so caplog captures package log records."""
    original_propagation = {}
    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith("download_github_release"):
            logger = logging.getLogger(name)
            original_propagation[name] = logger.propagate
            logger.propagate = True

    yield

    for name, propagate_value in original_propagation.items():
        logging.getLogger(name).propagate = propagate_value


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path_factory, monkeypatch):
    """Keep settings and logs of the test run out of the home directory."""
    base = tmp_path_factory.mktemp("app")
    monkeypatch.setenv(CONFIG_DIR_ENV, str(base / "config"))
    monkeypatch.setenv(LOG_DIR_ENV, str(base / "logs"))
    return base


@pytest.fixture
def mock_session() -> MagicMock:
    """Provide a mock aiohttp.ClientSession."""
    return MagicMock()


@pytest.fixture
def make_response() -> Callable[..., AsyncMock]:
    """Build mock aiohttp responses usable with ``async with``."""

    def _make(
        chunks: list[bytes] | None = None,
        headers: dict[str, str] | None = None,
        url: str = "https://example.com/owner/repo/download/v1/app.zip",
        status: int = 200,
        json_data: Any = None,  # noqa: ANN401
        raise_for_status: BaseException | None = None,
        stream_error: BaseException | None = None,
    ) -> AsyncMock:
        response = AsyncMock()
        response.__aenter__.return_value = response
        response.__aexit__.return_value = None
        response.status = status
        response.headers = headers or {}
        response.url = url
        response.raise_for_status = MagicMock(side_effect=raise_for_status)
        response.json = AsyncMock(return_value=json_data)
        response.content.iter_chunked = MagicMock(
            side_effect=lambda size: async_chunk_gen(
                chunks or [], stream_error
            )
        )
        return response

    return _make
