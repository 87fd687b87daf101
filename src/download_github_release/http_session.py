"""HTTP session utilities.

Creates the aiohttp session shared by the release lookup and the asset
download of one invocation.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import aiohttp

from download_github_release.constants import USER_AGENT
from download_github_release.domain.types import GlobalConfig


def build_timeout(global_config: GlobalConfig) -> aiohttp.ClientTimeout:
    """Build the client timeout from the network settings.

    A ``timeout_seconds`` of 0 keeps aiohttp's default timeout.
    """
    timeout_seconds = int(global_config["network"]["timeout_seconds"])
    if timeout_seconds <= 0:
        return aiohttp.ClientTimeout()

    return aiohttp.ClientTimeout(
        total=timeout_seconds * 60,
        sock_read=timeout_seconds * 3,
        sock_connect=timeout_seconds,
    )


@asynccontextmanager
async def create_http_session(
    global_config: GlobalConfig,
) -> AsyncIterator[aiohttp.ClientSession]:
    """Create configured HTTP session.

    Args:
        global_config: Global configuration dictionary

    Yields:
        Configured aiohttp.ClientSession

    """
    async with aiohttp.ClientSession(
        timeout=build_timeout(global_config),
        headers={"User-Agent": USER_AGENT},
    ) as session:
        yield session
