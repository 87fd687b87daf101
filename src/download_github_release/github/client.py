"""Low-level GitHub API client for HTTP communication.

Requests are unauthenticated and never retried: each method performs
exactly one GET and surfaces any failure to the caller.
"""

from typing import Any
from urllib.parse import quote

import aiohttp

from download_github_release.constants import (
    GITHUB_ACCEPT_HEADER,
    GITHUB_API_URL,
    USER_AGENT,
)
from download_github_release.exceptions import GitHubAPIError
from download_github_release.logger import get_logger

logger = get_logger(__name__)

HTTP_OK_MAX = 299
HTTP_NOT_FOUND = 404
RATE_LIMIT_STATUSES = (403, 429)


class ReleaseAPIClient:
    """Handles direct communication with GitHub API for release data."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        api_url: str = GITHUB_API_URL,
    ) -> None:
        """Initialize the API client.

        Args:
            session: aiohttp session for making requests
            api_url: Base URL of the GitHub REST API

        """
        self.session = session
        self.api_url = api_url.rstrip("/")

    def _repo_url(self, owner: str, repo: str) -> str:
        return (
            f"{self.api_url}/repos/"
            f"{quote(owner, safe='')}/{quote(repo, safe='')}"
        )

    async def _fetch_from_api(self, url: str) -> Any:  # noqa: ANN401
        """Fetch and decode one JSON document from the API.

        Raises:
            GitHubAPIError: On a non-2xx status
            aiohttp.ClientError: On network failures

        """
        headers = {"Accept": GITHUB_ACCEPT_HEADER, "User-Agent": USER_AGENT}
        logger.debug("GET %s", url)

        async with self.session.get(url, headers=headers) as response:
            if response.status > HTTP_OK_MAX:
                raise self._error_for(response, url)
            return await response.json()

    @staticmethod
    def _error_for(
        response: aiohttp.ClientResponse, url: str
    ) -> GitHubAPIError:
        """Build the error describing a failed API response."""
        status = response.status
        remaining = response.headers.get("X-RateLimit-Remaining")
        if status in RATE_LIMIT_STATUSES and remaining == "0":
            reset = response.headers.get("X-RateLimit-Reset", "unknown")
            return GitHubAPIError(
                f"GitHub API rate limit exceeded (resets at {reset})",
                status,
                rate_limited=True,
            )
        if status == HTTP_NOT_FOUND:
            return GitHubAPIError(f"Not found: {url}", status)
        return GitHubAPIError(
            f"GitHub API returned HTTP {status} for {url}", status
        )

    async def fetch_release_by_tag(
        self, owner: str, repo: str, tag: str
    ) -> dict[str, Any]:
        """Fetch a specific release by tag.

        Args:
            owner: Repository owner
            repo: Repository name
            tag: Exact release tag

        Returns:
            Release data dict

        """
        url = (
            f"{self._repo_url(owner, repo)}/releases/tags/"
            f"{quote(tag, safe='')}"
        )
        return await self._fetch_from_api(url)

    async def fetch_releases(
        self, owner: str, repo: str
    ) -> list[dict[str, Any]]:
        """Fetch the releases of a repository, newest first.

        Only the first page of results is requested.

        Args:
            owner: Repository owner
            repo: Repository name

        Returns:
            List of release data dicts

        """
        url = f"{self._repo_url(owner, repo)}/releases"
        data = await self._fetch_from_api(url)
        if not isinstance(data, list):
            msg = f"Expected a list of releases, got {type(data).__name__}"
            raise TypeError(msg)
        return data
