"""Release resolution: turn a repository and tag selection into a Release.

The resolver performs at most one API call per invocation and never
retries. Input problems are reported before any request is made; every
failure of the API call itself collapses into a ResolutionError that
keeps the original exception as its cause.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from download_github_release.domain.result import Err, Ok, Result
from download_github_release.exceptions import (
    InvalidInputError,
    ResolutionError,
)
from download_github_release.github.models import Release
from download_github_release.logger import get_logger

if TYPE_CHECKING:
    from download_github_release.domain.request import ReleaseRequest
    from download_github_release.github.client import ReleaseAPIClient

logger = get_logger(__name__)


class ReleaseResolver:
    """Looks up one release through the GitHub API client."""

    def __init__(self, client: ReleaseAPIClient) -> None:
        """Initialize the resolver.

        Args:
            client: GitHub API client used for the lookup

        """
        self.client = client

    async def resolve(
        self,
        owner: str,
        repo: str,
        use_latest: bool,  # noqa: FBT001
        tag_name: str | None = None,
    ) -> Result[Release]:
        """Resolve the release selected by tag or by recency.

        Args:
            owner: Repository owner
            repo: Repository name
            use_latest: Select the newest release instead of tag_name
            tag_name: Exact tag, required when use_latest is False

        Returns:
            Ok(Release) or Err(InvalidInputError | ResolutionError)

        """
        target = f"{owner}/{repo}"
        if not owner or not repo:
            return Err(
                InvalidInputError(
                    "repository must be given as 'owner/repo'", target=target
                )
            )
        if not use_latest and not tag_name:
            return Err(
                InvalidInputError(
                    "tag name is required when not using the latest release",
                    target=target,
                )
            )

        try:
            if use_latest:
                release = await self._fetch_latest(owner, repo)
            else:
                logger.debug("Fetching release %s of %s", tag_name, target)
                api_data = await self.client.fetch_release_by_tag(
                    owner, repo, tag_name
                )
                release = Release.from_api_response(owner, repo, api_data)
        except Exception as e:
            logger.exception("Failed to fetch release for %s", target)
            error = ResolutionError(str(e) or type(e).__name__, target=target)
            error.__cause__ = e
            return Err(error)

        logger.debug(
            "Resolved %s to release %s (%s%s) with %d asset(s)",
            target,
            release.tag_name,
            release.name or "untitled",
            ", prerelease" if release.prerelease else "",
            len(release.assets or []),
        )
        return Ok(release)

    async def _fetch_latest(self, owner: str, repo: str) -> Release:
        """Fetch the release list and take its first (newest) entry."""
        logger.debug("Fetching latest release of %s/%s", owner, repo)
        releases = await self.client.fetch_releases(owner, repo)
        if not releases:
            msg = "repository has no releases"
            raise LookupError(msg)
        return Release.from_api_response(owner, repo, releases[0])

    async def resolve_request(
        self, request: ReleaseRequest
    ) -> Result[Release]:
        """Resolve a validated ReleaseRequest."""
        return await self.resolve(
            request.owner, request.repo, request.use_latest, request.tag_name
        )
