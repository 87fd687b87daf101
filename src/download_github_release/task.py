"""Release download task: resolve, select, download.

The task is the boundary towards the host build system. Failures of any
step are logged for diagnostics and turned into a DownloadOutcome with no
local path; exceptions do not escape ``run()`` apart from cancellation.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from download_github_release.config import SettingsManager
from download_github_release.domain.outcome import DownloadOutcome
from download_github_release.domain.request import ReleaseRequest
from download_github_release.domain.result import Err
from download_github_release.download import DownloadService
from download_github_release.exceptions import (
    DownloadReleaseError,
    InvalidInputError,
)
from download_github_release.github import (
    ReleaseAPIClient,
    ReleaseResolver,
    select_asset,
)
from download_github_release.http_session import create_http_session
from download_github_release.logger import get_logger

if TYPE_CHECKING:
    import aiohttp

    from download_github_release.domain.types import GlobalConfig

logger = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class TaskInputs:
    """Parameters of one task invocation.

    Attributes:
        repo_name: Repository as ``owner/repo``
        release_file_name: Exact name of the asset to download
        destination_folder: Folder to download into (created if missing)
        get_latest: Use the newest release instead of tag_name
        tag_name: Exact release tag, required unless get_latest is set
        destination_file_name: Overrides the derived local file name

    """

    repo_name: str
    release_file_name: str
    destination_folder: Path
    get_latest: bool = False
    tag_name: str | None = None
    destination_file_name: str | None = None


class DownloadGithubReleaseTask:
    """Downloads one named asset of a GitHub release."""

    def __init__(
        self,
        inputs: TaskInputs,
        session: aiohttp.ClientSession | None = None,
        settings: GlobalConfig | None = None,
    ) -> None:
        """Initialize the task.

        Args:
            inputs: Task parameters
            session: Optional aiohttp session; one is created (and closed)
                per run when omitted
            settings: Global configuration; loaded from settings.conf
                when omitted

        """
        self.inputs = inputs
        self.session = session
        self.settings = settings or SettingsManager().load_global_config()
        self.outcome: DownloadOutcome | None = None

    def execute(self) -> bool:
        """Run the task synchronously and report success.

        The outcome is kept on ``self.outcome``.
        """
        return asyncio.run(self.run()).succeeded

    async def run(self) -> DownloadOutcome:
        """Resolve the release, select the asset and download it."""
        if self.session is not None:
            outcome = await self._run_with_session(self.session)
        else:
            async with create_http_session(self.settings) as session:
                outcome = await self._run_with_session(session)

        self.outcome = outcome
        return outcome

    async def _run_with_session(
        self, session: aiohttp.ClientSession
    ) -> DownloadOutcome:
        inputs = self.inputs
        network = self.settings["network"]

        try:
            request = ReleaseRequest.from_repo_name(
                inputs.repo_name,
                use_latest=inputs.get_latest,
                tag_name=inputs.tag_name,
            )
        except InvalidInputError as e:
            return self._fail(e)

        logger.debug(
            "Looking up %s in %s (%s)",
            inputs.release_file_name,
            request.full_name,
            "latest" if request.use_latest else request.tag_name,
        )
        resolver = ReleaseResolver(
            ReleaseAPIClient(session, api_url=network["api_url"])
        )
        resolved = await resolver.resolve_request(request)
        if isinstance(resolved, Err):
            return self._fail(resolved.error, repo=request.full_name)
        release = resolved.value

        selected = select_asset(release, inputs.release_file_name)
        if isinstance(selected, Err):
            return self._fail(
                selected.error,
                repo=request.full_name,
                tag_name=release.tag_name,
            )
        asset = selected.value
        logger.debug(
            "Selected %s from %s (%d bytes)",
            asset.name,
            release.tag_name,
            asset.size,
        )

        service = DownloadService(session, chunk_size=network["chunk_size"])
        downloaded = await service.download(
            asset.browser_download_url,
            Path(inputs.destination_folder),
            inputs.destination_file_name,
        )
        if isinstance(downloaded, Err):
            return self._fail(
                downloaded.error,
                repo=request.full_name,
                tag_name=release.tag_name,
                asset_name=asset.name,
            )

        return DownloadOutcome(
            local_path=downloaded.value.path,
            repo=request.full_name,
            tag_name=release.tag_name,
            asset_name=asset.name,
            skipped=downloaded.value.skipped,
        )

    def _fail(
        self,
        error: DownloadReleaseError,
        repo: str | None = None,
        tag_name: str | None = None,
        asset_name: str | None = None,
    ) -> DownloadOutcome:
        logger.error("❌ %s", error)
        return DownloadOutcome(
            local_path=None,
            repo=repo or self.inputs.repo_name,
            tag_name=tag_name,
            asset_name=asset_name,
            error=error,
        )
