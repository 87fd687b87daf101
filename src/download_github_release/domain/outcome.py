"""Results produced by the downloader and the task."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from download_github_release.exceptions import DownloadReleaseError


@dataclass(slots=True, frozen=True)
class DownloadedFile:
    """A file that now exists on disk.

    Attributes:
        path: Full local path of the file
        skipped: True if an existing file satisfied the request and
            nothing was written

    """

    path: Path
    skipped: bool = False


@dataclass(slots=True, frozen=True)
class DownloadOutcome:
    """The single externally visible result of one task invocation.

    ``local_path`` is None exactly when the invocation failed.
    """

    local_path: Path | None
    repo: str = ""
    tag_name: str | None = None
    asset_name: str | None = None
    skipped: bool = False
    error: DownloadReleaseError | None = None

    @property
    def succeeded(self) -> bool:
        """Return True if the file exists at local_path."""
        return self.local_path is not None

    def to_dict(self) -> dict[str, str | bool | None]:
        """Convert outcome to a JSON-serializable dictionary."""
        return {
            "path": str(self.local_path) if self.local_path else None,
            "repo": self.repo,
            "tag": self.tag_name,
            "asset": self.asset_name,
            "skipped": self.skipped,
            "error": str(self.error) if self.error else None,
        }
