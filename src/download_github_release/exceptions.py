"""Exception classes for download-github-release operations."""

from download_github_release.domain.types import FailureKind


class DownloadReleaseError(Exception):
    """Base exception for download-github-release operations."""

    error_prefix: str = "Operation failed"
    kind: FailureKind = FailureKind.IO_FAILURE

    def __init__(self, message: str, target: str | None = None) -> None:
        """Initialize error with message and optional target.

        Args:
            message: Error message describing the failure.
            target: Optional name of the target that failed.

        """
        super().__init__(message)
        self.message = message
        self.target = target

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.target:
            return f"{self.error_prefix} for '{self.target}': {self.message}"
        return f"{self.error_prefix}: {self.message}"


class InvalidInputError(DownloadReleaseError):
    """Raised when task inputs are malformed."""

    error_prefix = "Invalid input"
    kind = FailureKind.INVALID_INPUT


class ResolutionError(DownloadReleaseError):
    """Raised when the release lookup fails for any reason."""

    error_prefix = "Release lookup failed"
    kind = FailureKind.RESOLUTION_FAILURE


class NoMatchingAssetError(DownloadReleaseError):
    """Raised when the release has no asset with the requested name."""

    error_prefix = "No matching asset"
    kind = FailureKind.NO_MATCHING_ASSET


class UnknownFileNameError(DownloadReleaseError):
    """Raised when no destination file name can be determined."""

    error_prefix = "Unknown file name"
    kind = FailureKind.UNKNOWN_FILE_NAME


class DownloadIOError(DownloadReleaseError):
    """Raised when the download request or writing the file fails."""

    error_prefix = "Download failed"
    kind = FailureKind.IO_FAILURE


class GitHubAPIError(Exception):
    """Raised when the GitHub API answers with an error status."""

    def __init__(
        self,
        message: str,
        status: int,
        rate_limited: bool = False,  # noqa: FBT001, FBT002
    ) -> None:
        """Initialize with the HTTP status of the failed request.

        Args:
            message: Error message describing the failure.
            status: HTTP status code returned by the API.
            rate_limited: Whether the API reported an exhausted rate limit.

        """
        super().__init__(message)
        self.status = status
        self.rate_limited = rate_limited
