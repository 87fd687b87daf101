"""Release request parsed from task inputs."""

from __future__ import annotations

from dataclasses import dataclass

from download_github_release.exceptions import InvalidInputError


@dataclass(slots=True, frozen=True)
class ReleaseRequest:
    """Which release of which repository to look up.

    Attributes:
        owner: Repository owner (user or organization)
        repo: Repository name
        use_latest: Select the newest release instead of a tag
        tag_name: Exact release tag, required when use_latest is False

    """

    owner: str
    repo: str
    use_latest: bool = False
    tag_name: str | None = None

    def __post_init__(self) -> None:
        """Validate owner, repo and tag before any network call."""
        if not self.owner or not self.repo:
            msg = "repository must be given as 'owner/repo'"
            raise InvalidInputError(msg, target=f"{self.owner}/{self.repo}")
        if not self.use_latest and not self.tag_name:
            msg = "tag name is required when not using the latest release"
            raise InvalidInputError(msg, target=f"{self.owner}/{self.repo}")

    @classmethod
    def from_repo_name(
        cls,
        repo_name: str,
        use_latest: bool = False,  # noqa: FBT001, FBT002
        tag_name: str | None = None,
    ) -> ReleaseRequest:
        """Build a request from an ``owner/repo`` string.

        Only the first two ``/``-separated segments are used.

        Raises:
            InvalidInputError: If owner or repo is empty, or the tag is
                missing while use_latest is False

        """
        parts = (repo_name or "").split("/")
        if len(parts) < 2:  # noqa: PLR2004
            msg = "repository must be given as 'owner/repo'"
            raise InvalidInputError(msg, target=repo_name)
        owner, repo = parts[0].strip(), parts[1].strip()
        return cls(
            owner=owner, repo=repo, use_latest=use_latest, tag_name=tag_name
        )

    @property
    def full_name(self) -> str:
        """Return ``owner/repo``."""
        return f"{self.owner}/{self.repo}"
