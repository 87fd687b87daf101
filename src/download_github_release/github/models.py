"""GitHub release and asset models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True, frozen=True)
class Asset:
    """Represents a GitHub release asset.

    Attributes:
        name: Asset filename
        browser_download_url: Direct download URL for the asset
        size: Asset size in bytes as reported by the API

    """

    name: str
    browser_download_url: str
    size: int = 0

    @classmethod
    def from_api_response(cls, asset_data: dict[str, Any]) -> Asset | None:
        """Create Asset from GitHub API response data.

        Args:
            asset_data: Raw asset data from GitHub API

        Returns:
            Asset instance or None if required fields are missing

        """
        try:
            name = asset_data.get("name", "")
            download_url = asset_data.get("browser_download_url", "")
            size = asset_data.get("size") or 0

            if not name or not download_url:
                return None

            return cls(
                name=name,
                browser_download_url=download_url,
                size=int(size),
            )
        except (AttributeError, TypeError, ValueError):
            return None


@dataclass(slots=True, frozen=True)
class Release:
    """Represents a GitHub release with its assets.

    Attributes:
        owner: Repository owner
        repo: Repository name
        tag_name: Tag the release was published under
        name: Release title (may be empty)
        prerelease: Whether this is a prerelease
        assets: Release assets in API order, or None when the API
            response carried no asset list

    """

    owner: str
    repo: str
    tag_name: str
    name: str
    prerelease: bool
    assets: list[Asset] | None

    @classmethod
    def from_api_response(
        cls, owner: str, repo: str, api_data: dict[str, Any]
    ) -> Release:
        """Create Release from GitHub API response data.

        Args:
            owner: Repository owner
            repo: Repository name
            api_data: Raw release data from GitHub API

        Returns:
            Release instance

        Raises:
            TypeError: If api_data is not a release object

        """
        if not isinstance(api_data, dict):
            msg = f"Expected a release object, got {type(api_data).__name__}"
            raise TypeError(msg)

        raw_assets = api_data.get("assets")
        assets: list[Asset] | None = None
        if raw_assets is not None:
            assets = []
            for asset_data in raw_assets:
                asset = Asset.from_api_response(asset_data)
                if asset:
                    assets.append(asset)

        return cls(
            owner=owner,
            repo=repo,
            tag_name=api_data.get("tag_name") or "",
            name=api_data.get("name") or "",
            prerelease=bool(api_data.get("prerelease", False)),
            assets=assets,
        )
