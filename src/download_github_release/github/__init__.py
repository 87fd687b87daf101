"""GitHub release lookup - API client, models, resolution and selection."""

from download_github_release.github.client import ReleaseAPIClient
from download_github_release.github.models import Asset, Release
from download_github_release.github.resolver import ReleaseResolver
from download_github_release.github.selector import find_asset, select_asset

__all__ = [
    "Asset",
    "Release",
    "ReleaseAPIClient",
    "ReleaseResolver",
    "find_asset",
    "select_asset",
]
