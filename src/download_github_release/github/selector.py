"""Asset selection within a resolved release."""

from download_github_release.domain.result import Err, Ok, Result
from download_github_release.exceptions import NoMatchingAssetError
from download_github_release.github.models import Asset, Release


def find_asset(assets: list[Asset], file_name: str) -> Asset | None:
    """Return the first asset named exactly ``file_name``.

    Matching is case-sensitive. With duplicate names the earliest asset
    in API order wins.
    """
    for asset in assets:
        if asset.name == file_name:
            return asset
    return None


def select_asset(release: Release, file_name: str) -> Result[Asset]:
    """Pick the asset to download from a release.

    Args:
        release: Resolved release
        file_name: Exact asset name requested

    Returns:
        Ok(Asset) or Err(NoMatchingAssetError)

    """
    target = f"{release.owner}/{release.repo}@{release.tag_name}"
    if not release.assets:
        return Err(NoMatchingAssetError("release has no assets", target))

    asset = find_asset(release.assets, file_name)
    if asset is None:
        available = ", ".join(a.name for a in release.assets)
        return Err(
            NoMatchingAssetError(
                f"no asset named '{file_name}' (available: {available})",
                target,
            )
        )
    return Ok(asset)
