"""Top-level package for download-github-release.

Fetch a single named asset from a GitHub release as a build pipeline step.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("download-github-release")
except PackageNotFoundError:
    # Fallback for development environments where package isn't installed
    __version__ = "dev"
