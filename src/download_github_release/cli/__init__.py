"""Command-line interface for download-github-release."""

from download_github_release.cli.runner import CLIRunner

__all__ = ["CLIRunner"]
