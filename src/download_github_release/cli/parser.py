"""CLI argument parser for download-github-release.

Option names follow the task parameters (RepoName, ReleaseFileName, ...)
so a pipeline step reads the same as the library call.
"""

import argparse
from argparse import Namespace
from collections.abc import Sequence
from pathlib import Path


class CLIParser:
    """Command-line argument parser."""

    def parse_args(self, argv: Sequence[str] | None = None) -> Namespace:
        """Parse command-line arguments.

        Args:
            argv: Arguments to parse (defaults to sys.argv[1:])

        Returns:
            Parsed arguments namespace

        """
        return self.create_parser().parse_args(argv)

    def create_parser(self) -> argparse.ArgumentParser:
        """Create the argument parser."""
        parser = argparse.ArgumentParser(
            prog="download-github-release",
            description="Download a named asset from a GitHub release",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  # Download an asset from a tagged release
  %(prog)s --repo-name owner/repo --tag-name v1.2.0 \\
      --release-file-name tool.zip --destination-folder build/deps

  # Download from the newest release and print a JSON summary
  %(prog)s --repo-name owner/repo --get-latest \\
      --release-file-name tool.zip --destination-folder build/deps --json
            """,
        )
        # --version is handled by the runner before required options
        # are checked, hence not required=True on the task options.
        parser.add_argument(
            "--version",
            action="store_true",
            help="Show version and exit",
        )
        parser.add_argument(
            "--repo-name",
            help="Repository to download from, as owner/repo",
        )
        parser.add_argument(
            "--release-file-name",
            help="Exact name of the release asset to download",
        )
        parser.add_argument(
            "--destination-folder",
            type=Path,
            help="Folder to download into (created if missing)",
        )
        parser.add_argument(
            "--get-latest",
            action="store_true",
            help="Use the newest release instead of --tag-name",
        )
        parser.add_argument(
            "--tag-name",
            help="Exact tag of the release (required without --get-latest)",
        )
        parser.add_argument(
            "--destination-file-name",
            help="Local file name (default: derived from the response)",
        )
        parser.add_argument(
            "--json",
            action="store_true",
            help="Print a JSON summary instead of the bare path",
        )
        parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show debug output on the console",
        )
        return parser
