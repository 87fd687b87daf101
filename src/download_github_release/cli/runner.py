"""CLI runner: parse arguments, run the task, report the result.

On success the local path (or a JSON summary) is written to stdout and
the exit code is 0. On failure nothing is written to stdout and the exit
code is 1; the reason goes to the log on stderr.
"""

import sys
from argparse import Namespace
from collections.abc import Sequence

import orjson

from download_github_release import __version__
from download_github_release.cli.parser import CLIParser
from download_github_release.config import SettingsManager
from download_github_release.domain.outcome import DownloadOutcome
from download_github_release.logger import (
    get_logger,
    update_logger_from_config,
)
from download_github_release.task import DownloadGithubReleaseTask, TaskInputs

logger = get_logger(__name__)

REQUIRED_OPTIONS = ("repo_name", "release_file_name", "destination_folder")


class CLIRunner:
    """Runs one task invocation from command-line arguments."""

    def __init__(self, argv: Sequence[str] | None = None) -> None:
        """Initialize runner.

        Args:
            argv: Command-line arguments (defaults to sys.argv[1:])

        """
        self.parser = CLIParser()
        self.argv = argv

    async def run(self) -> int:
        """Run the CLI and return the process exit code."""
        args = self.parser.parse_args(self.argv)

        if args.version:
            sys.stdout.write(f"{__version__}\n")
            return 0

        missing = [
            "--" + name.replace("_", "-")
            for name in REQUIRED_OPTIONS
            if not getattr(args, name)
        ]
        if missing:
            self.parser.create_parser().error(
                "the following arguments are required: " + ", ".join(missing)
            )

        settings = SettingsManager().load_global_config()
        if args.verbose:
            settings["console_log_level"] = "DEBUG"
        update_logger_from_config(settings)

        task = DownloadGithubReleaseTask(
            self._build_inputs(args), settings=settings
        )
        outcome = await task.run()
        self._report(outcome, as_json=args.json)
        return 0 if outcome.succeeded else 1

    @staticmethod
    def _build_inputs(args: Namespace) -> TaskInputs:
        return TaskInputs(
            repo_name=args.repo_name,
            release_file_name=args.release_file_name,
            destination_folder=args.destination_folder,
            get_latest=args.get_latest,
            tag_name=args.tag_name,
            destination_file_name=args.destination_file_name,
        )

    @staticmethod
    def _report(
        outcome: DownloadOutcome,
        as_json: bool,  # noqa: FBT001
    ) -> None:
        if not outcome.succeeded:
            return
        if as_json:
            payload = orjson.dumps(
                outcome.to_dict(), option=orjson.OPT_INDENT_2
            )
            sys.stdout.write(payload.decode() + "\n")
        else:
            sys.stdout.write(f"{outcome.local_path}\n")
