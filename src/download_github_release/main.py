"""Main CLI entry point for download-github-release."""

import sys

import uvloop

from download_github_release.cli import CLIRunner
from download_github_release.logger import get_logger

logger = get_logger(__name__)


async def async_main() -> int:
    """Run the CLI asynchronously and return the exit code."""
    runner = CLIRunner()
    return await runner.run()


def main() -> None:
    """Run the CLI application.

    Raises:
        SystemExit: Always, with the task's exit code.

    """
    try:
        exit_code = uvloop.run(async_main())
    except KeyboardInterrupt:
        logger.info("Cancelled by user")
        sys.exit(1)
    except Exception:
        logger.exception("❌ Unexpected error")
        sys.exit(1)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
