"""Download service for release assets.

The response is handled in two phases. Headers are available as soon as
``session.get`` yields the response; the body is only pulled when the
service iterates ``response.content``. The skip decision is made in the
first phase, so a file that is already up to date never touches the body
stream.

Skip rule: the local file exists, its size equals ``Content-Length``, the
response carries ``Last-Modified`` and the local modification time is
strictly later than it.
"""

import contextlib
from collections.abc import Mapping
from datetime import UTC, datetime
from email.utils import parsedate_to_datetime
from pathlib import Path, PurePosixPath
from urllib.parse import unquote, urlparse

import aiofiles
import aiohttp
from aiohttp.multipart import (
    content_disposition_filename,
    parse_content_disposition,
)

from download_github_release.constants import DEFAULT_CHUNK_SIZE
from download_github_release.domain.outcome import DownloadedFile
from download_github_release.domain.result import Err, Ok, Result
from download_github_release.exceptions import (
    DownloadIOError,
    DownloadReleaseError,
    UnknownFileNameError,
)
from download_github_release.logger import get_logger

logger = get_logger(__name__)


def get_filename_from_url(url: str) -> str:
    """Extract the URL-decoded last path segment of a URL.

    A path ending in ``/`` has no last segment and yields "".
    """
    return unquote(urlparse(url).path.rsplit("/", 1)[-1])


def get_filename_from_headers(headers: Mapping[str, str]) -> str | None:
    """Extract the file name from a Content-Disposition header.

    Directory components are dropped so the name cannot escape the
    destination folder.
    """
    header = headers.get("Content-Disposition")
    if not header:
        return None
    _, params = parse_content_disposition(header)
    filename = content_disposition_filename(params)
    if not filename:
        return None
    return PurePosixPath(filename.replace("\\", "/")).name


def parse_content_length(headers: Mapping[str, str]) -> int | None:
    """Return Content-Length as int, or None if absent or malformed."""
    raw = headers.get("Content-Length")
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def parse_last_modified(headers: Mapping[str, str]) -> datetime | None:
    """Return Last-Modified as an aware UTC datetime, or None."""
    raw = headers.get("Last-Modified")
    if not raw:
        return None
    try:
        value = parsedate_to_datetime(raw)
    except (TypeError, ValueError):
        logger.debug("Ignoring malformed Last-Modified header: %s", raw)
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def should_skip(headers: Mapping[str, str], destination: Path) -> bool:
    """Decide whether an existing file already satisfies the response.

    Args:
        headers: Response headers
        destination: Candidate local file

    Returns:
        True only if all four skip conditions hold

    """
    if not destination.is_file():
        return False

    content_length = parse_content_length(headers)
    stat = destination.stat()
    if content_length is None or stat.st_size != content_length:
        return False

    last_modified = parse_last_modified(headers)
    if last_modified is None:
        return False

    local_mtime = datetime.fromtimestamp(stat.st_mtime, tz=UTC)
    return local_mtime > last_modified


class DownloadService:
    """Service for downloading a release asset into a folder."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> None:
        """Initialize download service with HTTP session.

        Args:
            session: aiohttp session for downloads
            chunk_size: Bytes read from the body per iteration

        """
        self.session = session
        self.chunk_size = chunk_size

    async def download(
        self,
        url: str,
        destination_folder: Path,
        explicit_file_name: str | None = None,
    ) -> Result[DownloadedFile]:
        """Download ``url`` into ``destination_folder``.

        Args:
            url: Asset download URL
            destination_folder: Folder to write into (created if missing)
            explicit_file_name: Overrides the derived file name

        Returns:
            Ok(DownloadedFile) or Err(UnknownFileNameError | DownloadIOError)

        """
        try:
            downloaded = await self._download(
                url, Path(destination_folder), explicit_file_name
            )
        except DownloadReleaseError as e:
            return Err(e)
        return Ok(downloaded)

    async def _download(
        self,
        url: str,
        destination_folder: Path,
        explicit_file_name: str | None,
    ) -> DownloadedFile:
        try:
            async with self.session.get(url) as response:
                response.raise_for_status()
                return await self._process(
                    response, url, destination_folder, explicit_file_name
                )
        except (aiohttp.ClientError, TimeoutError) as e:
            msg = f"request failed: {e}"
            raise DownloadIOError(msg, target=url) from e

    async def _process(
        self,
        response: aiohttp.ClientResponse,
        url: str,
        destination_folder: Path,
        explicit_file_name: str | None,
    ) -> DownloadedFile:
        """Handle a response whose headers have arrived."""
        filename = self.resolve_filename(response, explicit_file_name)
        if not filename or not filename.strip():
            msg = "set an explicit destination file name"
            raise UnknownFileNameError(msg, target=url)

        try:
            destination_folder.mkdir(parents=True, exist_ok=True)
        except (OSError, ValueError) as e:
            msg = f"cannot create {destination_folder}: {e}"
            raise DownloadIOError(msg, target=url) from e

        # Server-provided names can be too long or contain NUL bytes
        try:
            destination = destination_folder.resolve() / filename
            skip = should_skip(response.headers, destination)
        except (OSError, ValueError) as e:
            msg = f"cannot inspect {filename!r} in {destination_folder}: {e}"
            raise DownloadIOError(msg, target=url) from e

        if skip:
            logger.info(
                "Did not download %s, %s is already up to date",
                url,
                destination,
            )
            return DownloadedFile(path=destination, skipped=True)

        written = await self._write_body(response, url, destination)
        logger.info(
            "Downloaded %s to %s (%s bytes)", url, destination, written
        )
        return DownloadedFile(path=destination, skipped=False)

    def resolve_filename(
        self,
        response: aiohttp.ClientResponse,
        explicit_file_name: str | None = None,
    ) -> str:
        """Pick the destination file name.

        Priority: explicit name, Content-Disposition filename, last
        segment of the final (post-redirect) request URL.
        """
        if explicit_file_name and explicit_file_name.strip():
            return explicit_file_name
        from_header = get_filename_from_headers(response.headers)
        if from_header:
            return from_header
        return get_filename_from_url(str(response.url))

    async def _write_body(
        self,
        response: aiohttp.ClientResponse,
        url: str,
        destination: Path,
    ) -> int:
        """Stream the response body into ``destination``.

        The file is removed again on every failure path, cancellation
        included.

        Returns:
            Number of bytes written

        Raises:
            DownloadIOError: If reading the body or writing the file fails

        """
        expected = parse_content_length(response.headers)
        check_length = expected is not None and not response.headers.get(
            "Content-Encoding"
        )
        written = 0
        completed = False

        logger.debug("Downloading file: %s", destination.name)
        logger.debug("   URL: %s", url)
        logger.debug("   Size: %s bytes", expected if expected else "unknown")

        try:
            async with aiofiles.open(destination, mode="wb") as f:
                async for chunk in response.content.iter_chunked(
                    self.chunk_size
                ):
                    if chunk:
                        await f.write(chunk)
                        written += len(chunk)

            if check_length and written != expected:
                msg = f"body truncated at {written} of {expected} bytes"
                raise DownloadIOError(msg, target=url)
            completed = True
        except (aiohttp.ClientError, OSError, TimeoutError, ValueError) as e:
            msg = f"writing {destination.name} failed: {e}"
            raise DownloadIOError(msg, target=url) from e
        finally:
            if not completed:
                self._remove_partial(destination)

        return written

    @staticmethod
    def _remove_partial(destination: Path) -> None:
        logger.debug("Removing partial download: %s", destination)
        with contextlib.suppress(OSError, ValueError):
            destination.unlink(missing_ok=True)
