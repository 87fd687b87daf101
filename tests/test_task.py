"""End-to-end tests for DownloadGithubReleaseTask with a mocked session."""

from datetime import UTC, datetime
from email.utils import format_datetime
from pathlib import Path
from unittest.mock import MagicMock, patch

import logging

import aiohttp
import pytest

from download_github_release.config import get_default_global_config
from download_github_release.domain.types import FailureKind
from download_github_release.task import DownloadGithubReleaseTask, TaskInputs

PAYLOAD = b"release-bytes" * 10
LAST_MODIFIED = format_datetime(
    datetime(2024, 1, 1, tzinfo=UTC), usegmt=True
)


def _release(tag: str, *names: str) -> dict:
    return {
        "tag_name": tag,
        "assets": [
            {
                "name": name,
                "browser_download_url": (
                    f"https://github.com/octo/tools/releases/download/"
                    f"{tag}/{name}"
                ),
            }
            for name in names
        ],
    }


def _asset_response(make_response, url: str):
    return make_response(
        chunks=[PAYLOAD],
        headers={
            "Content-Length": str(len(PAYLOAD)),
            "Last-Modified": LAST_MODIFIED,
        },
        url=url,
    )


def _task(inputs: TaskInputs, session) -> DownloadGithubReleaseTask:
    return DownloadGithubReleaseTask(
        inputs, session=session, settings=get_default_global_config()
    )


@pytest.mark.asyncio
async def test_run_by_tag(tmp_path: Path, mock_session, make_response) -> None:
    """Test a tagged release asset is downloaded and reported."""
    url = "https://github.com/octo/tools/releases/download/v1/tool.zip"
    mock_session.get.side_effect = [
        make_response(json_data=_release("v1", "other.zip", "tool.zip")),
        _asset_response(make_response, url),
    ]
    inputs = TaskInputs(
        repo_name="octo/tools",
        release_file_name="tool.zip",
        destination_folder=tmp_path / "deps",
        tag_name="v1",
    )

    task = _task(inputs, mock_session)
    outcome = await task.run()

    expected = (tmp_path / "deps").resolve() / "tool.zip"
    assert outcome.succeeded
    assert outcome.local_path == expected
    assert outcome.tag_name == "v1"
    assert outcome.asset_name == "tool.zip"
    assert outcome.skipped is False
    assert expected.read_bytes() == PAYLOAD
    assert task.outcome is outcome
    assert mock_session.get.call_args_list[1].args[0] == url


@pytest.mark.asyncio
async def test_run_latest_uses_newest_release_only(
    tmp_path: Path, mock_session, make_response
) -> None:
    """Test only the newest release's assets are searched."""
    mock_session.get.side_effect = [
        make_response(
            json_data=[
                _release("v3", "notes.txt"),
                _release("v2", "tool.zip"),
                _release("v1", "tool.zip"),
            ]
        ),
    ]
    inputs = TaskInputs(
        repo_name="octo/tools",
        release_file_name="tool.zip",
        destination_folder=tmp_path,
        get_latest=True,
    )

    outcome = await _task(inputs, mock_session).run()

    assert not outcome.succeeded
    assert outcome.error.kind is FailureKind.NO_MATCHING_ASSET
    assert outcome.tag_name == "v3"
    assert mock_session.get.call_count == 1


@pytest.mark.asyncio
async def test_run_latest_downloads_from_newest(
    tmp_path: Path, mock_session, make_response
) -> None:
    """Test latest selection downloads the newest release's asset."""
    url = "https://github.com/octo/tools/releases/download/v3/tool.zip"
    mock_session.get.side_effect = [
        make_response(
            json_data=[_release("v3", "tool.zip"), _release("v2", "tool.zip")]
        ),
        _asset_response(make_response, url),
    ]
    inputs = TaskInputs(
        repo_name="octo/tools",
        release_file_name="tool.zip",
        destination_folder=tmp_path,
        get_latest=True,
    )

    outcome = await _task(inputs, mock_session).run()

    assert outcome.succeeded
    assert outcome.tag_name == "v3"
    assert mock_session.get.call_args_list[1].args[0] == url


@pytest.mark.asyncio
@pytest.mark.parametrize("repo_name", ["octo", "/tools", "octo/"])
async def test_run_invalid_repo_name(
    tmp_path: Path, mock_session, repo_name: str
) -> None:
    """Test malformed repository names fail before any request."""
    inputs = TaskInputs(
        repo_name=repo_name,
        release_file_name="tool.zip",
        destination_folder=tmp_path,
        tag_name="v1",
    )

    outcome = await _task(inputs, mock_session).run()

    assert outcome.local_path is None
    assert outcome.error.kind is FailureKind.INVALID_INPUT
    mock_session.get.assert_not_called()


@pytest.mark.asyncio
async def test_run_missing_tag(tmp_path: Path, mock_session) -> None:
    """Test a missing tag fails before any request."""
    inputs = TaskInputs(
        repo_name="octo/tools",
        release_file_name="tool.zip",
        destination_folder=tmp_path,
    )

    outcome = await _task(inputs, mock_session).run()

    assert outcome.error.kind is FailureKind.INVALID_INPUT
    mock_session.get.assert_not_called()


@pytest.mark.asyncio
async def test_run_resolution_failure(
    tmp_path: Path, mock_session, make_response
) -> None:
    """Test an API error ends the task without a download."""
    mock_session.get.return_value = make_response(status=404)
    inputs = TaskInputs(
        repo_name="octo/tools",
        release_file_name="tool.zip",
        destination_folder=tmp_path / "deps",
        tag_name="v404",
    )

    outcome = await _task(inputs, mock_session).run()

    assert outcome.error.kind is FailureKind.RESOLUTION_FAILURE
    assert mock_session.get.call_count == 1
    assert not (tmp_path / "deps").exists()


@pytest.mark.asyncio
async def test_run_no_matching_asset(
    tmp_path: Path, mock_session, make_response
) -> None:
    """Test a release without the asset ends without a download."""
    mock_session.get.return_value = make_response(
        json_data=_release("v1", "Tool.zip")
    )
    inputs = TaskInputs(
        repo_name="octo/tools",
        release_file_name="tool.zip",
        destination_folder=tmp_path,
        tag_name="v1",
    )

    outcome = await _task(inputs, mock_session).run()

    assert outcome.error.kind is FailureKind.NO_MATCHING_ASSET
    assert mock_session.get.call_count == 1


@pytest.mark.asyncio
async def test_run_truncated_download(
    tmp_path: Path, mock_session, make_response
) -> None:
    """Test a failed stream ends as IO failure without a partial file."""
    url = "https://github.com/octo/tools/releases/download/v1/tool.zip"
    mock_session.get.side_effect = [
        make_response(json_data=_release("v1", "tool.zip")),
        make_response(
            chunks=[PAYLOAD[:10]],
            headers={"Content-Length": str(len(PAYLOAD))},
            url=url,
            stream_error=aiohttp.ClientPayloadError("truncated"),
        ),
    ]
    inputs = TaskInputs(
        repo_name="octo/tools",
        release_file_name="tool.zip",
        destination_folder=tmp_path,
        tag_name="v1",
    )

    outcome = await _task(inputs, mock_session).run()

    assert outcome.local_path is None
    assert outcome.error.kind is FailureKind.IO_FAILURE
    assert outcome.asset_name == "tool.zip"
    assert not (tmp_path / "tool.zip").exists()


@pytest.mark.asyncio
async def test_run_twice_skips_second_download(
    tmp_path: Path, mock_session, make_response
) -> None:
    """Test an unchanged remote asset is not downloaded again."""
    url = "https://github.com/octo/tools/releases/download/v1/tool.zip"
    mock_session.get.side_effect = [
        make_response(json_data=_release("v1", "tool.zip")),
        _asset_response(make_response, url),
        make_response(json_data=_release("v1", "tool.zip")),
        _asset_response(make_response, url),
    ]
    inputs = TaskInputs(
        repo_name="octo/tools",
        release_file_name="tool.zip",
        destination_folder=tmp_path,
        tag_name="v1",
    )

    first = await _task(inputs, mock_session).run()
    second = await _task(inputs, mock_session).run()

    assert first.skipped is False
    assert second.skipped is True
    assert second.local_path == first.local_path


def test_execute_creates_session(tmp_path: Path, make_response) -> None:
    """Test the synchronous entry point creates and closes its session."""
    session = MagicMock()
    session.get.return_value = make_response(
        json_data=_release("v1", "tool.zip")
    )
    session_cm = MagicMock()
    session_cm.__aenter__.return_value = session
    session_cm.__aexit__.return_value = None
    inputs = TaskInputs(
        repo_name="octo/tools",
        release_file_name="missing.zip",
        destination_folder=tmp_path,
        tag_name="v1",
    )

    with patch(
        "download_github_release.task.create_http_session",
        return_value=session_cm,
    ) as create:
        task = DownloadGithubReleaseTask(
            inputs, settings=get_default_global_config()
        )
        assert task.execute() is False

    create.assert_called_once()
    session_cm.__aexit__.assert_called_once()
    assert task.outcome.error.kind is FailureKind.NO_MATCHING_ASSET


@pytest.mark.asyncio
async def test_run_overlong_file_name(
    tmp_path: Path, mock_session, make_response
) -> None:
    """Test a server file name the filesystem rejects becomes an outcome."""
    url = "https://github.com/octo/tools/releases/download/v1/tool.zip"
    mock_session.get.side_effect = [
        make_response(json_data=_release("v1", "tool.zip")),
        make_response(
            chunks=[PAYLOAD],
            headers={
                "Content-Disposition": (
                    f'attachment; filename="{"a" * 300}.zip"'
                ),
            },
            url=url,
        ),
    ]
    inputs = TaskInputs(
        repo_name="octo/tools",
        release_file_name="tool.zip",
        destination_folder=tmp_path,
        tag_name="v1",
    )

    outcome = await _task(inputs, mock_session).run()

    assert outcome.local_path is None
    assert outcome.error.kind is FailureKind.IO_FAILURE


@pytest.mark.asyncio
async def test_run_logs_release_and_asset_details(
    tmp_path: Path, mock_session, make_response, caplog
) -> None:
    """Test the debug log names the release title and asset size."""
    release = _release("v2-rc1", "tool.zip")
    release["name"] = "Second candidate"
    release["prerelease"] = True
    release["assets"][0]["size"] = len(PAYLOAD)
    mock_session.get.side_effect = [
        make_response(json_data=release),
        _asset_response(
            make_response,
            release["assets"][0]["browser_download_url"],
        ),
    ]
    inputs = TaskInputs(
        repo_name="octo/tools",
        release_file_name="tool.zip",
        destination_folder=tmp_path,
        tag_name="v2-rc1",
    )
    caplog.set_level(logging.DEBUG)

    outcome = await _task(inputs, mock_session).run()

    assert outcome.succeeded
    assert "(Second candidate, prerelease)" in caplog.text
    assert f"Selected tool.zip from v2-rc1 ({len(PAYLOAD)} bytes)" in (
        caplog.text
    )
