from pathlib import Path

import pytest
from httpresp.core.transport.recording import RecordingSink


@pytest.mark.asyncio
async def test_commit_snapshots_headers(sink: RecordingSink) -> None:
    sink.headers.set("X-A", "1")
    await sink.commit(201)
    sink.headers.set("X-A", "2")

    assert sink.status_code == 201
    assert sink.committed_headers is not None
    assert sink.committed_headers.get("X-A") == "1"


@pytest.mark.asyncio
async def test_second_commit_is_ignored(sink: RecordingSink) -> None:
    await sink.commit(200)
    await sink.commit(500)

    assert sink.status_code == 200
    assert sink.ignored_commits == 1


@pytest.mark.asyncio
async def test_write_commits_200(sink: RecordingSink) -> None:
    await sink.write(b"abc")
    await sink.finish()
    await sink.finish()

    assert sink.committed
    assert sink.status_code == 200
    assert sink.text == "abc"
    assert sink.finished


@pytest.mark.asyncio
async def test_serve_file(sink: RecordingSink, static_file: Path) -> None:
    await sink.serve_file(str(static_file))

    assert sink.status_code == 200
    assert sink.committed_headers is not None
    assert sink.committed_headers.get("Content-Length") == str(len(b"hello from disk\n"))
    assert sink.finished


@pytest.mark.asyncio
async def test_serve_missing_file(sink: RecordingSink, tmp_path: Path) -> None:
    await sink.serve_file(str(tmp_path / "missing"))

    assert sink.status_code == 404
    assert sink.text == "404 page not found\n"
