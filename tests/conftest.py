from pathlib import Path

import pytest
from httpresp.core.services.buffer_pool import BufferPools
from httpresp.core.services.response import Response
from httpresp.core.transport.recording import RecordingSink


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def response(sink: RecordingSink) -> Response:
    """A fresh builder writing into ``sink``."""
    return Response(sink)


@pytest.fixture
def isolated_pools() -> BufferPools:
    """Pools not shared with other tests, so their size can be asserted."""
    from httpresp.core.config.app_config import ResponseConfig

    return BufferPools.from_config(ResponseConfig())


@pytest.fixture
def static_file(tmp_path: Path) -> Path:
    """A small text file for the static file delegate."""
    path = tmp_path / "hello.txt"
    path.write_bytes(b"hello from disk\n")
    return path


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove every HTTPRESP_* variable from the process environment."""
    import os

    for name in list(os.environ):
        if name.startswith("HTTPRESP_"):
            monkeypatch.delenv(name, raising=False)
