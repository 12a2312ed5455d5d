"""
Tests for pooled scratch buffers.
"""

import pytest
from httpresp.core.common.exceptions import EncodeError
from httpresp.core.config.app_config import ResponseConfig
from httpresp.core.services import buffer_pool
from httpresp.core.services.buffer_pool import BufferPool, BufferPools
from httpresp.core.services.response import Response
from httpresp.core.transport.recording import RecordingSink


class TestBufferPool:
    def test_buffer_is_returned_and_reset(self) -> None:
        pool = BufferPool("test", max_retained=4, max_buffer_size=1024)

        with pool.acquire() as buffer:
            buffer.write(b"leftover")
        assert len(pool) == 1

        with pool.acquire() as again:
            assert again is buffer
            assert again.getvalue() == b""

    def test_buffer_is_returned_on_error(self) -> None:
        pool = BufferPool("test", max_retained=4, max_buffer_size=1024)

        with pytest.raises(RuntimeError):
            with pool.acquire() as buffer:
                buffer.write(b"x")
                raise RuntimeError("fail")

        assert len(pool) == 1

    def test_oversized_buffers_are_dropped(self) -> None:
        pool = BufferPool("test", max_retained=4, max_buffer_size=4)

        with pool.acquire() as buffer:
            buffer.write(b"too large")

        assert len(pool) == 0

    def test_closed_buffers_are_dropped(self) -> None:
        pool = BufferPool("test", max_retained=4, max_buffer_size=1024)

        with pool.acquire() as buffer:
            buffer.close()

        assert len(pool) == 0

    def test_retained_count_is_bounded(self) -> None:
        pool = BufferPool("test", max_retained=1, max_buffer_size=1024)

        with pool.acquire(), pool.acquire():
            pass

        assert len(pool) == 1


@pytest.mark.asyncio
async def test_emitters_return_buffers(isolated_pools: BufferPools) -> None:
    await Response(RecordingSink(), pools=isolated_pools).json({"a": 1})
    await Response(RecordingSink(), pools=isolated_pools).jsonp({"a": 1}, "cb")

    assert len(isolated_pools.json) == 1
    assert len(isolated_pools.jsonp) == 1


@pytest.mark.asyncio
async def test_encode_failure_returns_buffer(isolated_pools: BufferPools) -> None:
    with pytest.raises(EncodeError):
        await Response(RecordingSink(), pools=isolated_pools).json({"x": object()})

    assert len(isolated_pools.json) == 1


def test_configure_default_pools(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(buffer_pool, "_default_pools", buffer_pool.get_default_pools())
    config = ResponseConfig(pool_max_retained=2, pool_max_buffer_size=16)

    pools = buffer_pool.configure_default_pools(config)

    assert buffer_pool.get_default_pools() is pools
    with pools.json.acquire() as buffer:
        buffer.write(b"x" * 32)
    assert len(pools.json) == 0
