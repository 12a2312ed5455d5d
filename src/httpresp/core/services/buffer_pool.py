"""Pooled scratch buffers for body encoding.

Pools are the only state shared between requests. The free list is a deque,
whose ``append``/``pop`` are atomic, so checkout and return need no lock.
"""

from __future__ import annotations

import io
import logging
from collections import deque
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from httpresp.core.config.app_config import ResponseConfig

logger = logging.getLogger(__name__)


class BufferPool:
    """Free list of reusable ``BytesIO`` buffers."""

    def __init__(self, name: str, *, max_retained: int, max_buffer_size: int) -> None:
        self.name = name
        self._max_retained = max_retained
        self._max_buffer_size = max_buffer_size
        self._free: deque[io.BytesIO] = deque()

    @contextmanager
    def acquire(self) -> Iterator[io.BytesIO]:
        """Check out an empty buffer; it is returned on every exit path."""
        try:
            buffer = self._free.pop()
        except IndexError:
            buffer = io.BytesIO()
        buffer.seek(0)
        buffer.truncate()
        try:
            yield buffer
        finally:
            self._release(buffer)

    def _release(self, buffer: io.BytesIO) -> None:
        if buffer.closed:
            return
        size = buffer.seek(0, io.SEEK_END)
        if size > self._max_buffer_size:
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(
                    "Dropping oversized %s buffer (%d bytes)", self.name, size
                )
            return
        if len(self._free) < self._max_retained:
            self._free.append(buffer)

    def __len__(self) -> int:
        return len(self._free)


@dataclass(frozen=True)
class BufferPools:
    """Scratch pools for the buffered JSON and JSONP emitters."""

    json: BufferPool
    jsonp: BufferPool

    @classmethod
    def from_config(cls, config: ResponseConfig) -> BufferPools:
        def make(name: str) -> BufferPool:
            return BufferPool(
                name,
                max_retained=config.pool_max_retained,
                max_buffer_size=config.pool_max_buffer_size,
            )

        return cls(json=make("json"), jsonp=make("jsonp"))


_default_pools = BufferPools.from_config(ResponseConfig())


def get_default_pools() -> BufferPools:
    return _default_pools


def configure_default_pools(config: ResponseConfig) -> BufferPools:
    """Replace the process-wide pools with ones sized by ``config``."""
    global _default_pools
    _default_pools = BufferPools.from_config(config)
    return _default_pools
