from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import asdict, is_dataclass
from typing import IO, Any

from pydantic import BaseModel

# A custom encoder writes the encoded form of ``data`` into ``buffer``.
JSONEncodeFunc = Callable[[IO[bytes], Any], None]


def _json_default(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if is_dataclass(value) and not isinstance(value, type):
        return asdict(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def encode_json(
    buffer: IO[bytes],
    data: Any,
    *,
    ensure_ascii: bool = False,
    trailing_newline: bool = True,
) -> None:
    """Write compact JSON for ``data`` into ``buffer``.

    Raises:
        TypeError: If a value cannot be serialized
        ValueError: For circular references, NaN/Infinity or unencodable text
    """
    text = json.dumps(
        data,
        default=_json_default,
        ensure_ascii=ensure_ascii,
        allow_nan=False,
        separators=(",", ":"),
    )
    buffer.write(text.encode("utf-8"))
    if trailing_newline:
        buffer.write(b"\n")
