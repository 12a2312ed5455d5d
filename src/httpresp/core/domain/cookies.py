"""Set-Cookie directives and the per-response cookie queue."""

from __future__ import annotations

import string
from collections.abc import Iterable, Iterator
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator

from httpresp.core.common.utils import format_http_date

_TOKEN_CHARS = frozenset(string.ascii_letters + string.digits + "!#$%&'*+-.^_`|~")


class SameSite(str, Enum):
    """Values of the SameSite cookie attribute."""

    LAX = "Lax"
    STRICT = "Strict"
    NONE = "None"


def _sanitize(value: str, *, allow_quote: bool) -> str:
    kept = []
    for char in value:
        code = ord(char)
        if code < 0x20 or code >= 0x7F or char in ";\\":
            continue
        if char == '"' and not allow_quote:
            continue
        kept.append(char)
    return "".join(kept)


def cookie_name_of(line: str) -> str:
    """Return the cookie name of a raw ``Set-Cookie`` line.

    The name is the token before the first ``=``; comparing it for equality
    keeps ``session`` from matching ``session_id``.
    """
    pair = line.split(";", 1)[0]
    name, _, _ = pair.partition("=")
    return name.strip()


class Cookie(BaseModel):
    """A single Set-Cookie directive.

    ``max_age`` of None omits the attribute; zero or negative values ask the
    client to drop the cookie immediately and are sent as ``Max-Age=0``.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    value: str = ""
    path: str | None = None
    domain: str | None = None
    expires: datetime | None = None
    max_age: int | None = None
    secure: bool = False
    http_only: bool = False
    same_site: SameSite | None = None
    partitioned: bool = False

    @field_validator("name")
    @classmethod
    def _name_must_be_token(cls, value: str) -> str:
        if not value or any(char not in _TOKEN_CHARS for char in value):
            raise ValueError(f"invalid cookie name: {value!r}")
        return value

    def to_header_value(self) -> str:
        """Serialize to a ``Set-Cookie`` header value."""
        value = _sanitize(self.value, allow_quote=False)
        if " " in value or "," in value:
            value = f'"{value}"'
        parts = [f"{self.name}={value}"]
        if self.path:
            parts.append(f"Path={_sanitize(self.path, allow_quote=True)}")
        if self.domain:
            parts.append(f"Domain={self.domain.lstrip('.')}")
        if self.expires is not None:
            parts.append(f"Expires={format_http_date(self.expires)}")
        if self.max_age is not None:
            parts.append(f"Max-Age={max(self.max_age, 0)}")
        if self.http_only:
            parts.append("HttpOnly")
        if self.secure:
            parts.append("Secure")
        if self.same_site is not None:
            parts.append(f"SameSite={self.same_site.value}")
        if self.partitioned:
            parts.append("Partitioned")
        return "; ".join(parts)


class CookieStore:
    """Ordered queue of cookies waiting to be committed."""

    __slots__ = ("_cookies",)

    def __init__(self, cookies: Iterable[Cookie] | None = None) -> None:
        self._cookies: list[Cookie] = list(cookies or [])

    def append(self, cookie: Cookie) -> None:
        """Queue ``cookie`` even if another cookie has the same name."""
        self._cookies.append(cookie)

    def upsert(self, cookie: Cookie) -> None:
        """Queue ``cookie`` after dropping every cookie with its name."""
        self.remove(cookie.name)
        self._cookies.append(cookie)

    def remove(self, name: str) -> int:
        """Drop every queued cookie named exactly ``name``; return the count."""
        before = len(self._cookies)
        self._cookies = [cookie for cookie in self._cookies if cookie.name != name]
        return before - len(self._cookies)

    def clear(self) -> None:
        self._cookies.clear()

    def names(self) -> list[str]:
        return [cookie.name for cookie in self._cookies]

    def header_values(self) -> list[str]:
        return [cookie.to_header_value() for cookie in self._cookies]

    def __iter__(self) -> Iterator[Cookie]:
        return iter(list(self._cookies))

    def __len__(self) -> int:
        return len(self._cookies)
