"""Multi-valued header collection keyed by canonical header name."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from httpresp.core.constants.header_constants import KNOWN_HEADER_SPELLINGS


def canonical_header_key(name: str) -> str:
    """Return the canonical spelling of a header name.

    Known names keep their registered spelling (``ETag``, ``WWW-Authenticate``);
    anything else is title-cased per dash-separated word.
    """
    stripped = name.strip()
    known = KNOWN_HEADER_SPELLINGS.get(stripped.lower())
    if known is not None:
        return known
    return "-".join(part[:1].upper() + part[1:].lower() for part in stripped.split("-"))


class HeaderMap:
    """Ordered mapping of canonical header name to a list of values.

    Lookups are case-insensitive. Each stored value becomes one header line
    on the wire.
    """

    __slots__ = ("_entries",)

    def __init__(self, items: Iterable[tuple[str, str]] | None = None) -> None:
        self._entries: dict[str, tuple[str, list[str]]] = {}
        if items is not None:
            for name, value in items:
                self.add(name, value)

    def set(self, name: str, value: str) -> None:
        """Replace every line of ``name`` with a single ``value``."""
        key = canonical_header_key(name)
        self._entries[key.lower()] = (key, [value])

    def add(self, name: str, value: str) -> None:
        """Append ``value`` as an additional line of ``name``."""
        key = canonical_header_key(name)
        entry = self._entries.get(key.lower())
        if entry is None:
            self._entries[key.lower()] = (key, [value])
        else:
            entry[1].append(value)

    def get(self, name: str, default: str | None = None) -> str | None:
        """Return the first value of ``name``."""
        entry = self._entries.get(name.strip().lower())
        if entry is None or not entry[1]:
            return default
        return entry[1][0]

    def values(self, name: str) -> list[str]:
        entry = self._entries.get(name.strip().lower())
        return list(entry[1]) if entry is not None else []

    def replace_values(self, name: str, values: Iterable[str]) -> None:
        """Replace the lines of ``name``; an empty iterable deletes it."""
        remaining = list(values)
        if not remaining:
            self.delete(name)
            return
        key = canonical_header_key(name)
        self._entries[key.lower()] = (key, remaining)

    def delete(self, name: str) -> None:
        self._entries.pop(name.strip().lower(), None)

    def clear(self) -> None:
        self._entries.clear()

    def names(self) -> list[str]:
        return [key for key, _ in self._entries.values()]

    def items(self) -> Iterator[tuple[str, str]]:
        """Yield ``(name, value)`` pairs, one per header line."""
        for key, values in self._entries.values():
            for value in values:
                yield key, value

    def raw(self, encoding: str = "latin-1") -> list[tuple[bytes, bytes]]:
        """Return lower-cased byte pairs as expected by ASGI servers."""
        return [
            (key.lower().encode(encoding), value.encode(encoding))
            for key, value in self.items()
        ]

    def copy(self) -> HeaderMap:
        clone = HeaderMap()
        for lowered, (key, values) in self._entries.items():
            clone._entries[lowered] = (key, list(values))
        return clone

    def to_dict(self) -> dict[str, list[str]]:
        return {key: list(values) for key, values in self._entries.values()}

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.strip().lower() in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __repr__(self) -> str:
        return f"HeaderMap({self.to_dict()!r})"
