"""Immutable, case-insensitive HTTP headers.

Implements ``Mapping[str, str]``. Accepts a plain mapping or raw
``(name, value)`` pairs as found in an ASGI scope; names are stored
lower-cased.
"""

from collections.abc import Iterable, Iterator, Mapping

HeaderPairs = Iterable[tuple[str | bytes, str | bytes]]
HeaderInput = Mapping[str, str] | HeaderPairs


def _decode(value: str | bytes) -> str:
    if isinstance(value, bytes):
        return value.decode("latin-1")
    return value


class Headers(Mapping[str, str]):
    """Immutable, case-insensitive HTTP headers.

    ``__getitem__`` returns the first matching value.
    ``get_list`` returns all values for a header (e.g. multiple ``Set-Cookie``).
    """

    __slots__ = ("_pairs",)

    def __init__(self, raw: HeaderInput | None = None) -> None:
        items = raw.items() if isinstance(raw, Mapping) else (raw or ())
        pairs = tuple((_decode(name).lower(), _decode(value)) for name, value in items)
        object.__setattr__(self, "_pairs", pairs)

    def __getitem__(self, key: str) -> str:
        key_lower = key.lower()
        for name, value in self._pairs:
            if name == key_lower:
                return value
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        key_lower = key.lower()
        return any(name == key_lower for name, _ in self._pairs)

    def __iter__(self) -> Iterator[str]:
        seen: set[str] = set()
        for name, _ in self._pairs:
            if name not in seen:
                seen.add(name)
                yield name

    def __len__(self) -> int:
        return len(set(self))

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {self[k]!r}" for k in self)
        return f"Headers({{{items}}})"

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the first value for *key*, or *default* if missing."""
        try:
            return self[key]
        except KeyError:
            return default

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key*."""
        key_lower = key.lower()
        return [value for name, value in self._pairs if name == key_lower]
