"""Case-insensitive request headers.

httptools hands the parser each header as a ``(name, value)`` byte pair.
``Headers`` keeps those pairs for logging and indexes them once by
lower-cased name, so every lookup after construction is a dict hit.
"""

from collections.abc import Iterator, Mapping


class Headers(Mapping[str, str]):
    """Read-only view of the headers of one request.

    Indexing returns the first value sent for a name; ``get_list``
    returns every value in arrival order. Values are decoded as latin-1,
    the only decoding HTTP/1.1 guarantees.
    """

    __slots__ = ("_index", "_raw")

    def __init__(self, raw: tuple[tuple[bytes, bytes], ...] = ()) -> None:
        index: dict[str, list[str]] = {}
        for name, value in raw:
            index.setdefault(name.decode("latin-1").lower(), []).append(value.decode("latin-1"))
        self._raw = raw
        self._index = {name: tuple(values) for name, values in index.items()}

    def __getitem__(self, key: str) -> str:
        return self._index[key.lower()][0]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._index

    def __iter__(self) -> Iterator[str]:
        return iter(self._index)

    def __len__(self) -> int:
        return len(self._index)

    def __repr__(self) -> str:
        return f"Headers({dict(self)!r})"

    def get_list(self, key: str) -> list[str]:
        """Every value sent for *key*, empty if none."""
        return list(self._index.get(key.lower(), ()))

    @property
    def raw(self) -> tuple[tuple[bytes, bytes], ...]:
        """The byte pairs exactly as the parser collected them."""
        return self._raw
