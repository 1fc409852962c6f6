from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Iterable, Iterator

_MISSING = object()


class Collection(Sequence):
    """Ordered, read-only sequence of wrapped values."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: tuple[Any, ...] = tuple(items)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Collection(self._items[index])
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Collection):
            return self._items == other._items
        if isinstance(other, (list, tuple)):
            return list(self._items) == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Collection({list(self._items)!r})"

    def contains(self, key: Any, value: Any = _MISSING) -> bool:
        """``contains("type", "bot_command")`` matches on an item field; one argument matches items."""
        if value is _MISSING:
            if callable(key):
                return any(key(item) for item in self._items)
            return key in self._items
        for item in self._items:
            getter = getattr(item, "get", None)
            if getter is not None and getter(key) == value:
                return True
        return False

    def first(self, default: Any = None) -> Any:
        return self._items[0] if self._items else default

    def last(self, default: Any = None) -> Any:
        return self._items[-1] if self._items else default

    def to_list(self) -> list[Any]:
        result: list[Any] = []
        for item in self._items:
            if hasattr(item, "raw_response"):
                result.append(item.raw_response())
            elif isinstance(item, Collection):
                result.append(item.to_list())
            else:
                result.append(item)
        return result
