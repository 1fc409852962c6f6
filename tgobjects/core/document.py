from __future__ import annotations

import copy
import logging
import re
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Callable, Iterable, Iterator

from tgobjects.config import get_settings
from tgobjects.core.collection import Collection
from tgobjects.core.errors import MalformedDocumentError, UnsupportedOperationError
from tgobjects.core.naming import snake, studly
from tgobjects.core.relations import Raw, Relation, Resolved, Single, resolve_relation

LOGGER = logging.getLogger(__name__)

_ACCESSOR = re.compile(r"get(?:_([a-z]\w*)|([A-Z]\w*))")


def value_of(default: Any) -> Any:
    return default() if callable(default) else default


def unwrap_result(data: Any) -> Any:
    if isinstance(data, Mapping) and "result" in data:
        return data["result"]
    return data


class Document:
    """Read-only wrapper over one parsed API object.

    Fields are reachable as attributes (``doc.chat``, ``doc.editedMessage``),
    through ``get()`` with the wire name, or through ``getX()`` accessors.
    Nested values are wrapped again on every access. Any other public
    attribute name is a field read, so ``doc.sendText`` is ``None``; method
    names are dispatched through ``accessor()``, which rejects anything but
    ``getX`` and ``get_x``.
    """

    def __init__(self, data: Any = None) -> None:
        ok: bool | None = None
        if isinstance(data, Document):
            ok = data._ok
            data = data.raw_response()
        if data is None:
            data = {}
        if isinstance(data, Mapping) and "result" in data:
            ok = bool(data.get("ok", False))
        self._ok = ok
        result = unwrap_result(data)
        if isinstance(result, Document):
            result = result.raw_response()
        if isinstance(result, Mapping):
            items = dict(result)
        elif isinstance(result, (list, tuple)):
            items = dict(enumerate(result))
        elif result is None:
            items = {}
        else:
            raise MalformedDocumentError(f"{type(self).__name__} cannot wrap {type(result).__name__}")
        self._items: Mapping[Any, Any] = MappingProxyType(items)

    def relations(self) -> Mapping[str, Relation]:
        return {}

    @classmethod
    def lookup_type(cls, name: str) -> type[Document] | None:
        return None

    @classmethod
    def generic(cls, data: Any = None) -> Document:
        return Document(data)

    def get(self, key: Any, default: Any = None) -> Any:
        value = self._items.get(key)
        if value is None:
            return value_of(default)
        if not isinstance(value, (Mapping, list, tuple)):
            return value
        return self.get_property_value(key, default)

    def has(self, key: Any) -> bool:
        return key in self._items

    def keys(self) -> list[Any]:
        return list(self._items)

    def first(self) -> Any:
        keys = self.keys()
        return self.get_property_value(keys[0]) if keys else None

    def last(self) -> Any:
        keys = self.keys()
        return self.get_property_value(keys[-1]) if keys else None

    def except_keys(self, *keys: Any) -> Document:
        return type(self)({key: value for key, value in self._items.items() if key not in keys})

    def get_property_value(self, name: Any, default: Any = None) -> Any:
        resolved = self.resolve(name)
        if resolved is None:
            return value_of(default)
        return resolved.value

    def resolve(self, name: Any) -> Resolved | None:
        """Resolve one field to ``Single``, ``Many`` or ``Raw``; ``None`` when absent or null."""
        key = snake(name) if isinstance(name, str) else name
        if key not in self._items:
            return None
        value = self._items[key]
        if value is None:
            return None

        relation = self.relations().get(key) if isinstance(key, str) else None
        if relation is not None:
            return resolve_relation(key, relation, value, lookup=self.lookup_type, base=Document)

        if isinstance(key, str) and isinstance(value, Mapping):
            wrapper = self.lookup_type(studly(key))
            if wrapper is not None:
                return Single(wrapper(value))

        return Raw(self._wrap(value))

    def _wrap(self, value: Any) -> Any:
        if isinstance(value, Mapping):
            return self.generic(value)
        if isinstance(value, (list, tuple)):
            return Collection(self._wrap(item) for item in value)
        return value

    def accessor(self, method: str) -> Callable[[], Any]:
        match = _ACCESSOR.fullmatch(method)
        if match is None:
            if get_settings().legacy_accessor_fallback:
                LOGGER.debug("Unsupported accessor %s on %s, returning False", method, type(self).__name__)
                return lambda *args, **kwargs: False
            raise UnsupportedOperationError(f"{type(self).__name__}.{method}() is not a supported accessor")
        field = match.group(1) or match.group(2)
        return lambda: self.get_property_value(field)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise UnsupportedOperationError(f"{type(self).__name__} has no attribute {name!r}")
        if _ACCESSOR.fullmatch(name):
            return self.accessor(name)
        return self.get_property_value(name)

    def raw_response(self) -> dict[Any, Any]:
        return copy.deepcopy(dict(self._items))

    def to_dict(self) -> dict[Any, Any]:
        return self.raw_response()

    def get_status(self) -> bool:
        """``ok`` flag of the response envelope, kept even after unwrapping."""
        if self._ok is not None:
            return self._ok
        return bool(self._items.get("ok", False))

    def object_type(self) -> str | None:
        return None

    def is_type(self, kind: Any) -> bool:
        kind = getattr(kind, "value", kind)
        if self.has(snake(kind)):
            return True
        return self.object_type() == kind

    def find_type(self, types: Iterable[str]) -> str | None:
        known = set(types)
        matches = [key for key in self.keys() if key in known]
        return matches[-1] if matches else None

    def __getitem__(self, key: Any) -> Any:
        if (snake(key) if isinstance(key, str) else key) not in self._items:
            raise KeyError(key)
        return self.get_property_value(key)

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return type(self) is type(other) and dict(self._items) == dict(other._items)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self._items)!r})"
