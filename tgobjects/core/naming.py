from __future__ import annotations

import re
from functools import lru_cache

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


@lru_cache(maxsize=1024)
def snake(name: str) -> str:
    """Translate an accessor name (``editedMessage``, ``from_``) to its wire name.

    snake_case names map to themselves; one trailing underscore is dropped so
    that keyword-escaped accessors such as ``from_`` reach the ``from`` field.
    """
    if name.endswith("_") and not name.endswith("__"):
        name = name[:-1]
    return _CAMEL_BOUNDARY.sub("_", name).lower()


@lru_cache(maxsize=1024)
def studly(name: str) -> str:
    return "".join(part[:1].upper() + part[1:] for part in snake(name).split("_") if part)
