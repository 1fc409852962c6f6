from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

from tgobjects.core.collection import Collection
from tgobjects.core.relations import Many, Raw, Resolved, Single


def read_payload(source: str) -> Any:
    if source == "-":
        return json.loads(sys.stdin.read())
    return json.loads(Path(source).read_text(encoding="utf-8"))


def shorten(value: Any, limit: int = 60) -> str:
    text = "" if value is None else str(value)
    if len(text) <= limit:
        return text
    return f"{text[: limit - 3]}..."


def describe_resolved(resolved: Resolved | None) -> tuple[str, str]:
    if resolved is None:
        return "absent", ""
    if isinstance(resolved, Single):
        return "single", type(resolved.value).__name__
    if isinstance(resolved, Many):
        first = resolved.value.first()
        item_type = type(first).__name__ if first is not None else "-"
        return "many", f"{len(resolved.value)} x {item_type}"
    if isinstance(resolved, Raw):
        value = resolved.value
        if isinstance(value, Collection):
            return "raw", f"Collection[{len(value)}]"
        return "raw", type(value).__name__
    raise TypeError(f"Unknown resolution {resolved!r}")
