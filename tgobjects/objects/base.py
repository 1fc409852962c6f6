from __future__ import annotations

from typing import Any

from tgobjects.core.document import Document


class TelegramObject(Document):
    """Bot API object; also the generic wrapper for fields with no known type."""

    @classmethod
    def lookup_type(cls, name: str) -> type[Document] | None:
        from tgobjects.objects.registry import OBJECT_TYPES

        return OBJECT_TYPES.get(name)

    @classmethod
    def generic(cls, data: Any = None) -> Document:
        return TelegramObject(data)
