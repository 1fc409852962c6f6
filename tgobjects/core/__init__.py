from __future__ import annotations

__all__ = [
    "Collection",
    "Document",
    "HasMany",
    "HasOne",
    "MalformedDocumentError",
    "MalformedRelationError",
    "Many",
    "ObjectsError",
    "Raw",
    "RelationConfigError",
    "Single",
    "UnsupportedOperationError",
    "snake",
    "studly",
]

from .collection import Collection
from .document import Document
from .errors import (
    MalformedDocumentError,
    MalformedRelationError,
    ObjectsError,
    RelationConfigError,
    UnsupportedOperationError,
)
from .naming import snake, studly
from .relations import HasMany, HasOne, Many, Raw, Single
