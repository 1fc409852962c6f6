from __future__ import annotations

__version__ = "0.1.0"

__all__ = [
    "Collection",
    "Document",
    "TelegramObject",
    "Update",
    "UpdateKind",
    "__version__",
]

from .core import Collection, Document
from .objects import TelegramObject, Update, UpdateKind
