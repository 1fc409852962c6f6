from __future__ import annotations


class ObjectsError(Exception):
    """Base class for every error raised by tgobjects."""


class RelationConfigError(ObjectsError, LookupError):
    """A relation points at a wrapper class that cannot be resolved."""

    def __init__(self, relation: str, target: object) -> None:
        self.relation = relation
        self.target = target
        super().__init__(f"Could not load {relation!r} relation: class {target!r} not found.")


class MalformedDocumentError(ObjectsError, ValueError):
    """Raw data does not have the shape a wrapper expects."""


class MalformedRelationError(MalformedDocumentError):
    def __init__(self, relation: str, expected: str, value: object) -> None:
        self.relation = relation
        self.expected = expected
        super().__init__(
            f"Relation {relation!r} expects {expected}, got {type(value).__name__}."
        )


class UnsupportedOperationError(ObjectsError, AttributeError):
    """Raised for dynamic method names that are not ``getX`` accessors."""
