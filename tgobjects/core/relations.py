"""Relation markers and the resolver that applies them.

A typed wrapper declares its known nested-object fields in ``relations()``::

    def relations(self):
        return {
            "chat": HasOne(Chat),
            "entities": HasMany(MessageEntity),
            "pinned_message": HasOne("Message"),
        }

Targets are wrapper classes, or names looked up in a static registration
table for forward references. Resolution happens on every access; nothing is
cached.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Union

from tgobjects.config import get_settings
from tgobjects.core.collection import Collection
from tgobjects.core.errors import MalformedRelationError, RelationConfigError

LOGGER = logging.getLogger(__name__)

TypeLookup = Callable[[str], Union[type, None]]


@dataclass(frozen=True)
class HasOne:
    target: type | str


@dataclass(frozen=True)
class HasMany:
    target: type | str


Relation = Union[HasOne, HasMany]


@dataclass(frozen=True)
class Single:
    value: Any


@dataclass(frozen=True)
class Many:
    value: Collection


@dataclass(frozen=True)
class Raw:
    value: Any


Resolved = Union[Single, Many, Raw]


def resolve_target(name: str, relation: Relation, *, lookup: TypeLookup, base: type) -> type:
    target = relation.target
    if isinstance(target, str):
        found = lookup(target)
        if found is None:
            raise RelationConfigError(name, target)
        target = found
    if not isinstance(target, type) or not issubclass(target, base):
        raise RelationConfigError(name, target)
    return target


def resolve_relation(
    name: str,
    relation: Relation,
    raw: Any,
    *,
    lookup: TypeLookup,
    base: type,
    strict: bool | None = None,
) -> Single | Many:
    target = resolve_target(name, relation, lookup=lookup, base=base)
    if strict is None:
        strict = get_settings().strict_relations

    if isinstance(relation, HasOne):
        if isinstance(raw, Mapping) or isinstance(raw, base):
            return Single(target(raw))
        if strict:
            raise MalformedRelationError(name, "a mapping", raw)
        LOGGER.warning("Relation %s got %s instead of a mapping, using an empty %s", name, type(raw).__name__, target.__name__)
        return Single(target({}))

    if isinstance(raw, (list, tuple)) and all(isinstance(item, Mapping) for item in raw):
        return Many(Collection(target(item) for item in raw))
    if strict:
        raise MalformedRelationError(name, "a sequence of mappings", raw)
    LOGGER.warning("Relation %s got %s instead of a sequence of mappings, using an empty list", name, type(raw).__name__)
    return Many(Collection())
