"""
ActivityStreams 2.0 vocabulary types

This package provides the ActivityStreams 2.0 types and properties that the
codec understands:
- Core Types: Object, Link, Collection, OrderedCollection, CollectionPage,
  OrderedCollectionPage
- Link Types: Mention
- Object Types: Place, Relationship
- Actor Types: Person

Usage:
    from asvocab.activitystreams import Link
    from asvocab.registry import TypeRegistry

    link = Link.deserialize(
        {"type": "Link", "href": "https://example.com/"},
        {},
        TypeRegistry(),
    )
"""

from asvocab.activitystreams.actors import Person
from asvocab.activitystreams.core import (
    ASType,
    Collection,
    CollectionPage,
    Link,
    Object,
    OrderedCollection,
    OrderedCollectionPage,
)
from asvocab.activitystreams.links import Mention
from asvocab.activitystreams.objects import Place, Relationship

DEFAULT_TYPES: tuple[type[ASType], ...] = (
    Object,
    Link,
    Collection,
    OrderedCollection,
    CollectionPage,
    OrderedCollectionPage,
    Mention,
    Place,
    Relationship,
    Person,
)

__all__ = [
    "DEFAULT_TYPES",
    # Core types
    "ASType",
    "Object",
    "Link",
    "Collection",
    "OrderedCollection",
    "CollectionPage",
    "OrderedCollectionPage",
    # Link types
    "Mention",
    # Object types
    "Place",
    "Relationship",
    # Actor types
    "Person",
]
