"""
Static type relations of the ActivityStreams vocabulary.

Relations are plain name sets queried by name. They describe the vocabulary's
type lattice and are not mirrored by Python inheritance.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# Every Object-family type the vocabulary defines, including ones this
# package has no class for.
OBJECT_FAMILY: frozenset[str] = frozenset(
    {
        "Accept", "Activity", "Add", "Announce", "Application", "Arrive",
        "Article", "Audio", "Block", "Collection", "CollectionPage", "Create",
        "Delete", "Dislike", "Document", "Event", "Flag", "Follow", "Group",
        "Ignore", "Image", "IntransitiveActivity", "Invite", "Join", "Leave",
        "Like", "Listen", "Move", "Note", "Object", "Offer",
        "OrderedCollection", "OrderedCollectionPage", "Organization", "Page",
        "Person", "Place", "Profile", "Question", "Read", "Reject",
        "Relationship", "Remove", "Service", "TentativeAccept",
        "TentativeReject", "Tombstone", "Travel", "Undo", "Update", "Video",
        "View",
    }
)  # fmt: skip

LINK_FAMILY: frozenset[str] = frozenset({"Link", "Mention"})


@dataclass(frozen=True)
class TypeRelations:
    extends: frozenset[str] = field(default_factory=frozenset)
    extended_by: frozenset[str] = field(default_factory=frozenset)
    disjoint_with: frozenset[str] = field(default_factory=frozenset)


TYPE_LATTICE: dict[str, TypeRelations] = {
    "Object": TypeRelations(
        extended_by=OBJECT_FAMILY - {"Object"},
        disjoint_with=LINK_FAMILY,
    ),
    "Link": TypeRelations(
        extended_by=frozenset({"Mention"}),
        disjoint_with=OBJECT_FAMILY,
    ),
    "Mention": TypeRelations(
        extends=frozenset({"Link"}),
        disjoint_with=OBJECT_FAMILY,
    ),
    "Place": TypeRelations(
        extends=frozenset({"Object"}),
        disjoint_with=LINK_FAMILY,
    ),
    "Relationship": TypeRelations(
        extends=frozenset({"Object"}),
        disjoint_with=LINK_FAMILY,
    ),
    "Person": TypeRelations(
        extends=frozenset({"Object"}),
        disjoint_with=LINK_FAMILY,
    ),
    "Collection": TypeRelations(
        extends=frozenset({"Object"}),
        extended_by=frozenset(
            {"CollectionPage", "OrderedCollection", "OrderedCollectionPage"}
        ),
        disjoint_with=LINK_FAMILY,
    ),
    "OrderedCollection": TypeRelations(
        extends=frozenset({"Collection", "Object"}),
        extended_by=frozenset({"OrderedCollectionPage"}),
        disjoint_with=LINK_FAMILY,
    ),
    "CollectionPage": TypeRelations(
        extends=frozenset({"Collection", "Object"}),
        extended_by=frozenset({"OrderedCollectionPage"}),
        disjoint_with=LINK_FAMILY,
    ),
    "OrderedCollectionPage": TypeRelations(
        extends=frozenset(
            {"CollectionPage", "Collection", "OrderedCollection", "Object"}
        ),
        disjoint_with=LINK_FAMILY,
    ),
}

_NO_RELATIONS = TypeRelations()


def relations(type_name: str) -> TypeRelations:
    return TYPE_LATTICE.get(type_name, _NO_RELATIONS)


def extends(type_name: str, other: str) -> bool:
    """True if *type_name* extends *other*."""
    return other in relations(type_name).extends


def is_extended_by(type_name: str, other: str) -> bool:
    """True if *other* extends *type_name*."""
    return other in relations(type_name).extended_by


def is_disjoint_with(type_name: str, other: str) -> bool:
    return other in relations(type_name).disjoint_with
