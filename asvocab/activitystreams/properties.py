"""
ActivityStreams 2.0 property declarations.

Each property is declared by its short name and its ordered alternatives.
When a value could decode as more than one alternative, the earlier one
wins, so the order of every tuple below is part of the wire contract.
"""

from __future__ import annotations

from asvocab.properties.base import (
    FunctionalProperty,
    NonFunctionalProperty,
    Property,
    type_alternatives,
)
from asvocab.values.xsd import (
    BCP47,
    RDF_LANG_STRING,
    XSD_ANY_URI,
    XSD_DATETIME,
    XSD_DURATION,
    XSD_FLOAT,
    XSD_NON_NEGATIVE_INTEGER,
    XSD_STRING,
)

OBJECT_OR_LINK = type_alternatives(
    "Object",
    "Link",
    "Collection",
    "CollectionPage",
    "Mention",
    "OrderedCollection",
    "OrderedCollectionPage",
    "Person",
    "Place",
    "Relationship",
)

OBJECT = type_alternatives(
    "Object",
    "Collection",
    "CollectionPage",
    "OrderedCollection",
    "OrderedCollectionPage",
    "Person",
    "Place",
    "Relationship",
)

COLLECTION_PAGE_OR_LINK = type_alternatives(
    "CollectionPage",
    "Link",
    "Mention",
    "OrderedCollectionPage",
)

COLLECTION_OR_LINK = type_alternatives(
    "Collection",
    "Link",
    "CollectionPage",
    "Mention",
    "OrderedCollection",
    "OrderedCollectionPage",
)

COLLECTION = type_alternatives(
    "Collection",
    "CollectionPage",
    "OrderedCollection",
    "OrderedCollectionPage",
)

ORDERED_COLLECTION = type_alternatives(
    "OrderedCollection",
    "Collection",
    "CollectionPage",
    "OrderedCollectionPage",
)


# ── Collection paging ───────────────────────────────────────────────


class NextProperty(FunctionalProperty):
    name = "next"
    alternatives = COLLECTION_PAGE_OR_LINK


class PrevProperty(FunctionalProperty):
    name = "prev"
    alternatives = COLLECTION_PAGE_OR_LINK


class CurrentProperty(FunctionalProperty):
    name = "current"
    alternatives = COLLECTION_PAGE_OR_LINK


class FirstProperty(FunctionalProperty):
    name = "first"
    alternatives = COLLECTION_PAGE_OR_LINK


class LastProperty(FunctionalProperty):
    name = "last"
    alternatives = COLLECTION_PAGE_OR_LINK


class PartOfProperty(FunctionalProperty):
    name = "partOf"
    alternatives = COLLECTION_OR_LINK


class ItemsProperty(NonFunctionalProperty):
    name = "items"
    alternatives = OBJECT_OR_LINK


class OrderedItemsProperty(NonFunctionalProperty):
    name = "orderedItems"
    alternatives = OBJECT_OR_LINK


class TotalItemsProperty(FunctionalProperty):
    name = "totalItems"
    alternatives = (XSD_NON_NEGATIVE_INTEGER,)


class StartIndexProperty(FunctionalProperty):
    name = "startIndex"
    alternatives = (XSD_NON_NEGATIVE_INTEGER,)


# ── Actor collections ───────────────────────────────────────────────


class FollowingProperty(FunctionalProperty):
    name = "following"
    alternatives = ORDERED_COLLECTION


class FollowersProperty(FunctionalProperty):
    name = "followers"
    alternatives = ORDERED_COLLECTION


class LikedProperty(FunctionalProperty):
    name = "liked"
    alternatives = ORDERED_COLLECTION


class LikesProperty(FunctionalProperty):
    name = "likes"
    alternatives = COLLECTION


class SharesProperty(FunctionalProperty):
    name = "shares"
    alternatives = COLLECTION


class RepliesProperty(FunctionalProperty):
    name = "replies"
    alternatives = COLLECTION


# ── Object references ───────────────────────────────────────────────


class AttachmentProperty(NonFunctionalProperty):
    name = "attachment"
    alternatives = OBJECT_OR_LINK


class AttributedToProperty(NonFunctionalProperty):
    name = "attributedTo"
    alternatives = OBJECT_OR_LINK


class AudienceProperty(NonFunctionalProperty):
    name = "audience"
    alternatives = OBJECT_OR_LINK


class BccProperty(NonFunctionalProperty):
    name = "bcc"
    alternatives = OBJECT_OR_LINK


class BtoProperty(NonFunctionalProperty):
    name = "bto"
    alternatives = OBJECT_OR_LINK


class CcProperty(NonFunctionalProperty):
    name = "cc"
    alternatives = OBJECT_OR_LINK


class ToProperty(NonFunctionalProperty):
    name = "to"
    alternatives = OBJECT_OR_LINK


class ContextProperty(NonFunctionalProperty):
    name = "context"
    alternatives = OBJECT_OR_LINK


class GeneratorProperty(NonFunctionalProperty):
    name = "generator"
    alternatives = OBJECT_OR_LINK


# Image is not modelled; any object or link is accepted
class IconProperty(NonFunctionalProperty):
    name = "icon"
    alternatives = OBJECT_OR_LINK


class ImageProperty(NonFunctionalProperty):
    name = "image"
    alternatives = OBJECT_OR_LINK


class InReplyToProperty(NonFunctionalProperty):
    name = "inReplyTo"
    alternatives = OBJECT_OR_LINK


class LocationProperty(NonFunctionalProperty):
    name = "location"
    alternatives = OBJECT_OR_LINK


class PreviewProperty(NonFunctionalProperty):
    name = "preview"
    alternatives = OBJECT_OR_LINK


class TagProperty(NonFunctionalProperty):
    name = "tag"
    alternatives = OBJECT_OR_LINK


class ObjectProperty(NonFunctionalProperty):
    name = "object"
    alternatives = OBJECT_OR_LINK


class SubjectProperty(FunctionalProperty):
    name = "subject"
    alternatives = OBJECT_OR_LINK


class RelationshipProperty(NonFunctionalProperty):
    name = "relationship"
    alternatives = OBJECT


class UrlProperty(NonFunctionalProperty):
    name = "url"
    alternatives = (XSD_ANY_URI, *type_alternatives("Link", "Mention"))
    admits_iri = False


# ── Identity ────────────────────────────────────────────────────────


class IdProperty(FunctionalProperty):
    name = "id"
    alternatives = (XSD_ANY_URI,)
    admits_iri = False
    prefixed = False


class TypeProperty(NonFunctionalProperty):
    name = "type"
    alternatives = (XSD_ANY_URI, XSD_STRING)
    admits_iri = False
    prefixed = False


# ── Literals ────────────────────────────────────────────────────────


class NameProperty(FunctionalProperty):
    name = "name"
    alternatives = (XSD_STRING,)
    admits_iri = False


class NameMapProperty(FunctionalProperty):
    name = "nameMap"
    alternatives = (RDF_LANG_STRING,)
    admits_iri = False


class SummaryProperty(FunctionalProperty):
    name = "summary"
    alternatives = (XSD_STRING,)
    admits_iri = False


class SummaryMapProperty(FunctionalProperty):
    name = "summaryMap"
    alternatives = (RDF_LANG_STRING,)
    admits_iri = False


class ContentProperty(FunctionalProperty):
    name = "content"
    alternatives = (XSD_STRING,)
    admits_iri = False


class ContentMapProperty(FunctionalProperty):
    name = "contentMap"
    alternatives = (RDF_LANG_STRING,)
    admits_iri = False


class MediaTypeProperty(FunctionalProperty):
    name = "mediaType"
    alternatives = (XSD_STRING,)
    admits_iri = False


class DurationProperty(FunctionalProperty):
    name = "duration"
    alternatives = (XSD_DURATION,)
    admits_iri = False


class StartTimeProperty(FunctionalProperty):
    name = "startTime"
    alternatives = (XSD_DATETIME,)
    admits_iri = False


class EndTimeProperty(FunctionalProperty):
    name = "endTime"
    alternatives = (XSD_DATETIME,)
    admits_iri = False


class PublishedProperty(FunctionalProperty):
    name = "published"
    alternatives = (XSD_DATETIME,)
    admits_iri = False


class UpdatedProperty(FunctionalProperty):
    name = "updated"
    alternatives = (XSD_DATETIME,)
    admits_iri = False


# ── Link ────────────────────────────────────────────────────────────


class HrefProperty(FunctionalProperty):
    name = "href"
    alternatives = (XSD_ANY_URI,)
    admits_iri = False


class HreflangProperty(FunctionalProperty):
    name = "hreflang"
    alternatives = (BCP47,)
    admits_iri = False


class RelProperty(NonFunctionalProperty):
    name = "rel"
    alternatives = (XSD_STRING,)
    admits_iri = False


class HeightProperty(FunctionalProperty):
    name = "height"
    alternatives = (XSD_NON_NEGATIVE_INTEGER,)


class WidthProperty(FunctionalProperty):
    name = "width"
    alternatives = (XSD_NON_NEGATIVE_INTEGER,)


# ── Place ───────────────────────────────────────────────────────────


class AccuracyProperty(FunctionalProperty):
    name = "accuracy"
    alternatives = (XSD_FLOAT,)


class AltitudeProperty(FunctionalProperty):
    name = "altitude"
    alternatives = (XSD_FLOAT,)


class LatitudeProperty(FunctionalProperty):
    name = "latitude"
    alternatives = (XSD_FLOAT,)


class LongitudeProperty(FunctionalProperty):
    name = "longitude"
    alternatives = (XSD_FLOAT,)


class RadiusProperty(FunctionalProperty):
    name = "radius"
    alternatives = (XSD_FLOAT,)


class UnitsProperty(FunctionalProperty):
    name = "units"
    alternatives = (XSD_STRING,)


# ── Property sets shared by several types ───────────────────────────

OBJECT_PROPERTIES: tuple[type[Property], ...] = (
    AttachmentProperty,
    AttributedToProperty,
    AudienceProperty,
    BccProperty,
    BtoProperty,
    CcProperty,
    ContentProperty,
    ContentMapProperty,
    ContextProperty,
    DurationProperty,
    EndTimeProperty,
    GeneratorProperty,
    IconProperty,
    IdProperty,
    ImageProperty,
    InReplyToProperty,
    LikesProperty,
    LocationProperty,
    MediaTypeProperty,
    NameProperty,
    NameMapProperty,
    PreviewProperty,
    PublishedProperty,
    RepliesProperty,
    SharesProperty,
    StartTimeProperty,
    SummaryProperty,
    SummaryMapProperty,
    TagProperty,
    ToProperty,
    TypeProperty,
    UpdatedProperty,
    UrlProperty,
)

LINK_PROPERTIES: tuple[type[Property], ...] = (
    AttributedToProperty,
    HeightProperty,
    HrefProperty,
    HreflangProperty,
    IdProperty,
    MediaTypeProperty,
    NameProperty,
    NameMapProperty,
    PreviewProperty,
    RelProperty,
    SummaryProperty,
    SummaryMapProperty,
    TypeProperty,
    WidthProperty,
)
