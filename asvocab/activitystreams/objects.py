"""
ActivityStreams 2.0 Object Types.

Object types from the AS2 specification.
"""

from __future__ import annotations

from asvocab.activitystreams.core import ASType, property_set
from asvocab.activitystreams.properties import (
    OBJECT_PROPERTIES,
    AccuracyProperty,
    AltitudeProperty,
    LatitudeProperty,
    LongitudeProperty,
    ObjectProperty,
    RadiusProperty,
    RelationshipProperty,
    SubjectProperty,
    UnitsProperty,
)


class Place(ASType):
    """
    Represents a logical or physical location.
    """

    type_name = "Place"
    properties = property_set(
        OBJECT_PROPERTIES,
        (
            AccuracyProperty,
            AltitudeProperty,
            LatitudeProperty,
            LongitudeProperty,
            RadiusProperty,
            UnitsProperty,
        ),
    )


class Relationship(ASType):
    """
    Describes a relationship between two individuals.

    The subject and object properties identify the connected individuals.
    Per JSON-LD notation an IRI string and ``{"id": <iri>}`` denote the same
    object, so ``relationship`` commonly arrives as a bare IRI.
    """

    type_name = "Relationship"
    properties = property_set(
        OBJECT_PROPERTIES,
        (ObjectProperty, RelationshipProperty, SubjectProperty),
    )
