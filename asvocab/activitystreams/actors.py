"""
ActivityStreams 2.0 Actor Types.

Actors are the entities that perform activities.
"""

from __future__ import annotations

from asvocab.activitystreams.core import ASType, property_set
from asvocab.activitystreams.properties import (
    OBJECT_PROPERTIES,
    FollowersProperty,
    FollowingProperty,
    LikedProperty,
)


class Person(ASType):
    """
    Represents an individual person.
    """

    type_name = "Person"
    properties = property_set(
        OBJECT_PROPERTIES,
        (FollowersProperty, FollowingProperty, LikedProperty),
    )
