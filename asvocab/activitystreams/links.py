"""
ActivityStreams 2.0 Link Types.

Link types from the AS2 specification.
"""

from __future__ import annotations

from asvocab.activitystreams.core import ASType, Link


class Mention(ASType):
    """
    A specialized Link that represents an @mention.
    """

    type_name = "Mention"
    properties = Link.properties
