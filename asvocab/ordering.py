"""Canonical ordering helpers built on ``less_than``."""

from __future__ import annotations

from typing import Protocol, Self

from asvocab.activitystreams.core import ASType
from asvocab.properties.base import FunctionalProperty, NonFunctionalProperty


class Comparable(Protocol):
    def less_than(self, other: Self, /) -> bool: ...


def equivalent(lhs: Comparable, rhs: Comparable) -> bool:
    """True when neither value orders before the other."""
    return not lhs.less_than(rhs) and not rhs.less_than(lhs)


def _normalize_entry(entry: FunctionalProperty) -> None:
    if isinstance(entry.value, ASType):
        normalize(entry.value)


def normalize(obj: ASType) -> ASType:
    """Sort every multi-valued property of *obj* in place, depth first.

    Returns *obj* for chaining.
    """
    for prop in obj.present_properties():
        if isinstance(prop, NonFunctionalProperty):
            for entry in prop:
                _normalize_entry(entry)
            prop.sort()
        elif isinstance(prop, FunctionalProperty):
            _normalize_entry(prop)
    return obj
