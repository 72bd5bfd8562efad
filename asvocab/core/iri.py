"""IRI classification.

Generic URI parsers accept almost any string, so a value only counts as an
IRI here when it carries a scheme component.
"""

from __future__ import annotations

from urllib.parse import urlsplit


def parse_iri(value: str) -> str | None:
    """Return *value* if it parses as an absolute IRI, ``None`` otherwise."""
    try:
        parts = urlsplit(value)
    except ValueError:
        return None
    if not parts.scheme:
        return None
    return value


def is_iri(value: object) -> bool:
    return isinstance(value, str) and parse_iri(value) is not None
