"""Terminal rendering for the asvocab CLI.

Property values are coloured by what the resolver made of them: typed
alternatives green, bare IRIs cyan, unknown values yellow and empty
holders dimmed. Colour is dropped when stdout is not a TTY or when
``NO_COLOR`` is set.
"""

from __future__ import annotations

import os
import sys

from asvocab.activitystreams.lattice import TypeRelations
from asvocab.properties.base import FunctionalProperty, NonFunctionalProperty, Property

_STYLES = {
    "heading": "1",
    "muted": "2",
    "typed": "32",
    "iri": "36",
    "unknown": "33",
    "failure": "31",
}


def _supports_color() -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


def paint(style: str, text: str) -> str:
    if not _supports_color():
        return text
    return f"\033[{_STYLES[style]}m{text}\033[0m"


# ── Resolved values ─────────────────────────────────────────────────


def member_label(prop: FunctionalProperty) -> str:
    """Say which member a single-valued holder resolved to."""
    match prop.member.kind:
        case "typed":
            return paint("typed", prop.type_name or "")
        case "iri":
            return paint("iri", f"IRI {prop.get_iri()}")
        case "unknown":
            kind = type(prop.get_unknown()).__name__
            return paint("unknown", f"unknown ({kind})")
    return paint("muted", "empty")


def property_label(prop: Property) -> str:
    if isinstance(prop, NonFunctionalProperty):
        if not len(prop):
            return paint("muted", "[]")
        return "[" + ", ".join(member_label(entry) for entry in prop) + "]"
    if isinstance(prop, FunctionalProperty):
        return member_label(prop)
    return repr(prop)


def _names(names: frozenset[str]) -> str:
    return ", ".join(sorted(names)) or "-"


def type_entry(name: str, relations: TypeRelations, *, full: bool = False) -> None:
    """Print a registered type with its place in the type lattice."""
    print(f"  {paint('iri', name)}")
    field("extends", _names(relations.extends), indent=4)
    if full:
        field("extended by", _names(relations.extended_by), indent=4)
        field("disjoint with", _names(relations.disjoint_with), indent=4)


# ── Lines ───────────────────────────────────────────────────────────


def heading(title: str) -> None:
    print(f"\n{paint('heading', title)}")


def field(key: str, value: object, indent: int = 2) -> None:
    print(f"{' ' * indent}{paint('muted', key + ':')}  {value}")


def note(msg: str) -> None:
    print(f"  {msg}")


def done(msg: str) -> None:
    print(f"  {paint('typed', '✓')} {msg}")


def flagged(msg: str) -> None:
    print(f"  {paint('unknown', '!')} {msg}")


def failure(msg: str) -> None:
    print(f"  {paint('failure', '✗')} {msg}", file=sys.stderr)
