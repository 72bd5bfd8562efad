"""Shared aliases, namespace constants and key helpers."""

from __future__ import annotations

from typing import Any

JSONMap = dict[str, Any]
AliasMap = dict[str, str]

AS_VOCABULARY_URI = "https://www.w3.org/TR/activitystreams-vocabulary"
AS_CONTEXT_URI = "https://www.w3.org/ns/activitystreams"

# JSON-LD @context URI -> vocabulary URI used as the alias-table key
CONTEXT_TO_VOCABULARY: dict[str, str] = {
    AS_CONTEXT_URI: AS_VOCABULARY_URI,
    AS_CONTEXT_URI + "#": AS_VOCABULARY_URI,
    AS_VOCABULARY_URI: AS_VOCABULARY_URI,
}

VOCABULARY_TO_CONTEXT: dict[str, str] = {AS_VOCABULARY_URI: AS_CONTEXT_URI}


def vocabulary_alias(alias_map: AliasMap, vocabulary_uri: str = AS_VOCABULARY_URI) -> str:
    """Return the alias a document uses for *vocabulary_uri*, or ``""``."""
    return alias_map.get(vocabulary_uri, "")


def prefixed_key(name: str, alias: str) -> str:
    """``alias:name`` when an alias is in use, otherwise the bare name."""
    if alias:
        return f"{alias}:{name}"
    return name


def strip_alias(value: str, alias: str) -> str:
    prefix = f"{alias}:" if alias else ""
    if prefix and value.startswith(prefix):
        return value[len(prefix) :]
    return value


def merge_context(into: dict[str, str], other: dict[str, str]) -> dict[str, str]:
    """Merge *other* into *into* without overwriting keys already present."""
    for uri, alias in other.items():
        into.setdefault(uri, alias)
    return into
