"""JSON-LD document helpers: ``@context`` handling and top-level type resolution."""

from __future__ import annotations

import json
import logging
from typing import Any

from asvocab.activitystreams.core import ASType
from asvocab.core.exceptions import UnhandledTypeError
from asvocab.core.types import (
    CONTEXT_TO_VOCABULARY,
    VOCABULARY_TO_CONTEXT,
    AliasMap,
    JSONMap,
    strip_alias,
    vocabulary_alias,
)
from asvocab.registry import TypeRegistry

logger = logging.getLogger(__name__)


def _vocabulary_for(uri: str) -> str:
    return CONTEXT_TO_VOCABULARY.get(uri, uri)


def _looks_like_namespace(uri: str) -> bool:
    return uri in CONTEXT_TO_VOCABULARY or uri.endswith(("/", "#"))


def alias_map_from_context(context: Any) -> AliasMap:
    """Build the vocabulary-URI -> alias table from a JSON-LD ``@context``.

    Accepts a string, a mapping, or a list mixing both. A vocabulary imported
    as a bare string anywhere in the context is used without an alias, since
    documents written against it use unprefixed keys.
    """
    bare: list[str] = []
    prefixes: dict[str, str] = {}
    entries = context if isinstance(context, list) else [context]
    for entry in entries:
        if isinstance(entry, str):
            bare.append(_vocabulary_for(entry))
        elif isinstance(entry, dict):
            for term, uri in entry.items():
                if not isinstance(uri, str) or not _looks_like_namespace(uri):
                    continue
                if term == "@vocab":
                    bare.append(_vocabulary_for(uri))
                elif not term.startswith("@"):
                    prefixes.setdefault(_vocabulary_for(uri), term)

    alias_map: AliasMap = dict(prefixes)
    for vocabulary in bare:
        alias_map[vocabulary] = ""
    return alias_map


def _type_names(value: Any) -> list[str]:
    if isinstance(value, str):
        return [value]
    if isinstance(value, list):
        return [name for name in value if isinstance(name, str)]
    return []


def to_type(document: JSONMap, registry: TypeRegistry | None = None) -> ASType:
    """Decode a full JSON-LD document into its vocabulary type.

    The first name in ``type`` with a registered class wins.
    Raises :class:`UnhandledTypeError` when none is registered.
    """
    if registry is None:
        registry = TypeRegistry()
    alias_map = alias_map_from_context(document.get("@context", []))
    body = {key: value for key, value in document.items() if key != "@context"}
    alias = vocabulary_alias(alias_map)

    names = _type_names(body.get("type"))
    for name in names:
        cls = registry.get(strip_alias(name, alias))
        if cls is not None:
            logger.debug("Resolved document type %r to %s", name, cls.__name__)
            return cls.deserialize(body, alias_map, registry)
    raise UnhandledTypeError(names)


def context_value(context: dict[str, str]) -> Any:
    """Render a vocabulary -> alias table as a readable ``@context`` value."""
    uris = {
        VOCABULARY_TO_CONTEXT.get(vocabulary, vocabulary): alias
        for vocabulary, alias in context.items()
    }
    if len(uris) == 1:
        ((uri, alias),) = uris.items()
        return {alias: uri} if alias else uri
    bare: list[Any] = [uri for uri, alias in uris.items() if not alias]
    aliased = {alias: uri for uri, alias in uris.items() if alias}
    if aliased:
        bare.append(aliased)
    return bare


def serialize(obj: ASType) -> JSONMap:
    """Serialize *obj* as a top-level document, including ``@context``."""
    return {"@context": context_value(obj.jsonld_context()), **obj.serialize()}


def loads(text: str | bytes, registry: TypeRegistry | None = None) -> ASType:
    document = json.loads(text)
    if not isinstance(document, dict):
        raise UnhandledTypeError([])
    return to_type(document, registry)


def dumps(obj: ASType, **kwargs: Any) -> str:
    return json.dumps(serialize(obj), ensure_ascii=False, **kwargs)
