from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from asvocab.core.types import AS_CONTEXT_URI, AS_VOCABULARY_URI, AliasMap
from asvocab.registry import TypeRegistry


@pytest.fixture()
def registry() -> TypeRegistry:
    return TypeRegistry()


@pytest.fixture()
def as_alias_map() -> AliasMap:
    """A document that imports the vocabulary under the ``as:`` prefix."""
    return {AS_VOCABULARY_URI: "as"}


@pytest.fixture()
def outbox_page() -> dict[str, Any]:
    return {
        "@context": AS_CONTEXT_URI,
        "type": "OrderedCollectionPage",
        "id": "https://example.com/outbox?page=1",
        "next": "https://example.com/outbox?page=2",
        "partOf": "https://example.com/outbox",
        "totalItems": 2,
        "startIndex": 0,
        "orderedItems": [
            {"type": "Link", "href": "https://example.com/a"},
            "https://example.com/b",
        ],
    }


@pytest.fixture()
def write_json(tmp_path: Path):
    """Write a JSON document under tmp_path and return its path."""

    def _write(document: Any, name: str = "doc.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write
