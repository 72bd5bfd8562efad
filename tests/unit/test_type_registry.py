from __future__ import annotations

import pytest

from asvocab import parse_config
from asvocab.activitystreams import DEFAULT_TYPES, Link, Mention
from asvocab.core.exceptions import UnregisteredTypeError
from asvocab.registry import TypeRegistry

# ── TypeRegistry ─────────────────────────────────────────────────────


class TestTypeRegistry:
    def test_defaults_are_loaded_lazily(self):
        registry = TypeRegistry()
        assert len(registry) == len(DEFAULT_TYPES)
        assert "Link" in registry
        assert registry.get("Person") is not None
        assert registry.names() == sorted(cls.type_name for cls in DEFAULT_TYPES)

    def test_empty_registry(self):
        registry = TypeRegistry(load_defaults=False)
        assert len(registry) == 0
        assert registry.get("Link") is None

    def test_register_and_deserialize(self):
        registry = TypeRegistry(load_defaults=False)
        registry.register(Link)

        link = registry.deserializer("Link")({"type": "Link"}, {})
        assert isinstance(link, Link)

    def test_register_under_another_name(self):
        registry = TypeRegistry(load_defaults=False)
        registry.register(Mention, "Tag")
        assert registry.get("Tag") is Mention

    def test_missing_deserializer_raises(self):
        registry = TypeRegistry(load_defaults=False)
        with pytest.raises(UnregisteredTypeError, match='type "Note"'):
            registry.deserializer("Note")

    def test_unregister(self):
        registry = TypeRegistry()
        registry.unregister("Person")
        assert "Person" not in registry

    def test_restricted(self):
        registry = TypeRegistry().restricted(
            include=["Link", "Mention", "Place"], exclude=["Place"]
        )
        assert registry.names() == ["Link", "Mention"]

    def test_registries_are_independent(self):
        a = TypeRegistry()
        b = TypeRegistry()
        a.unregister("Link")
        assert "Link" in b


# ── parse_config ─────────────────────────────────────────────────────


class TestParseConfig:
    def test_empty_config_registers_everything(self):
        assert len(parse_config({})) == len(DEFAULT_TYPES)

    def test_explicit_none_include(self):
        registry = parse_config({"types": {"include": None, "exclude": []}})
        assert len(registry) == len(DEFAULT_TYPES)

    def test_include(self):
        assert parse_config({"types": {"include": ["Link"]}}).names() == ["Link"]

    def test_exclude(self):
        registry = parse_config({"types": {"exclude": ["Person", "Place"]}})
        assert "Person" not in registry
        assert "Place" not in registry
        assert "Object" in registry

    def test_unknown_type_name(self):
        with pytest.raises(ValueError, match="Unknown vocabulary type"):
            parse_config({"types": {"include": ["Note"]}})
