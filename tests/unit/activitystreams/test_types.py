from __future__ import annotations

import pytest
from pydantic import BaseModel

from asvocab.activitystreams import (
    Collection,
    Link,
    Mention,
    Object,
    OrderedCollectionPage,
    Person,
    Place,
    Relationship,
)
from asvocab.activitystreams.properties import (
    HrefProperty,
    LatitudeProperty,
    NameProperty,
)
from asvocab.core.exceptions import TypeMismatchError
from asvocab.core.types import AS_VOCABULARY_URI, AliasMap, merge_context
from asvocab.registry import TypeRegistry

# ── Type discriminator ───────────────────────────────────────────────


class TestTypeCheck:
    def test_wrong_type_raises(self, registry: TypeRegistry):
        with pytest.raises(TypeMismatchError) as exc_info:
            Link.deserialize({"type": "Note"}, {}, registry)
        assert exc_info.value.type_name == "Link"
        assert exc_info.value.message == '"type" property is not of "Link" type'

    def test_missing_type_raises(self, registry: TypeRegistry):
        with pytest.raises(TypeMismatchError, match='no "type" property'):
            Link.deserialize({"href": "https://example.com/"}, {}, registry)

    def test_non_string_type_raises(self, registry: TypeRegistry):
        with pytest.raises(TypeMismatchError, match="unrecognized type: int"):
            Link.deserialize({"type": 5}, {}, registry)

    def test_type_list_containing_name_matches(self, registry: TypeRegistry):
        link = Link.deserialize({"type": ["Link", "Mention"]}, {}, registry)
        assert link.serialize() == {"type": ["Link", "Mention"]}

    def test_aliased_type(self, registry: TypeRegistry, as_alias_map: AliasMap):
        link = Link.deserialize({"type": "as:Link"}, as_alias_map, registry)
        assert link.alias == "as"

        with pytest.raises(TypeMismatchError):
            Link.deserialize({"type": "Link:as"}, as_alias_map, registry)


# ── Known and unknown properties ─────────────────────────────────────


class TestProperties:
    def test_unknown_keys_are_preserved(self, registry: TypeRegistry):
        raw = {"type": "Object", "name": "A note", "customField": 42}
        obj = Object.deserialize(raw, {}, registry)

        assert obj.unknown_properties == {"customField": 42}
        assert obj.serialize() == raw

    def test_unknown_keys_are_model_extras(self, registry: TypeRegistry):
        obj = Object.deserialize(
            {"type": "Object", "name": "A note", "customField": 42}, {}, registry
        )

        assert isinstance(obj, BaseModel)
        assert obj.model_extra == {"customField": 42}
        assert obj.customField == 42  # type: ignore[attr-defined]

    def test_keywords_become_unknown_properties(self):
        link = Link(customField="x")
        assert link.unknown_properties == {"customField": "x"}
        assert link.serialize() == {"type": "Link", "customField": "x"}

    def test_unmatched_value_stays_on_its_property(self, registry: TypeRegistry):
        obj = Object.deserialize({"type": "Object", "name": 5}, {}, registry)

        name = obj.get_property("name")
        assert name is not None and name.has_unknown()
        assert obj.unknown_properties == {}
        assert obj.serialize() == {"type": "Object", "name": 5}

    def test_aliased_keys(self, registry: TypeRegistry, as_alias_map: AliasMap):
        raw = {"type": "as:Object", "as:name": "Prefixed", "name": "bare"}
        obj = Object.deserialize(raw, as_alias_map, registry)

        name = obj.get_property("name")
        assert name is not None and name.value == "Prefixed"
        assert obj.unknown_properties == {"name": "bare"}
        assert obj.serialize() == raw

    def test_declared_property_wins_over_unknown_key(self, registry: TypeRegistry):
        obj = Object.deserialize({"type": "Object", "as:name": "old"}, {}, registry)
        assert obj.unknown_properties == {"as:name": "old"}

        obj.alias = "as"
        obj.setdefault_property("name").set("new")

        assert obj.serialize()["as:name"] == "new"

    def test_set_and_get_property(self):
        link = Link()
        href = HrefProperty()
        href.set("https://example.com/")
        link.set_property(href)

        assert link.get_property("href") is href
        assert link.serialize() == {"type": "Link", "href": "https://example.com/"}

        link.remove_property("href")
        assert link.get_property("href") is None

    def test_set_undeclared_property_raises(self):
        with pytest.raises(TypeError, match="no property 'latitude'"):
            Link().set_property(LatitudeProperty())
        with pytest.raises(TypeError):
            Link().setdefault_property("latitude")

    def test_present_properties_follow_declaration_order(
        self, registry: TypeRegistry
    ):
        place = Place.deserialize(
            {"type": "Place", "name": "Home", "latitude": 51.5, "longitude": -0.1},
            {},
            registry,
        )
        assert [prop.name for prop in place.present_properties()] == [
            "latitude",
            "longitude",
            "name",
            "type",
        ]

    def test_empty_type_property_is_skipped(self):
        obj = Object()
        obj.get_property("type").clear()  # type: ignore[union-attr]
        assert obj.serialize() == {"type": "Object"}

    def test_empty_multi_valued_property_serializes_as_list(self):
        obj = Collection()
        obj.setdefault_property("items")
        assert obj.serialize() == {"type": "Collection", "items": []}

    def test_functional_literals(self, registry: TypeRegistry):
        raw = {
            "type": "Object",
            "name": "Title",
            "nameMap": {"en": "Title", "es": "Titulo"},
            "published": "2024-05-01T12:00:00Z",
            "duration": "PT5M",
        }
        obj = Object.deserialize(raw, {}, registry)
        assert obj.get_property("nameMap").type_name == "rdf:langString"  # type: ignore[union-attr]
        assert obj.get_property("published").type_name == "xsd:dateTime"  # type: ignore[union-attr]
        assert obj.get_property("duration").type_name == "xsd:duration"  # type: ignore[union-attr]

    @pytest.mark.parametrize(
        ("key", "raw"),
        [
            ("published", "1700000000"),
            ("published", "2024-05-01"),
            ("duration", "300"),
        ],
    )
    def test_malformed_dates_stay_unknown(
        self, registry: TypeRegistry, key: str, raw: str
    ):
        document = {"type": "Object", key: raw}
        obj = Object.deserialize(document, {}, registry)

        prop = obj.get_property(key)
        assert prop is not None and prop.has_unknown()  # type: ignore[attr-defined]
        assert obj.serialize() == document

    def test_integral_coordinates_round_trip_as_ints(self, registry: TypeRegistry):
        document = {"type": "Place", "radius": 15, "latitude": 51.5}
        out = Place.deserialize(document, {}, registry).serialize()

        assert out == document
        assert type(out["radius"]) is int

    def test_icon_and_image(self, registry: TypeRegistry):
        document = {
            "type": "Person",
            "icon": {"type": "Link", "href": "https://example.com/a.png"},
            "image": "https://example.com/banner.png",
        }
        person = Person.deserialize(document, {}, registry)

        assert person.get_property("icon")[0].type_name == "Link"  # type: ignore[index]
        assert person.get_property("image")[0].is_iri()  # type: ignore[index]
        assert person.unknown_properties == {}
        assert person.serialize() == document


# ── Nested values ────────────────────────────────────────────────────


class TestNested:
    def test_round_trip(self, registry: TypeRegistry, outbox_page):
        body = {k: v for k, v in outbox_page.items() if k != "@context"}
        page = OrderedCollectionPage.deserialize(body, {}, registry)

        assert page.serialize() == body
        again = OrderedCollectionPage.deserialize(page.serialize(), {}, registry)
        assert not page.less_than(again) and not again.less_than(page)

    def test_relationship_iri(self, registry: TypeRegistry):
        rel = Relationship.deserialize(
            {
                "type": "Relationship",
                "subject": {"type": "Person", "name": "Sally"},
                "relationship": "http://purl.org/vocab/relationship/acquaintanceOf",
                "object": {"type": "Person", "name": "John"},
            },
            {},
            registry,
        )
        assert rel.get_property("subject").type_name == "Person"  # type: ignore[union-attr]
        assert rel.get_property("relationship")[0].is_iri()  # type: ignore[index]

    def test_person_collections(self, registry: TypeRegistry):
        person = Person.deserialize(
            {
                "type": "Person",
                "followers": {"type": "OrderedCollection", "totalItems": 3},
                "following": "https://example.com/alice/following",
            },
            {},
            registry,
        )
        assert person.get_property("followers").type_name == "OrderedCollection"  # type: ignore[union-attr]
        assert person.get_property("following").is_iri()  # type: ignore[union-attr]

    def test_mention_shares_link_properties(self, registry: TypeRegistry):
        mention = Mention.deserialize(
            {"type": "Mention", "href": "https://example.com/@bob", "name": "@bob"},
            {},
            registry,
        )
        assert mention.get_property("href").value == "https://example.com/@bob"  # type: ignore[union-attr]
        assert mention.unknown_properties == {}


# ── Context and ordering ─────────────────────────────────────────────


def test_merge_context_first_writer_wins():
    context = {AS_VOCABULARY_URI: "as"}
    merge_context(context, {AS_VOCABULARY_URI: "", "https://w3id.org/security": "sec"})
    assert context == {AS_VOCABULARY_URI: "as", "https://w3id.org/security": "sec"}


def test_jsonld_context_uses_object_alias(
    registry: TypeRegistry, as_alias_map: AliasMap
):
    obj = Object.deserialize(
        {"type": "as:Object", "as:tag": {"type": "as:Mention"}},
        as_alias_map,
        registry,
    )
    assert obj.jsonld_context() == {AS_VOCABULARY_URI: "as"}


def test_absent_property_orders_first():
    bare = Link()
    with_name = Link()
    name = NameProperty()
    name.set("x")
    with_name.set_property(name)

    assert bare.less_than(with_name)
    assert not with_name.less_than(bare)


def test_unknown_properties_count_last(registry: TypeRegistry):
    a = Object.deserialize({"type": "Object"}, {}, registry)
    b = Object.deserialize({"type": "Object", "extra": 1}, {}, registry)
    assert a.less_than(b)
    assert not b.less_than(a)
