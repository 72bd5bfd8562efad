"""
ActivityStreams 2.0 Core Types

This module contains the vocabulary object base class and the core types
defined in the ActivityStreams 2.0 specification:
- Object: Base type for all objects
- Link: Indirect reference to resources
- Collection: Sets of objects/links
- OrderedCollection: Ordered sets
- CollectionPage: Paginated subsets
- OrderedCollectionPage: Ordered paginated subsets
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, ClassVar, Self

from pydantic import (
    BaseModel,
    ConfigDict,
    ModelWrapValidatorHandler,
    PrivateAttr,
    ValidationInfo,
    model_validator,
)

from asvocab.activitystreams import lattice
from asvocab.activitystreams.properties import (
    LINK_PROPERTIES,
    OBJECT_PROPERTIES,
    CurrentProperty,
    FirstProperty,
    ItemsProperty,
    LastProperty,
    NextProperty,
    OrderedItemsProperty,
    PartOfProperty,
    PrevProperty,
    StartIndexProperty,
    TotalItemsProperty,
    TypeProperty,
)
from asvocab.core.exceptions import TypeMismatchError
from asvocab.core.types import (
    AS_VOCABULARY_URI,
    AliasMap,
    JSONMap,
    merge_context,
    prefixed_key,
    strip_alias,
    vocabulary_alias,
)
from asvocab.properties.base import Property

if TYPE_CHECKING:
    from asvocab.registry import TypeRegistry


def property_set(*groups: Iterable[type[Property]]) -> tuple[type[Property], ...]:
    """Merge property groups into one tuple ordered by property name."""
    merged = {prop.name: prop for group in groups for prop in group}
    return tuple(merged[name] for name in sorted(merged))


def _type_name_of(other: str | ASType | type[ASType]) -> str:
    if isinstance(other, str):
        return other
    return other.type_name


class ASType(BaseModel):
    """Base class for all ActivityStreams objects and links.

    Every input key no declared property consumed is kept as a pydantic
    extra, so ``model_extra`` is the bag of unknown properties. Unknown
    properties are written back on :meth:`serialize` but never overwrite a
    key a declared property already wrote.
    """

    model_config = ConfigDict(extra="allow")

    type_name: ClassVar[str]
    properties: ClassVar[tuple[type[Property], ...]] = ()
    vocabulary_uri: ClassVar[str] = AS_VOCABULARY_URI
    _properties_by_name: ClassVar[dict[str, type[Property]]] = {}

    _alias: str = PrivateAttr(default="")
    _values: dict[str, Property] = PrivateAttr(default_factory=dict)

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        cls._properties_by_name = {prop.name: prop for prop in cls.properties}

    def __init__(self, alias: str = "", /, **unknown: Any) -> None:
        super().__init__(**unknown)
        self._alias = alias
        if TypeProperty.name in self._properties_by_name:
            type_prop = TypeProperty(alias)
            type_prop.append(prefixed_key(self.type_name, alias))
            self._values[TypeProperty.name] = type_prop

    def __repr__(self) -> str:
        present = ", ".join(self._values)
        return f"{type(self).__name__}({present})"

    @property
    def alias(self) -> str:
        """Prefix the object's own keys and ``type`` are written with."""
        return self._alias

    @alias.setter
    def alias(self, value: str) -> None:
        self._alias = value

    # ── Decoding ─────────────────────────────────────────────────────

    @classmethod
    def _check_type(cls, m: JSONMap, alias: str) -> None:
        if "type" not in m:
            raise TypeMismatchError(cls.type_name, 'no "type" property in map')
        value = m["type"]
        if isinstance(value, str):
            names = [value]
        elif isinstance(value, list):
            names = [name for name in value if isinstance(name, str)]
        else:
            raise TypeMismatchError(
                cls.type_name,
                f'"type" property is unrecognized type: {type(value).__name__}',
            )
        if cls.type_name not in {strip_alias(name, alias) for name in names}:
            raise TypeMismatchError(cls.type_name)

    @model_validator(mode="wrap")
    @classmethod
    def resolve_properties(
        cls, data: Any, handler: ModelWrapValidatorHandler[Self], info: ValidationInfo
    ) -> Self:
        """Split a decoded map into declared properties and pydantic extras.

        Only runs the resolver when validation carries a registry in its
        context (see :meth:`deserialize`); plain construction keeps every
        keyword as an unknown property.
        """
        context = info.context or {}
        registry = context.get("registry")
        if registry is None or not isinstance(data, dict):
            return handler(data)

        alias_map: AliasMap = context.get("alias_map") or {}
        alias = vocabulary_alias(alias_map, cls.vocabulary_uri)
        cls._check_type(data, alias)

        values: dict[str, Property] = {}
        consumed = {"type"}
        for prop_cls in cls.properties:
            consumed.add(prop_cls.lookup_key(alias))
            prop = prop_cls.deserialize(data, alias_map, registry)
            if prop is not None:
                values[prop_cls.name] = prop

        obj = handler({k: v for k, v in data.items() if k not in consumed})
        obj._alias = alias
        obj._values = values
        return obj

    @classmethod
    def deserialize(
        cls, m: JSONMap, alias_map: AliasMap, registry: TypeRegistry
    ) -> Self:
        """Build an instance from a decoded map.

        Raises :class:`TypeMismatchError` if ``type`` does not name this
        type. Property values that match no alternative are kept as unknown
        values on the property, never raised.
        """
        return cls.model_validate(
            m, context={"alias_map": alias_map, "registry": registry}
        )

    # ── Encoding ─────────────────────────────────────────────────────

    def serialize(self) -> JSONMap:
        m: JSONMap = {"type": prefixed_key(self.type_name, self.alias)}
        for prop in self.present_properties():
            if isinstance(prop, TypeProperty) and not prop.has_any():
                continue
            value = prop.serialize()
            if value is not None:
                m[prop.key] = value
        for key, value in self.unknown_properties.items():
            m.setdefault(key, value)
        return m

    def jsonld_context(self) -> dict[str, str]:
        """Vocabulary URI -> alias for this object and every present value."""
        context = {self.vocabulary_uri: self.alias}
        for prop in self.present_properties():
            merge_context(context, prop.jsonld_context())
        return context

    # ── Properties ───────────────────────────────────────────────────

    def get_property(self, name: str) -> Property | None:
        return self._values.get(name)

    def set_property(self, prop: Property) -> None:
        declared = self._properties_by_name.get(prop.name)
        if declared is None or not isinstance(prop, declared):
            raise TypeError(f"{self.type_name} has no property {prop.name!r}")
        self._values[prop.name] = prop

    def setdefault_property(self, name: str) -> Property:
        """Return the property *name*, attaching an empty one if absent."""
        prop = self._values.get(name)
        if prop is None:
            declared = self._properties_by_name.get(name)
            if declared is None:
                raise TypeError(f"{self.type_name} has no property {name!r}")
            prop = declared(self.alias)
            self._values[name] = prop
        return prop

    def remove_property(self, name: str) -> None:
        self._values.pop(name, None)

    def present_properties(self) -> list[Property]:
        """Present properties, in declaration order."""
        return [
            self._values[prop.name]
            for prop in self.properties
            if prop.name in self._values
        ]

    @property
    def unknown_properties(self) -> JSONMap:
        return dict(self.model_extra or {})

    # ── Type lattice ─────────────────────────────────────────────────

    @classmethod
    def extends(cls, other: str | ASType | type[ASType]) -> bool:
        return lattice.extends(cls.type_name, _type_name_of(other))

    @classmethod
    def is_extended_by(cls, other: str | ASType | type[ASType]) -> bool:
        return lattice.is_extended_by(cls.type_name, _type_name_of(other))

    @classmethod
    def is_disjoint_with(cls, other: str | ASType | type[ASType]) -> bool:
        return lattice.is_disjoint_with(cls.type_name, _type_name_of(other))

    def is_extending(self, other: str | ASType | type[ASType]) -> bool:
        return self.extends(other)

    # ── Ordering ─────────────────────────────────────────────────────

    def less_than(self, other: ASType) -> bool:
        """Arbitrary but stable order, used to normalize multi-valued properties."""
        for prop_cls in self.properties:
            lhs = self._values.get(prop_cls.name)
            rhs = other.get_property(prop_cls.name)
            if lhs is not None and rhs is not None:
                if lhs.less_than(rhs):
                    return True
                if rhs.less_than(lhs):
                    return False
            elif lhs is None and rhs is not None:
                return True
            elif lhs is not None and rhs is None:
                return False
        # Unknown properties only count by number
        return len(self.unknown_properties) < len(other.unknown_properties)


class Object(ASType):
    """
    Base Object type as defined in ActivityStreams 2.0.

    Describes an object of any kind. The Object type serves as the base type
    for most of the other kinds of objects defined in the Activity Vocabulary.
    """

    type_name = "Object"
    properties = property_set(OBJECT_PROPERTIES)


class Link(ASType):
    """
    A Link is an indirect, qualified reference to a resource identified by a URL.

    The fundamental model for links is established by RFC5988. Many of the
    properties defined by the Activity Vocabulary allow values that are either
    instances of Object or Link.
    """

    type_name = "Link"
    properties = property_set(LINK_PROPERTIES)


class Collection(ASType):
    """
    A Collection is a subtype of Object that represents ordered or unordered
    sets of Object or Link instances.
    """

    type_name = "Collection"
    properties = property_set(
        OBJECT_PROPERTIES,
        (CurrentProperty, FirstProperty, ItemsProperty, LastProperty),
        (TotalItemsProperty,),
    )


class OrderedCollection(ASType):
    """
    A subtype of Collection in which members of the logical collection are
    assumed to always be strictly ordered.
    """

    type_name = "OrderedCollection"
    properties = property_set(
        OBJECT_PROPERTIES,
        (CurrentProperty, FirstProperty, LastProperty, OrderedItemsProperty),
        (TotalItemsProperty,),
    )


class CollectionPage(ASType):
    """
    Used to represent distinct subsets of items from a Collection.
    """

    type_name = "CollectionPage"
    properties = property_set(
        Collection.properties,
        (NextProperty, PartOfProperty, PrevProperty),
    )


class OrderedCollectionPage(ASType):
    """
    Used to represent ordered subsets of items from an OrderedCollection.
    """

    type_name = "OrderedCollectionPage"
    properties = property_set(
        OrderedCollection.properties,
        (NextProperty, PartOfProperty, PrevProperty, StartIndexProperty),
    )
