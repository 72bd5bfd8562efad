"""
Polymorphic property holders.

A property value is exactly one of:

- ``Absent``: nothing set
- ``TypedMember``: one of the property's declared alternatives
- ``IRIMember``: a bare IRI reference
- ``UnknownMember``: any raw value that matched nothing, kept for round-trips

Resolution order when decoding:

    IRI (string with a scheme) -> alternatives in declared order -> unknown

The first alternative that decodes wins. Alternatives the registry has no
deserializer for are skipped, so a restricted registry only narrows what a
value can resolve to. Resolution never fails on a value shape; the one
structural failure is a registered class decoding to something its
alternative would not accept, which raises :class:`PropertyDecodeError`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING, Annotated, Any, ClassVar, Literal, Protocol, Self

from pydantic import BaseModel, ConfigDict, Field

from asvocab.core.exceptions import (
    AlternativeMismatch,
    PropertyDecodeError,
    TypeMismatchError,
    UnregisteredTypeError,
)
from asvocab.core.iri import parse_iri
from asvocab.core.types import (
    AS_VOCABULARY_URI,
    AliasMap,
    JSONMap,
    merge_context,
    prefixed_key,
    vocabulary_alias,
)

if TYPE_CHECKING:
    from asvocab.registry import TypeRegistry

logger = logging.getLogger(__name__)

IRI_KIND_INDEX = -2
UNKNOWN_KIND_INDEX = -1


# ---------------------------------------------------------------------------
# Member union
# ---------------------------------------------------------------------------


class _Member(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


class Absent(_Member):
    kind: Literal["absent"] = "absent"


class TypedMember(_Member):
    kind: Literal["typed"] = "typed"
    index: int
    type_name: str
    value: Any


class IRIMember(_Member):
    kind: Literal["iri"] = "iri"
    iri: str


class UnknownMember(_Member):
    kind: Literal["unknown"] = "unknown"
    value: Any


PropertyValue = Annotated[
    Absent | TypedMember | IRIMember | UnknownMember,
    Field(discriminator="kind"),
]

ABSENT = Absent()


# ---------------------------------------------------------------------------
# Alternatives
# ---------------------------------------------------------------------------


class Alternative(Protocol):
    """One candidate representation a property value may take."""

    name: str

    def decode(
        self, raw: Any, alias_map: AliasMap, registry: TypeRegistry
    ) -> Any: ...

    def accepts(self, value: Any) -> bool: ...

    def coerce(self, value: Any) -> Any: ...

    def encode(self, value: Any) -> Any: ...

    def less(self, lhs: Any, rhs: Any) -> bool: ...

    def context(self, value: Any) -> dict[str, str]: ...


class TypeAlternative:
    """A vocabulary type alternative, resolved through the injected registry."""

    def __init__(self, type_name: str) -> None:
        self.name = type_name

    def __repr__(self) -> str:
        return f"TypeAlternative({self.name!r})"

    def decode(self, raw: Any, alias_map: AliasMap, registry: TypeRegistry) -> Any:
        if not isinstance(raw, dict):
            raise AlternativeMismatch(f"{self.name}: not a mapping")
        deserialize = registry.deserializer(self.name)
        try:
            return deserialize(raw, alias_map)
        except TypeMismatchError as exc:
            raise AlternativeMismatch(exc.message) from exc

    def accepts(self, value: Any) -> bool:
        return (
            getattr(type(value), "type_name", None) == self.name
            and callable(getattr(value, "serialize", None))
        )

    def coerce(self, value: Any) -> Any:
        if not self.accepts(value):
            raise AlternativeMismatch(f"{self.name}: got {type(value).__name__}")
        return value

    def encode(self, value: Any) -> Any:
        return value.serialize()

    def less(self, lhs: Any, rhs: Any) -> bool:
        return lhs.less_than(rhs)

    def context(self, value: Any) -> dict[str, str]:
        return value.jsonld_context()


def type_alternatives(*type_names: str) -> tuple[TypeAlternative, ...]:
    return tuple(TypeAlternative(name) for name in type_names)


# ---------------------------------------------------------------------------
# Holders
# ---------------------------------------------------------------------------


class Property:
    """Shared declaration and key handling for every property holder."""

    name: ClassVar[str]
    alternatives: ClassVar[tuple[Alternative, ...]] = ()
    admits_iri: ClassVar[bool] = True
    prefixed: ClassVar[bool] = True
    functional: ClassVar[bool] = True
    vocabulary_uri: ClassVar[str] = AS_VOCABULARY_URI

    def __init__(self, alias: str = "") -> None:
        self.alias = alias

    @classmethod
    def lookup_key(cls, alias: str) -> str:
        if not cls.prefixed:
            return cls.name
        return prefixed_key(cls.name, alias)

    @property
    def key(self) -> str:
        """The key this property is read from and written to."""
        return self.lookup_key(self.alias)

    @classmethod
    def deserialize(
        cls, m: JSONMap, alias_map: AliasMap, registry: TypeRegistry
    ) -> Self | None:
        """Resolve this property from *m*; ``None`` when its key is absent."""
        alias = vocabulary_alias(alias_map, cls.vocabulary_uri)
        key = cls.lookup_key(alias)
        if key not in m:
            return None
        return cls.from_raw(m[key], alias, alias_map, registry)

    @classmethod
    def from_raw(
        cls, raw: Any, alias: str, alias_map: AliasMap, registry: TypeRegistry
    ) -> Self:
        raise NotImplementedError

    def serialize(self) -> Any:
        raise NotImplementedError

    def jsonld_context(self) -> dict[str, str]:
        raise NotImplementedError

    def has_any(self) -> bool:
        raise NotImplementedError

    def less_than(self, other: Self) -> bool:
        raise NotImplementedError

    def __lt__(self, other: Self) -> bool:
        return self.less_than(other)


class FunctionalProperty(Property):
    """A property holding at most one value."""

    functional: ClassVar[bool] = True

    def __init__(self, alias: str = "") -> None:
        super().__init__(alias)
        self._member: PropertyValue = ABSENT

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._member!r})"

    @classmethod
    def classify(
        cls, raw: Any, alias_map: AliasMap, registry: TypeRegistry
    ) -> PropertyValue:
        """Decide which member a raw value denotes. Never fails on shape."""
        if cls.admits_iri and isinstance(raw, str):
            iri = parse_iri(raw)
            if iri is not None:
                return IRIMember(iri=iri)
        for index, alternative in enumerate(cls.alternatives):
            try:
                value = alternative.decode(raw, alias_map, registry)
            except AlternativeMismatch:
                continue
            except UnregisteredTypeError as exc:
                logger.debug("Property %r: %s, skipping alternative", cls.name, exc)
                continue
            if not alternative.accepts(value):
                raise PropertyDecodeError(
                    cls.name,
                    f"{alternative.name} decoded to an unexpected "
                    f"{type(value).__name__}",
                )
            return TypedMember(index=index, type_name=alternative.name, value=value)
        logger.debug(
            "Property %r: %s value matched no alternative, keeping as unknown",
            cls.name,
            type(raw).__name__,
        )
        return UnknownMember(value=raw)

    @classmethod
    def from_raw(
        cls, raw: Any, alias: str, alias_map: AliasMap, registry: TypeRegistry
    ) -> Self:
        prop = cls(alias)
        prop._member = cls.classify(raw, alias_map, registry)
        return prop

    # ── State ────────────────────────────────────────────────────────

    @property
    def member(self) -> PropertyValue:
        return self._member

    def clear(self) -> None:
        """Unset every member; ``has_any`` and all ``is_*`` checks return False."""
        self._member = ABSENT

    def has_any(self) -> bool:
        return isinstance(self._member, TypedMember | IRIMember)

    def is_type(self, type_name: str) -> bool:
        return (
            isinstance(self._member, TypedMember)
            and self._member.type_name == type_name
        )

    def get(self, type_name: str) -> Any:
        """Return the value if *type_name* is the active alternative, else ``None``."""
        if self.is_type(type_name):
            return self._member.value  # type: ignore[union-attr]
        return None

    @property
    def type_name(self) -> str | None:
        if isinstance(self._member, TypedMember):
            return self._member.type_name
        return None

    @property
    def value(self) -> Any:
        if isinstance(self._member, TypedMember):
            return self._member.value
        return None

    def set(self, value: Any) -> None:
        """Set a typed value. The first alternative accepting it is used."""
        for index, alternative in enumerate(self.alternatives):
            if alternative.accepts(value):
                self._member = TypedMember(
                    index=index,
                    type_name=alternative.name,
                    value=alternative.coerce(value),
                )
                return
        raise TypeError(
            f"{type(value).__name__} is not a permitted value "
            f"for property {self.name!r}"
        )

    def is_iri(self) -> bool:
        return isinstance(self._member, IRIMember)

    def get_iri(self) -> str | None:
        if isinstance(self._member, IRIMember):
            return self._member.iri
        return None

    def set_iri(self, iri: str) -> None:
        if parse_iri(iri) is None:
            raise ValueError(f"Not an absolute IRI: {iri!r}")
        self._member = IRIMember(iri=iri)

    def has_unknown(self) -> bool:
        return isinstance(self._member, UnknownMember)

    def get_unknown(self) -> Any:
        if isinstance(self._member, UnknownMember):
            return self._member.value
        return None

    def set_unknown(self, raw: Any) -> None:
        self._member = UnknownMember(value=raw)

    # ── Encoding ─────────────────────────────────────────────────────

    def serialize(self) -> Any:
        match self._member:
            case TypedMember(index=index, value=value):
                return self.alternatives[index].encode(value)
            case IRIMember(iri=iri):
                return iri
            case UnknownMember(value=value):
                return value
        return None

    def jsonld_context(self) -> dict[str, str]:
        context = {self.vocabulary_uri: self.alias}
        match self._member:
            case TypedMember(index=index, value=value):
                merge_context(context, self.alternatives[index].context(value))
        return context

    # ── Ordering ─────────────────────────────────────────────────────

    def kind_index(self) -> int:
        """Rank of the active member: alternatives 0..N-1, IRI -2, else -1."""
        match self._member:
            case TypedMember(index=index):
                return index
            case IRIMember():
                return IRI_KIND_INDEX
        return UNKNOWN_KIND_INDEX

    def less_than(self, other: FunctionalProperty) -> bool:
        lhs, rhs = self.kind_index(), other.kind_index()
        if lhs != rhs:
            return lhs < rhs
        match self._member, other.member:
            case TypedMember(index=index, value=a), TypedMember(value=b):
                return self.alternatives[index].less(a, b)
            case IRIMember(iri=a), IRIMember(iri=b):
                return a < b
        return False


class NonFunctionalProperty(Property):
    """A property holding an ordered list of entries.

    Each entry is a :class:`FunctionalProperty` with the same name and
    alternatives; the entry class is derived automatically for every
    concrete subclass.
    """

    functional: ClassVar[bool] = False
    entry_class: ClassVar[type[FunctionalProperty]]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "name" in cls.__dict__:
            cls.entry_class = type(
                f"{cls.__name__}Entry",
                (FunctionalProperty,),
                {
                    "__module__": cls.__module__,
                    "name": cls.name,
                    "alternatives": cls.alternatives,
                    "admits_iri": cls.admits_iri,
                    "prefixed": cls.prefixed,
                    "vocabulary_uri": cls.vocabulary_uri,
                },
            )

    def __init__(self, alias: str = "") -> None:
        super().__init__(alias)
        self._entries: list[FunctionalProperty] = []

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._entries!r})"

    @classmethod
    def from_raw(
        cls, raw: Any, alias: str, alias_map: AliasMap, registry: TypeRegistry
    ) -> Self:
        prop = cls(alias)
        values = raw if isinstance(raw, list) else [raw]
        for value in values:
            prop._entries.append(
                cls.entry_class.from_raw(value, alias, alias_map, registry)
            )
        return prop

    # ── Sequence access ──────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[FunctionalProperty]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> FunctionalProperty:
        return self._entries[index]

    def has_any(self) -> bool:
        return bool(self._entries)

    def _entry(self) -> FunctionalProperty:
        return self.entry_class(self.alias)

    def append(self, value: Any) -> None:
        entry = self._entry()
        entry.set(value)
        self._entries.append(entry)

    def append_iri(self, iri: str) -> None:
        entry = self._entry()
        entry.set_iri(iri)
        self._entries.append(entry)

    def prepend(self, value: Any) -> None:
        self.insert(0, value)

    def prepend_iri(self, iri: str) -> None:
        entry = self._entry()
        entry.set_iri(iri)
        self._entries.insert(0, entry)

    def insert(self, index: int, value: Any) -> None:
        entry = self._entry()
        entry.set(value)
        self._entries.insert(index, entry)

    def remove(self, index: int) -> None:
        del self._entries[index]

    def clear(self) -> None:
        self._entries.clear()

    def sort(self) -> None:
        """Put entries in canonical order (see :meth:`FunctionalProperty.less_than`)."""
        self._entries.sort()

    # ── Encoding ─────────────────────────────────────────────────────

    def serialize(self) -> Any:
        values = [entry.serialize() for entry in self._entries]
        if len(values) == 1:
            return values[0]
        return values

    def jsonld_context(self) -> dict[str, str]:
        context = {self.vocabulary_uri: self.alias}
        for entry in self._entries:
            merge_context(context, entry.jsonld_context())
        return context

    def less_than(self, other: NonFunctionalProperty) -> bool:
        for lhs, rhs in zip(self._entries, other._entries):
            if lhs.less_than(rhs):
                return True
            if rhs.less_than(lhs):
                return False
        return len(self) < len(other)
