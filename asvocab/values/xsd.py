"""
Literal value alternatives.

Each alternative wraps a pydantic ``TypeAdapter`` that validates a raw JSON
value and dumps it back in JSON mode. ``raw_types`` restricts which decoded
JSON shapes are even attempted, so lax pydantic coercions (``"1"`` -> ``1``,
``0`` -> ``False``, epoch ints -> datetimes) never misclassify a value.
Date and duration strings are additionally held to their lexical forms
before pydantic parses them: pydantic also reads bare dates, unix
timestamps and numeric strings, none of which are valid ``xsd:dateTime``
or ``xsd:duration`` text.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Annotated, Any

from pydantic import (
    AfterValidator,
    BeforeValidator,
    Field,
    Strict,
    StringConstraints,
    TypeAdapter,
    ValidationError,
)

from asvocab.core.exceptions import AlternativeMismatch
from asvocab.core.iri import parse_iri

RFC3339_PATTERN = re.compile(
    r"^\d{4}-\d{2}-\d{2}[Tt]\d{2}:\d{2}:\d{2}(\.\d+)?([Zz]|[+-]\d{2}:\d{2})$"
)

ISO8601_DURATION_PATTERN = re.compile(
    r"^-?P(?!$)(\d+Y)?(\d+M)?(\d+W)?(\d+D)?(T(?=\d)(\d+H)?(\d+M)?(\d+(\.\d+)?S)?)?$"
)

_TIMEDELTA: TypeAdapter[timedelta] = TypeAdapter(timedelta)


def _require_scheme(value: str) -> str:
    if parse_iri(value) is None:
        raise ValueError("IRI has no scheme")
    return value


def _require_rfc3339(value: Any) -> Any:
    if isinstance(value, str) and RFC3339_PATTERN.fullmatch(value) is None:
        raise ValueError("not an RFC 3339 timestamp")
    return value


def _datetime_key(value: datetime) -> datetime:
    # Naive values compare as UTC so mixed inputs stay totally ordered
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def _duration_text(value: Any) -> Any:
    if isinstance(value, timedelta):
        return _TIMEDELTA.dump_python(value, mode="json")
    return value


def _parse_duration(value: str) -> timedelta:
    try:
        return _TIMEDELTA.validate_python(value)
    except ValidationError as exc:
        raise ValueError(f"unreadable duration {value!r}") from exc


def _require_duration(value: str) -> str:
    if ISO8601_DURATION_PATTERN.fullmatch(value) is None:
        raise ValueError("not an ISO 8601 duration")
    _parse_duration(value)
    return value


def _lang_string_key(value: dict[str, str]) -> list[tuple[str, str]]:
    return sorted(value.items())


class ValueAlternative:
    """One literal datatype a property value may take."""

    def __init__(
        self,
        name: str,
        annotation: Any,
        raw_types: tuple[type, ...],
        value_types: tuple[type, ...] | None = None,
        sort_key: Callable[[Any], Any] | None = None,
    ) -> None:
        self.name = name
        self.raw_types = raw_types
        self.value_types = value_types or raw_types
        self._adapter: TypeAdapter[Any] = TypeAdapter(annotation)
        self._sort_key = sort_key or (lambda v: v)

    def __repr__(self) -> str:
        return f"ValueAlternative({self.name!r})"

    @staticmethod
    def _shape_matches(value: Any, types: tuple[type, ...]) -> bool:
        if isinstance(value, bool) and bool not in types:
            return False
        return isinstance(value, types)

    def _validate(self, value: Any) -> Any:
        try:
            return self._adapter.validate_python(value)
        except ValidationError as exc:
            raise AlternativeMismatch(
                f"{self.name}: {exc.error_count()} validation error(s)"
            ) from exc

    def decode(self, raw: Any, alias_map: Any = None, registry: Any = None) -> Any:
        """Validate a raw JSON value. Raises :class:`AlternativeMismatch`."""
        if not self._shape_matches(raw, self.raw_types):
            raise AlternativeMismatch(f"{self.name}: unexpected {type(raw).__name__}")
        return self._validate(raw)

    def accepts(self, value: Any) -> bool:
        if not self._shape_matches(value, self.value_types):
            return False
        try:
            self._validate(value)
        except AlternativeMismatch:
            return False
        return True

    def coerce(self, value: Any) -> Any:
        """Validate a native Python value passed to a setter."""
        if not self._shape_matches(value, self.value_types):
            raise AlternativeMismatch(f"{self.name}: unexpected {type(value).__name__}")
        return self._validate(value)

    def encode(self, value: Any) -> Any:
        return self._adapter.dump_python(value, mode="json")

    def less(self, lhs: Any, rhs: Any) -> bool:
        return self._sort_key(lhs) < self._sort_key(rhs)

    def context(self, value: Any) -> dict[str, str]:
        return {}


XSD_STRING = ValueAlternative("xsd:string", Annotated[str, Strict()], (str,))

XSD_ANY_URI = ValueAlternative(
    "xsd:anyURI",
    Annotated[str, Strict(), AfterValidator(_require_scheme)],
    (str,),
)

XSD_BOOLEAN = ValueAlternative("xsd:boolean", Annotated[bool, Strict()], (bool,))

# int | float keeps integral JSON numbers as ints, so 15 re-encodes as 15
XSD_FLOAT = ValueAlternative("xsd:float", int | float, (int, float))

XSD_NON_NEGATIVE_INTEGER = ValueAlternative(
    "xsd:nonNegativeInteger",
    Annotated[int, Strict(), Field(ge=0)],
    (int,),
)

XSD_DATETIME = ValueAlternative(
    "xsd:dateTime",
    Annotated[datetime, BeforeValidator(_require_rfc3339)],
    (str,),
    value_types=(str, datetime),
    sort_key=_datetime_key,
)

# Held as the lexical form so re-encoding never rewrites it
XSD_DURATION = ValueAlternative(
    "xsd:duration",
    Annotated[
        str,
        BeforeValidator(_duration_text),
        Strict(),
        AfterValidator(_require_duration),
    ],
    (str,),
    value_types=(str, timedelta),
    sort_key=_parse_duration,
)

RDF_LANG_STRING = ValueAlternative(
    "rdf:langString",
    Annotated[dict[str, Annotated[str, Strict()]], Strict()],
    (dict,),
    sort_key=_lang_string_key,
)

BCP47 = ValueAlternative(
    "bcp47",
    Annotated[
        str,
        Strict(),
        StringConstraints(pattern=r"^[A-Za-z]{1,8}(-[A-Za-z0-9]{1,8})*$"),
    ],
    (str,),
)

VALUE_ALTERNATIVES: dict[str, ValueAlternative] = {
    alt.name: alt
    for alt in (
        XSD_STRING,
        XSD_ANY_URI,
        XSD_BOOLEAN,
        XSD_FLOAT,
        XSD_NON_NEGATIVE_INTEGER,
        XSD_DATETIME,
        XSD_DURATION,
        RDF_LANG_STRING,
        BCP47,
    )
}
