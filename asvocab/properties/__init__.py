from asvocab.properties.base import (
    ABSENT,
    IRI_KIND_INDEX,
    UNKNOWN_KIND_INDEX,
    Absent,
    Alternative,
    FunctionalProperty,
    IRIMember,
    NonFunctionalProperty,
    Property,
    PropertyValue,
    TypeAlternative,
    TypedMember,
    UnknownMember,
    type_alternatives,
)

__all__ = [
    "ABSENT",
    "IRI_KIND_INDEX",
    "UNKNOWN_KIND_INDEX",
    "Absent",
    "Alternative",
    "FunctionalProperty",
    "IRIMember",
    "NonFunctionalProperty",
    "Property",
    "PropertyValue",
    "TypeAlternative",
    "TypedMember",
    "UnknownMember",
    "type_alternatives",
]
