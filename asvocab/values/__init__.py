from asvocab.values.xsd import (
    BCP47,
    RDF_LANG_STRING,
    VALUE_ALTERNATIVES,
    XSD_ANY_URI,
    XSD_BOOLEAN,
    XSD_DATETIME,
    XSD_DURATION,
    XSD_FLOAT,
    XSD_NON_NEGATIVE_INTEGER,
    XSD_STRING,
    ValueAlternative,
)

__all__ = [
    "BCP47",
    "RDF_LANG_STRING",
    "VALUE_ALTERNATIVES",
    "XSD_ANY_URI",
    "XSD_BOOLEAN",
    "XSD_DATETIME",
    "XSD_DURATION",
    "XSD_FLOAT",
    "XSD_NON_NEGATIVE_INTEGER",
    "XSD_STRING",
    "ValueAlternative",
]
