from asvocab.core.exceptions import (
    AlternativeMismatch,
    PropertyDecodeError,
    TypeMismatchError,
    UnhandledTypeError,
    UnregisteredTypeError,
    VocabularyError,
)
from asvocab.core.types import (
    AS_CONTEXT_URI,
    AS_VOCABULARY_URI,
    AliasMap,
    JSONMap,
)

__all__ = [
    "AS_CONTEXT_URI",
    "AS_VOCABULARY_URI",
    "AliasMap",
    "AlternativeMismatch",
    "JSONMap",
    "PropertyDecodeError",
    "TypeMismatchError",
    "UnhandledTypeError",
    "UnregisteredTypeError",
    "VocabularyError",
]
