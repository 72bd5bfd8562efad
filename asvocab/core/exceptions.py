"""Custom exceptions for vocabulary (de)serialization."""

from __future__ import annotations

from collections.abc import Iterable


class VocabularyError(Exception):
    """Base class for every error raised while decoding or encoding."""


class TypeMismatchError(VocabularyError):
    """Raised when an object's ``type`` discriminator does not name the expected type."""

    def __init__(self, type_name: str, message: str | None = None):
        self.type_name = type_name
        self.message = message or f'"type" property is not of "{type_name}" type'
        super().__init__(self.message)


class PropertyDecodeError(VocabularyError):
    """Raised when a declared property fails structurally (not a value mismatch)."""

    def __init__(self, property_name: str, message: str | None = None):
        self.property_name = property_name
        self.message = (
            f'Cannot decode property "{property_name}": {message}'
            if message
            else f'Cannot decode property "{property_name}"'
        )
        super().__init__(self.message)


class UnregisteredTypeError(VocabularyError):
    """Raised when a registry has no deserializer for a type name."""

    def __init__(self, type_name: str):
        self.type_name = type_name
        self.message = f'No deserializer registered for type "{type_name}"'
        super().__init__(self.message)


class UnhandledTypeError(VocabularyError):
    """Raised when a document's ``type`` names no registered vocabulary type."""

    def __init__(self, type_names: Iterable[str]):
        self.type_names = list(type_names)
        self.message = (
            f"No registered vocabulary type among {self.type_names}"
            if self.type_names
            else 'Document has no usable "type" property'
        )
        super().__init__(self.message)


class AlternativeMismatch(VocabularyError):
    """A single alternative rejected a raw value; the resolver moves on."""

    pass
