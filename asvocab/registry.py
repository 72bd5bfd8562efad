"""Type registry -- maps vocabulary type names to their classes.

A registry is passed explicitly into every ``deserialize`` call so that
properties can resolve nested vocabulary objects without a process-wide
lookup table.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING

from asvocab.core.exceptions import UnregisteredTypeError
from asvocab.core.types import AliasMap, JSONMap

if TYPE_CHECKING:
    from asvocab.activitystreams.core import ASType

Deserializer = Callable[[JSONMap, AliasMap], "ASType"]


class TypeRegistry:
    """Lazily-populated registry of vocabulary types.

    ``TypeRegistry()`` registers the built-in ActivityStreams types on first
    use; ``TypeRegistry(load_defaults=False)`` starts empty.
    """

    def __init__(self, *, load_defaults: bool = True) -> None:
        self._types: dict[str, type[ASType]] = {}
        self._defaults_loaded = not load_defaults

    def _ensure_defaults(self) -> None:
        if not self._defaults_loaded:
            self._defaults_loaded = True
            self._load_defaults()

    def _load_defaults(self) -> None:
        from asvocab.activitystreams import DEFAULT_TYPES

        for cls in DEFAULT_TYPES:
            self._types.setdefault(cls.type_name, cls)

    def register(self, cls: type[ASType], name: str | None = None) -> None:
        self._types[name or cls.type_name] = cls

    def unregister(self, name: str) -> None:
        self._ensure_defaults()
        self._types.pop(name, None)

    def get(self, name: str) -> type[ASType] | None:
        self._ensure_defaults()
        return self._types.get(name)

    def __contains__(self, name: object) -> bool:
        self._ensure_defaults()
        return name in self._types

    def __iter__(self) -> Iterator[str]:
        self._ensure_defaults()
        return iter(sorted(self._types))

    def __len__(self) -> int:
        self._ensure_defaults()
        return len(self._types)

    def names(self) -> list[str]:
        return list(self)

    def deserializer(self, name: str) -> Deserializer:
        """Return a deserializer for *name* bound to this registry."""
        cls = self.get(name)
        if cls is None:
            raise UnregisteredTypeError(name)

        def deserialize(m: JSONMap, alias_map: AliasMap) -> ASType:
            return cls.deserialize(m, alias_map, self)

        return deserialize

    def restricted(
        self,
        include: Iterable[str] | None = None,
        exclude: Iterable[str] | None = None,
    ) -> TypeRegistry:
        """Return a new registry holding a subset of this one's types."""
        self._ensure_defaults()
        keep = set(self._types) if include is None else set(include)
        keep -= set(exclude or ())
        subset = TypeRegistry(load_defaults=False)
        for name in sorted(keep):
            subset.register(self._types[name], name)
        return subset
