from __future__ import annotations

from typing import Any

from asvocab.registry import TypeRegistry


def parse_config(config: dict[str, Any]) -> TypeRegistry:
    """Parse a user config dict and return the :class:`TypeRegistry` it describes.

    Expected shape::

        {
            "types": {"include": ["Link", "Mention"], "exclude": []},
        }

    Without a ``types`` section every built-in type is registered. Unknown
    type names raise ``ValueError``.
    """
    types_cfg = config.get("types") or {}
    include = types_cfg.get("include")
    exclude = types_cfg.get("exclude") or []

    registry = TypeRegistry()
    available = set(registry.names())
    requested = set(include or []) | set(exclude)
    unknown = requested - available
    if unknown:
        raise ValueError(
            f"Unknown vocabulary type(s) {sorted(unknown)}. "
            f"Available: {sorted(available)}"
        )

    if include is None and not exclude:
        return registry
    return registry.restricted(include=include, exclude=exclude)
