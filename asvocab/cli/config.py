"""Configuration for the asvocab CLI.

Reads/writes a TOML config file and provides a typed Config dataclass.
Default location: ``~/.config/asvocab/config.toml``.
Override with the ``ASVOCAB_CONFIG`` environment variable.

Example::

    [output]
    indent = 2
    sort_keys = false

    [logging]
    level = "WARNING"

    [types]
    include = ["Link", "Mention"]
    exclude = []
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

_DEFAULT_CONFIG_DIR = Path("~/.config/asvocab").expanduser()


def _config_path() -> Path:
    env = os.environ.get("ASVOCAB_CONFIG")
    if env:
        return Path(env).expanduser()
    return _DEFAULT_CONFIG_DIR / "config.toml"


@dataclass
class Config:
    indent: int = 2
    sort_keys: bool = False

    # Empty means logging stays unconfigured unless --verbose is passed
    log_level: str = ""

    # None keeps every built-in type registered
    include_types: list[str] | None = None
    exclude_types: list[str] = field(default_factory=list)

    def registry_config(self) -> dict[str, Any]:
        """The library config dict understood by :func:`asvocab.parse_config`."""
        return {
            "types": {
                "include": self.include_types,
                "exclude": self.exclude_types,
            }
        }


def load_config() -> Config:
    """Load config from disk, falling back to defaults + env overrides."""
    path = _config_path()
    cfg = Config()

    if path.exists():
        with open(path, "rb") as f:
            data = tomllib.load(f)
        output_section = data.get("output", {})
        logging_section = data.get("logging", {})
        types_section = data.get("types", {})

        cfg.indent = int(output_section.get("indent", cfg.indent))
        cfg.sort_keys = bool(output_section.get("sort_keys", cfg.sort_keys))
        cfg.log_level = logging_section.get("level", cfg.log_level)
        cfg.include_types = types_section.get("include", cfg.include_types)
        cfg.exclude_types = list(types_section.get("exclude", cfg.exclude_types))

    # Environment variables always take precedence
    cfg.log_level = os.environ.get("ASVOCAB_LOG_LEVEL", cfg.log_level)

    return cfg


def config_exists() -> bool:
    return _config_path().exists()


def config_path_display() -> str:
    return str(_config_path())


def _toml_list(values: list[str]) -> str:
    return "[" + ", ".join(f'"{v}"' for v in values) + "]"


def save_config(cfg: Config) -> Path:
    """Write config to the TOML file. Returns the path written."""
    path = _config_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    lines = [
        "[output]",
        f"indent = {cfg.indent}",
        f"sort_keys = {'true' if cfg.sort_keys else 'false'}",
        "",
        "[logging]",
        f'level = "{cfg.log_level}"',
        "",
        "[types]",
    ]
    if cfg.include_types is not None:
        lines.append(f"include = {_toml_list(cfg.include_types)}")
    lines.extend([f"exclude = {_toml_list(cfg.exclude_types)}", ""])

    path.write_text("\n".join(lines), encoding="utf-8")
    return path
