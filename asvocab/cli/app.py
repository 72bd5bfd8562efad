from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

from asvocab.activitystreams import lattice
from asvocab.activitystreams.core import ASType
from asvocab.cli import output as out
from asvocab.cli.config import (
    Config,
    config_exists,
    config_path_display,
    load_config,
    save_config,
)
from asvocab.config import parse_config
from asvocab.core.exceptions import VocabularyError
from asvocab.document import context_value, serialize, to_type
from asvocab.ordering import normalize
from asvocab.registry import TypeRegistry

DESCRIPTION = """\
asvocab: decode, inspect and normalize ActivityStreams 2.0 documents

Each property value is classified as one of the property's declared
alternatives, a bare IRI, or an unknown value kept verbatim.

FILE may be "-" to read from stdin."""


# ── Helpers ─────────────────────────────────────────────────────────


class CommandError(Exception):
    """A user-facing failure; printed without a traceback."""


def _build_registry(cfg: Config) -> TypeRegistry:
    try:
        return parse_config(cfg.registry_config())
    except ValueError as exc:
        raise CommandError(str(exc)) from exc


def _read_document(path: str) -> dict[str, Any]:
    try:
        text = sys.stdin.read() if path == "-" else Path(path).read_text("utf-8")
    except OSError as exc:
        raise CommandError(f"Cannot read {path}: {exc}") from exc
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise CommandError(f"{path} is not valid JSON: {exc}") from exc
    if not isinstance(document, dict):
        raise CommandError(f"{path} does not contain a JSON object")
    return document


def _load(path: str, cfg: Config) -> ASType:
    document = _read_document(path)
    try:
        return to_type(document, _build_registry(cfg))
    except VocabularyError as exc:
        raise CommandError(str(exc)) from exc


def _dump(data: Any, cfg: Config) -> str:
    return json.dumps(
        data,
        indent=cfg.indent or None,
        sort_keys=cfg.sort_keys,
        ensure_ascii=False,
    )


# ── Commands ────────────────────────────────────────────────────────


def cmd_inspect(args: argparse.Namespace, cfg: Config) -> None:
    obj = _load(args.file, cfg)
    out.heading(obj.type_name)
    if obj.alias:
        out.field("alias", obj.alias)
    for prop in obj.present_properties():
        out.field(prop.key, out.property_label(prop))
    unknown = obj.unknown_properties
    if unknown:
        out.heading("Unknown properties")
        for key in unknown:
            out.flagged(key)


def cmd_normalize(args: argparse.Namespace, cfg: Config) -> None:
    obj = normalize(_load(args.file, cfg))
    text = _dump(serialize(obj), cfg)
    if args.out:
        Path(args.out).write_text(text + "\n", encoding="utf-8")
        out.done(f"Wrote {args.out}")
    else:
        print(text)


def cmd_context(args: argparse.Namespace, cfg: Config) -> None:
    obj = _load(args.file, cfg)
    print(_dump(context_value(obj.jsonld_context()), cfg))


def cmd_types(args: argparse.Namespace, cfg: Config) -> None:
    registry = _build_registry(cfg)
    out.heading(f"Registered types ({len(registry)})")
    for name in registry:
        out.type_entry(name, lattice.relations(name), full=args.verbose_relations)


def cmd_config_show(args: argparse.Namespace, cfg: Config) -> None:
    out.heading("Configuration")
    if not config_exists():
        out.note(out.paint("muted", "(no config file, using defaults)"))
    out.field("indent", cfg.indent)
    out.field("sort_keys", cfg.sort_keys)
    out.field("log_level", cfg.log_level or "-")
    out.field(
        "include",
        ", ".join(cfg.include_types) if cfg.include_types is not None else "all",
    )
    out.field("exclude", ", ".join(cfg.exclude_types) or "-")


def cmd_config_set_types(args: argparse.Namespace, cfg: Config) -> None:
    """Restrict which vocabulary types documents may resolve to."""
    if args.all:
        cfg.include_types = None
        cfg.exclude_types = []
    if args.include is not None:
        cfg.include_types = args.include
    if args.exclude is not None:
        cfg.exclude_types = args.exclude

    registry = _build_registry(cfg)
    path = save_config(cfg)
    out.done(f"{len(registry)} type(s) enabled. Config written to {path}")


def cmd_config_path(args: argparse.Namespace, cfg: Config) -> None:
    print(config_path_display())


# ── Parser ──────────────────────────────────────────────────────────


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="asvocab",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug logs (classification fallbacks, type resolution)",
    )
    sub = parser.add_subparsers(dest="command", title="commands")

    p_inspect = sub.add_parser(
        "inspect", help="Show how each property of a document was classified"
    )
    p_inspect.add_argument("file", metavar="FILE")

    p_norm = sub.add_parser(
        "normalize", help="Decode, sort multi-valued properties and re-encode"
    )
    p_norm.add_argument("file", metavar="FILE")
    p_norm.add_argument("--out", metavar="PATH", help="Write to PATH instead of stdout")

    p_ctx = sub.add_parser("context", help="Print the JSON-LD @context a document needs")
    p_ctx.add_argument("file", metavar="FILE")

    p_types = sub.add_parser("types", help="List registered vocabulary types")
    p_types.add_argument(
        "--relations",
        dest="verbose_relations",
        action="store_true",
        help="Also show extended-by and disjoint-with relations",
    )

    p_cfg = sub.add_parser("config", help="View or change settings")
    cfg_sub = p_cfg.add_subparsers(dest="config_command")
    cfg_sub.add_parser("show", help="Show current settings")
    p_set_types = cfg_sub.add_parser(
        "set-types", help="Choose which vocabulary types are registered"
    )
    p_set_types.add_argument("--include", nargs="*", metavar="TYPE")
    p_set_types.add_argument("--exclude", nargs="*", metavar="TYPE")
    p_set_types.add_argument(
        "--all", action="store_true", help="Reset to every built-in type"
    )
    cfg_sub.add_parser("path", help="Print config file location")

    return parser


# ── Dispatch ────────────────────────────────────────────────────────

_CommandHandler = Callable[[argparse.Namespace, Config], None]

_COMMAND_MAP: dict[str, _CommandHandler] = {
    "inspect": cmd_inspect,
    "normalize": cmd_normalize,
    "context": cmd_context,
    "types": cmd_types,
}

_CONFIG_MAP: dict[str, _CommandHandler] = {
    "show": cmd_config_show,
    "set-types": cmd_config_set_types,
    "path": cmd_config_path,
}


def _configure_logging(verbose: bool, cfg: Config) -> None:
    if verbose:
        level: int | str = logging.DEBUG
    elif cfg.log_level:
        level = cfg.log_level.upper()
    else:
        return
    logging.basicConfig(level=level, format="  %(name)s: %(message)s")


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    cfg = load_config()
    _configure_logging(args.verbose, cfg)

    if not args.command:
        parser.print_help()
        return 0

    if args.command == "config":
        if not args.config_command:
            parser.parse_args(["config", "--help"])
            return 0
        handler = _CONFIG_MAP.get(args.config_command)
    else:
        handler = _COMMAND_MAP.get(args.command)

    if handler is None:
        parser.print_help()
        return 0

    try:
        handler(args, cfg)
    except CommandError as exc:
        out.failure(str(exc))
        return 1
    except KeyboardInterrupt:
        print()
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
