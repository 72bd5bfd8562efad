from __future__ import annotations

import io
import json
from pathlib import Path
from typing import Any

import pytest

from asvocab.activitystreams.properties import ItemsProperty, NextProperty
from asvocab.cli import output
from asvocab.cli.app import main
from asvocab.cli.config import Config, load_config
from asvocab.core.types import AS_CONTEXT_URI
from asvocab.registry import TypeRegistry


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    path = tmp_path / "config.toml"
    monkeypatch.setenv("ASVOCAB_CONFIG", str(path))
    monkeypatch.delenv("ASVOCAB_LOG_LEVEL", raising=False)
    monkeypatch.setenv("NO_COLOR", "1")
    return path


@pytest.fixture()
def collection() -> dict[str, Any]:
    return {
        "@context": AS_CONTEXT_URI,
        "type": "Collection",
        "items": [
            {"type": "Link", "href": "https://example.com/a"},
            "https://example.com/b",
            "https://example.com/a",
        ],
        "customField": True,
    }


# ── Config ───────────────────────────────────────────────────────────


class TestLoadConfig:
    def test_defaults_without_file(self):
        cfg = load_config()
        assert cfg == Config()
        assert cfg.registry_config() == {"types": {"include": None, "exclude": []}}

    def test_reads_toml(self, isolated_config: Path):
        isolated_config.write_text(
            "[output]\nindent = 4\nsort_keys = true\n\n"
            '[logging]\nlevel = "INFO"\n\n'
            '[types]\ninclude = ["Link", "Mention"]\nexclude = ["Mention"]\n'
        )
        cfg = load_config()

        assert cfg.indent == 4
        assert cfg.sort_keys is True
        assert cfg.log_level == "INFO"
        assert cfg.include_types == ["Link", "Mention"]
        assert cfg.exclude_types == ["Mention"]

    def test_env_overrides_log_level(
        self, isolated_config: Path, monkeypatch: pytest.MonkeyPatch
    ):
        isolated_config.write_text('[logging]\nlevel = "INFO"\n')
        monkeypatch.setenv("ASVOCAB_LOG_LEVEL", "DEBUG")
        assert load_config().log_level == "DEBUG"


# ── Commands ─────────────────────────────────────────────────────────


def test_no_command_prints_help(capsys: pytest.CaptureFixture[str]):
    assert main([]) == 0
    assert "usage: asvocab" in capsys.readouterr().out


def test_normalize_to_stdout(write_json, collection, capsys):
    path = write_json(collection)

    assert main(["normalize", str(path)]) == 0

    result = json.loads(capsys.readouterr().out)
    assert result["items"] == [
        "https://example.com/a",
        "https://example.com/b",
        {"type": "Link", "href": "https://example.com/a"},
    ]
    assert result["customField"] is True
    assert result["@context"] == AS_CONTEXT_URI


def test_normalize_to_file(write_json, collection, tmp_path: Path, capsys):
    path = write_json(collection)
    target = tmp_path / "out.json"

    assert main(["normalize", str(path), "--out", str(target)]) == 0

    assert "Wrote" in capsys.readouterr().out
    assert json.loads(target.read_text())["type"] == "Collection"


def test_normalize_from_stdin(collection, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(collection)))
    assert main(["normalize", "-"]) == 0
    assert json.loads(capsys.readouterr().out)["type"] == "Collection"


def test_inspect(write_json, capsys):
    path = write_json(
        {
            "type": "CollectionPage",
            "next": "https://example.com/page/3",
            "prev": {"type": "Link", "href": "https://example.com/page/1"},
            "totalItems": "many",
            "extra": 1,
        }
    )

    assert main(["inspect", str(path)]) == 0

    out = capsys.readouterr().out
    assert "CollectionPage" in out
    assert "IRI https://example.com/page/3" in out
    assert "prev:  Link" in out
    assert "unknown (str)" in out
    assert "Unknown properties" in out
    assert "extra" in out


def test_context(write_json, capsys):
    path = write_json(
        {
            "@context": {"as": AS_CONTEXT_URI + "#"},
            "type": "as:Link",
            "as:href": "https://example.com/",
        }
    )
    assert main(["context", str(path)]) == 0
    assert json.loads(capsys.readouterr().out) == {"as": AS_CONTEXT_URI}


def test_types(capsys):
    assert main(["types", "--relations"]) == 0

    out = capsys.readouterr().out
    assert "Registered types (10)" in out
    assert "Mention" in out
    assert "extends:  Link" in out
    assert "disjoint with" in out


def test_types_respects_config(isolated_config: Path, capsys):
    isolated_config.write_text('[types]\ninclude = ["Link", "Mention"]\n')
    assert main(["types"]) == 0
    assert "Registered types (2)" in capsys.readouterr().out


def test_config_set_types_writes_file(isolated_config: Path, capsys):
    assert main(["config", "set-types", "--include", "Link", "Mention"]) == 0
    assert "2 type(s) enabled" in capsys.readouterr().out

    cfg = load_config()
    assert cfg.include_types == ["Link", "Mention"]
    assert cfg.exclude_types == []

    assert main(["config", "set-types", "--all"]) == 0
    assert load_config().include_types is None


def test_config_set_types_rejects_unknown_names(isolated_config: Path, capsys):
    assert main(["config", "set-types", "--include", "Note"]) == 1
    assert "Unknown vocabulary type" in capsys.readouterr().err
    assert not isolated_config.exists()


def test_config_show_and_path(isolated_config: Path, capsys):
    assert main(["config", "show"]) == 0
    assert "no config file" in capsys.readouterr().out

    assert main(["config", "path"]) == 0
    assert capsys.readouterr().out.strip() == str(isolated_config)


# ── Errors ───────────────────────────────────────────────────────────


def test_invalid_json_exits_1(tmp_path: Path, capsys):
    path = tmp_path / "bad.json"
    path.write_text("{not json")

    assert main(["inspect", str(path)]) == 1
    assert "not valid JSON" in capsys.readouterr().err


def test_missing_file_exits_1(tmp_path: Path, capsys):
    assert main(["inspect", str(tmp_path / "missing.json")]) == 1
    assert "Cannot read" in capsys.readouterr().err


def test_unhandled_type_exits_1(write_json, capsys):
    path = write_json({"type": "Note"})
    assert main(["normalize", str(path)]) == 1
    assert "No registered vocabulary type" in capsys.readouterr().err


def test_bad_type_config_exits_1(isolated_config: Path, capsys):
    isolated_config.write_text('[types]\nexclude = ["Note"]\n')
    assert main(["types"]) == 1
    assert "Unknown vocabulary type" in capsys.readouterr().err


# ── Rendering ────────────────────────────────────────────────────────


def test_member_labels_are_coloured_by_kind(
    registry: TypeRegistry, monkeypatch: pytest.MonkeyPatch
):
    monkeypatch.setattr(output, "_supports_color", lambda: True)

    typed = NextProperty.from_raw({"type": "Link"}, "", {}, registry)
    iri = NextProperty.from_raw("https://example.com/p2", "", {}, registry)
    unknown = NextProperty.from_raw(7, "", {}, registry)

    assert output.member_label(typed) == "\033[32mLink\033[0m"
    assert output.member_label(iri) == "\033[36mIRI https://example.com/p2\033[0m"
    assert output.member_label(unknown) == "\033[33munknown (int)\033[0m"
    assert output.member_label(NextProperty()) == "\033[2mempty\033[0m"


def test_property_label_lists_entries(registry: TypeRegistry):
    items = ItemsProperty.from_raw(
        ["https://example.com/a", {"type": "Mention"}, 3], "", {}, registry
    )
    assert output.property_label(items) == (
        "[IRI https://example.com/a, Mention, unknown (int)]"
    )
    assert output.property_label(ItemsProperty()) == "[]"
