# topmark:header:start
#
#   project      : PrettyVal
#   file         : test_config_io.py
#   file_relpath : tests/config/test_config_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for loading, discovering and layering TOML configuration files."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from prettyval.config import (
    ConfigError,
    MutableRenderConfig,
    RenderConfig,
    discover_config,
    load_config,
    resolve_config,
)
from prettyval.config.io import load_toml_dict, parse_toml_text, settings_table

if TYPE_CHECKING:
    from pathlib import Path


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_parse_toml_text_returns_plain_dicts() -> None:
    data = parse_toml_text('a = 1\n[t]\nb = "x"\n')
    assert data == {"a": 1, "t": {"b": "x"}}
    assert type(data["t"]) is dict


def test_load_standalone_file(tmp_path: Path) -> None:
    path = _write(tmp_path / "prettyval.toml", "indent_size = 2\nindent_level = 1\n")
    assert load_config(path) == MutableRenderConfig(indent_size=2, indent_level=1)


def test_load_pyproject_table(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "pyproject.toml",
        '[project]\nname = "x"\n\n[tool.prettyval]\nindent_size = 8\n',
    )
    assert load_config(path) == MutableRenderConfig(indent_size=8)


def test_pyproject_without_table_is_empty(tmp_path: Path) -> None:
    path = _write(tmp_path / "pyproject.toml", '[project]\nname = "x"\n')
    assert settings_table(path, load_toml_dict(path)) == {}
    assert load_config(path) == MutableRenderConfig()


def test_missing_file_raises_config_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Cannot read"):
        load_config(tmp_path / "absent.toml")


def test_invalid_toml_raises_config_error(tmp_path: Path) -> None:
    path = _write(tmp_path / "prettyval.toml", "indent_size = = 2\n")
    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_config(path)


def test_invalid_value_raises_config_error(tmp_path: Path) -> None:
    path = _write(tmp_path / "prettyval.toml", "indent_size = -4\n")
    with pytest.raises(ConfigError):
        load_config(path)


def test_discover_walks_up(tmp_path: Path) -> None:
    cfg = _write(tmp_path / "prettyval.toml", "indent_size = 2\n")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    assert discover_config(nested) == cfg.resolve()


def test_discover_prefers_standalone_over_pyproject(tmp_path: Path) -> None:
    _write(tmp_path / "pyproject.toml", "[tool.prettyval]\nindent_size = 8\n")
    standalone = _write(tmp_path / "prettyval.toml", "indent_size = 2\n")
    assert discover_config(tmp_path) == standalone.resolve()


def test_discover_skips_pyproject_without_table(tmp_path: Path) -> None:
    outer = _write(tmp_path / "prettyval.toml", "indent_size = 2\n")
    _write(tmp_path / "inner" / "pyproject.toml", '[project]\nname = "x"\n')
    assert discover_config(tmp_path / "inner") == outer.resolve()


def test_discover_nearest_wins(tmp_path: Path) -> None:
    _write(tmp_path / "prettyval.toml", "indent_size = 2\n")
    inner = _write(tmp_path / "inner" / "pyproject.toml", "[tool.prettyval]\nindent_level = 1\n")
    assert discover_config(tmp_path / "inner") == inner.resolve()


def test_resolve_config_precedence(tmp_path: Path) -> None:
    _write(tmp_path / "prettyval.toml", "indent_size = 2\nindent_level = 1\n")
    assert resolve_config(search_from=tmp_path) == RenderConfig(2, 1)
    assert resolve_config(
        search_from=tmp_path, overrides=MutableRenderConfig(indent_level=0)
    ) == RenderConfig(2, 0)


def test_resolve_config_explicit_path_disables_discovery(tmp_path: Path) -> None:
    _write(tmp_path / "prettyval.toml", "indent_size = 2\n")
    explicit = _write(tmp_path / "other" / "custom.toml", "indent_level = 3\n")
    assert resolve_config(config_path=explicit, search_from=tmp_path) == RenderConfig(4, 3)


def test_resolve_config_without_sources_uses_defaults() -> None:
    assert resolve_config() == RenderConfig()
