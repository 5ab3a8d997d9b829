# topmark:header:start
#
#   project      : PrettyVal
#   file         : test_render_config.py
#   file_relpath : tests/config/test_render_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the render configuration model (merge, resolve, validation)."""

from __future__ import annotations

import dataclasses
import logging

import pytest

from prettyval.config import ConfigError, MutableRenderConfig, RenderConfig


def test_defaults() -> None:
    cfg = RenderConfig()
    assert (cfg.indent_size, cfg.indent_level) == (4, 0)
    assert MutableRenderConfig().freeze() == cfg


def test_render_config_is_frozen() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        RenderConfig().indent_size = 2  # type: ignore[misc]


@pytest.mark.parametrize("bad", [-1, True, "4", 1.5])
def test_render_config_rejects_invalid_values(bad: object) -> None:
    with pytest.raises(ConfigError):
        RenderConfig(indent_size=bad)  # type: ignore[arg-type]
    with pytest.raises(ConfigError):
        RenderConfig(indent_level=bad)  # type: ignore[arg-type]


def test_config_error_is_a_value_error() -> None:
    assert issubclass(ConfigError, ValueError)


def test_merge_is_last_wins_and_skips_unset() -> None:
    base = MutableRenderConfig(indent_size=2, indent_level=1)
    merged = base.merge_with(MutableRenderConfig(indent_level=3))
    assert merged == MutableRenderConfig(indent_size=2, indent_level=3)
    # Inputs are left untouched.
    assert base == MutableRenderConfig(indent_size=2, indent_level=1)


def test_resolve_fills_from_base() -> None:
    base = RenderConfig(indent_size=8, indent_level=2)
    assert MutableRenderConfig(indent_level=0).resolve(base) == RenderConfig(8, 0)


def test_thaw_freeze_roundtrip() -> None:
    cfg = RenderConfig(indent_size=3, indent_level=1)
    assert cfg.thaw().freeze() == cfg


def test_from_toml_table() -> None:
    assert MutableRenderConfig.from_toml_table(None) == MutableRenderConfig()
    assert MutableRenderConfig.from_toml_table({"indent_size": 2}) == MutableRenderConfig(
        indent_size=2
    )
    assert RenderConfig.from_mapping({"indent_level": 1}) == RenderConfig(indent_level=1)


def test_from_toml_table_rejects_bad_values() -> None:
    with pytest.raises(ConfigError, match="indent_size"):
        MutableRenderConfig.from_toml_table({"indent_size": -2})
    with pytest.raises(ConfigError, match="indent_level"):
        MutableRenderConfig.from_toml_table({"indent_level": "deep"})


def test_unknown_keys_are_ignored_with_a_warning(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="prettyval.config.model"):
        cfg = MutableRenderConfig.from_toml_table({"indent_size": 2, "colour": "always"})
    assert cfg == MutableRenderConfig(indent_size=2)
    assert "colour" in caplog.text
