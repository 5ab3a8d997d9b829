# topmark:header:start
#
#   project      : PrettyVal
#   file         : model.py
#   file_relpath : src/prettyval/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render configuration model for PrettyVal.

Design:
    * ``MutableRenderConfig`` uses optional fields (``int | None``) to tell an
      explicit value apart from *unset*. This allows layering sources
      (defaults → config file → CLI) with last-wins merges.
    * ``RenderConfig`` is the fully-resolved, immutable runtime view passed to
      the renderer.

TOML mapping:

    [tool.prettyval]       # in pyproject.toml; top level in prettyval.toml
    indent_size = 4
    indent_level = 0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final

from prettyval.config.logging import get_logger
from prettyval.constants import DISPLAY_INDENT_LEVEL, DISPLAY_INDENT_SIZE

if TYPE_CHECKING:
    from collections.abc import Mapping

    from prettyval.config.logging import PrettyvalLogger

logger: PrettyvalLogger = get_logger(__name__)

KNOWN_KEYS: Final[frozenset[str]] = frozenset({"indent_size", "indent_level"})


class ConfigError(ValueError):
    """Raised when configuration values are missing, malformed or out of range."""


def _check_count(key: str, value: Any) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"'{key}' must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ConfigError(f"'{key}' must be >= 0, got {value}")
    return value


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable layout settings used by the renderer.

    Attributes:
        indent_size (int): Columns per nesting level.
        indent_level (int): Nesting level of the first rendered line.
    """

    indent_size: int = DISPLAY_INDENT_SIZE
    indent_level: int = DISPLAY_INDENT_LEVEL

    def __post_init__(self) -> None:
        _check_count("indent_size", self.indent_size)
        _check_count("indent_level", self.indent_level)

    def thaw(self) -> MutableRenderConfig:
        """Return a mutable builder initialized from this frozen config."""
        return MutableRenderConfig(indent_size=self.indent_size, indent_level=self.indent_level)

    @classmethod
    def from_mapping(cls, tbl: Mapping[str, Any] | None) -> RenderConfig:
        """Validate ``tbl`` and resolve it against the defaults.

        Args:
            tbl (Mapping[str, Any] | None): Table with keys matching the attributes.

        Returns:
            RenderConfig: The resolved configuration.

        Raises:
            ConfigError: If a value has the wrong type or is negative.
        """
        return MutableRenderConfig.from_toml_table(tbl).freeze()


@dataclass
class MutableRenderConfig:
    """Mutable builder for `RenderConfig`, merged last-wins across sources.

    Attributes:
        indent_size (int | None): See `RenderConfig`. `None` means "inherit".
        indent_level (int | None): See `RenderConfig`. `None` means "inherit".
    """

    indent_size: int | None = None
    indent_level: int | None = None

    def merge_with(self, other: MutableRenderConfig) -> MutableRenderConfig:
        """Return a new builder by applying ``other`` over ``self`` (last-wins).

        ``None`` fields in ``other`` do not override explicit values in ``self``.
        """

        def pick(*, current: int | None, override: int | None) -> int | None:
            return override if override is not None else current

        return MutableRenderConfig(
            indent_size=pick(current=self.indent_size, override=other.indent_size),
            indent_level=pick(current=self.indent_level, override=other.indent_level),
        )

    def resolve(self, base: RenderConfig) -> RenderConfig:
        """Fill unset fields from ``base`` and return a frozen config.

        Raises:
            ConfigError: If a set value is negative.
        """
        return RenderConfig(
            indent_size=base.indent_size if self.indent_size is None else self.indent_size,
            indent_level=base.indent_level if self.indent_level is None else self.indent_level,
        )

    def freeze(self) -> RenderConfig:
        """Freeze to a concrete `RenderConfig` using the built-in defaults for unset fields."""
        return self.resolve(RenderConfig())

    @classmethod
    def from_toml_table(cls, tbl: Mapping[str, Any] | None) -> MutableRenderConfig:
        """Create a builder from a TOML table mapping.

        Unknown keys are logged and ignored; unspecified keys stay unset.

        Args:
            tbl (Mapping[str, Any] | None): Table with keys matching the attributes.

        Returns:
            MutableRenderConfig: Parsed builder.

        Raises:
            ConfigError: If a known key holds an invalid value.
        """
        if not tbl:
            return cls()

        for key in tbl:
            if key not in KNOWN_KEYS:
                logger.warning("Ignoring unknown configuration key '%s'", key)

        def pick(key: str) -> int | None:
            return None if key not in tbl else _check_count(key, tbl[key])

        return cls(indent_size=pick("indent_size"), indent_level=pick("indent_level"))
