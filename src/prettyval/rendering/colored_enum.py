# topmark:header:start
#
#   project      : PrettyVal
#   file         : colored_enum.py
#   file_relpath : src/prettyval/rendering/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color-aware enum primitives for human-facing rendering.

This module provides a small base enum that stores a textual value while
attaching a colorizer (callable that decorates strings). It keeps the
document model free of any direct dependency on terminal escape codes.

Key types:
    - `Colorizer`: Protocol describing any callable that decorates a string.
    - `foreground`: Build a `Colorizer` that paints text with a fixed
      `click.style` foreground color.
    - `ColoredStrEnum`: `str, Enum` that stores the enum's text value and a
      colorizer. The enum `.value` remains a plain string, while the
      colorizer is exposed via `.color`.

Example:
    ```python
    class Category(ColoredStrEnum):
        HASH  = ("hash", foreground("green"))
        EPOCH = ("epoch", foreground("blue"))

    print(Category.HASH.value)            # 'hash'
    print(Category.HASH.color("00ff"))    # green "00ff"
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol

import click


class Colorizer(Protocol):
    """Callable that decorates a string for display."""

    def __call__(self, text: str) -> str:
        """Return ``text`` wrapped in display decoration (e.g. ANSI color codes)."""
        ...


def foreground(color: str) -> Colorizer:
    """Return a colorizer painting text with the given `click.style` foreground color.

    The returned callable always emits ANSI sequences; stripping them is the job
    of whoever owns the output stream (e.g. `click.echo(..., color=False)`).

    Args:
        color (str): A color name accepted by `click.style` (``"green"``, ``"cyan"``...).

    Returns:
        Colorizer: The colorizer.
    """

    def _paint(text: str) -> str:
        return click.style(text, fg=color)

    _paint.__name__ = f"fg_{color}"
    return _paint


class ColoredStrEnum(str, Enum):
    """Enum whose *value* is a string and that carries an associated colorizer.

    The enum member remains a `str` (so Enum internals, hashing, repr, etc.
    behave normally), and the colorizer is stored separately on the instance.
    """

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        """Construct a colored enum member.

        Args:
            text (str): The textual value for the enum member (stored in `_value_`).
            color (Colorizer): A callable used to colorize text for display.

        Returns:
            ColoredStrEnum: The newly constructed enum member.
        """
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def value(self) -> str:
        """Return the textual value of the enum member."""
        return self._value_

    @property
    def color(self) -> Colorizer:
        """Return the colorizer associated with this member."""
        return self._color
