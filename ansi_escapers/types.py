"""Value types describing ANSI escape codes.

The types are immutable and validated on construction, so an escape code
that cannot be expressed on the wire cannot be built either.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Union

_U8_MAX = 0xFF
_U16_MAX = 0xFFFF


def _check_range(name: str, value: int, limit: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= limit:
        raise ValueError(f"{name} must be in 0..={limit}, got {value}")


class Color(Enum):
    """One of the sixteen standard terminal colors, valued by palette index."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7
    BRIGHT_BLACK = 8
    BRIGHT_RED = 9
    BRIGHT_GREEN = 10
    BRIGHT_YELLOW = 11
    BRIGHT_BLUE = 12
    BRIGHT_MAGENTA = 13
    BRIGHT_CYAN = 14
    BRIGHT_WHITE = 15

    @property
    def is_bright(self) -> bool:
        return self.value >= 8


@dataclass(frozen=True)
class AnsiValue:
    """An 8-bit palette color (0-255)."""

    index: int

    def __post_init__(self) -> None:
        _check_range("index", self.index, _U8_MAX)


@dataclass(frozen=True)
class Rgb24:
    """A 24-bit RGB color."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            _check_range(name, getattr(self, name), _U8_MAX)


ColorSpec = Union[Color, AnsiValue, Rgb24]


class Style(Enum):
    """Plain SGR attributes, valued by their SGR parameter."""

    RESET = 0
    BOLD = 1
    FAINT = 2
    ITALIC = 3
    UNDERLINE = 4
    BLINK_SLOW = 5
    BLINK_RAPID = 6
    REVERSE = 7
    CONCEAL = 8
    CROSSED_OUT = 9


def _check_color(color: object) -> None:
    if not isinstance(color, (Color, AnsiValue, Rgb24)):
        raise TypeError(f"expected a color, got {type(color).__name__}")


@dataclass(frozen=True)
class Foreground:
    """Set the foreground color."""

    color: ColorSpec

    def __post_init__(self) -> None:
        _check_color(self.color)


@dataclass(frozen=True)
class Background:
    """Set the background color."""

    color: ColorSpec

    def __post_init__(self) -> None:
        _check_color(self.color)


@dataclass(frozen=True)
class UnderlineColor:
    """Set the underline color."""

    color: ColorSpec

    def __post_init__(self) -> None:
        _check_color(self.color)


SgrAttribute = Union[Style, Foreground, Background, UnderlineColor]


class CursorDirection(Enum):
    """Relative cursor movements, valued by their CSI final byte."""

    UP = "A"
    DOWN = "B"
    FORWARD = "C"
    BACKWARD = "D"
    NEXT_LINE = "E"
    PREVIOUS_LINE = "F"
    HORIZONTAL_ABSOLUTE = "G"


@dataclass(frozen=True)
class CursorMove:
    """Move the cursor ``n`` steps in ``direction``."""

    direction: CursorDirection
    n: int = 1

    def __post_init__(self) -> None:
        if not isinstance(self.direction, CursorDirection):
            raise TypeError("direction must be a CursorDirection")
        _check_range("n", self.n, _U16_MAX)


@dataclass(frozen=True)
class CursorPosition:
    """Move the cursor to an absolute row and column."""

    row: int = 1
    col: int = 1

    def __post_init__(self) -> None:
        _check_range("row", self.row, _U16_MAX)
        _check_range("col", self.col, _U16_MAX)


class EraseMode(Enum):
    """Which part of the display or line to erase, valued by its parameter."""

    TO_END = 0
    TO_START = 1
    ALL = 2


class EraseTarget(Enum):
    """What to erase, valued by its CSI final byte."""

    DISPLAY = "J"
    LINE = "K"


@dataclass(frozen=True)
class Erase:
    """Erase part or all of the display or the current line."""

    target: EraseTarget
    mode: EraseMode = EraseMode.TO_END

    def __post_init__(self) -> None:
        if not isinstance(self.target, EraseTarget):
            raise TypeError("target must be an EraseTarget")
        if not isinstance(self.mode, EraseMode):
            raise TypeError("mode must be an EraseMode")


class DeviceControl(Enum):
    """Cursor and terminal state commands."""

    SAVE_CURSOR = auto()
    RESTORE_CURSOR = auto()
    HIDE_CURSOR = auto()
    SHOW_CURSOR = auto()


AnsiEscape = Union[
    Style, Foreground, Background, UnderlineColor,
    CursorMove, CursorPosition, Erase, DeviceControl,
]

_COLOR_TARGET_RANK = {Foreground: 10, Background: 11, UnderlineColor: 12}


def _color_key(color: ColorSpec) -> tuple:
    if isinstance(color, Color):
        return (color.value,)
    if isinstance(color, AnsiValue):
        return (16, color.index)
    if isinstance(color, Rgb24):
        return (17, color.r, color.g, color.b)
    raise TypeError(f"expected a color, got {type(color).__name__}")


def sgr_sort_key(attr: SgrAttribute) -> tuple:
    """Return a key giving SGR attributes a fixed, deterministic order.

    Plain styles come first in SGR order, then foreground, background and
    underline colors; within those, standard colors precede palette colors,
    which precede RGB colors.
    """
    if isinstance(attr, Style):
        return (attr.value,)
    rank = _COLOR_TARGET_RANK.get(type(attr))
    if rank is None:
        raise TypeError(f"expected an SGR attribute, got {type(attr).__name__}")
    return (rank, _color_key(attr.color))