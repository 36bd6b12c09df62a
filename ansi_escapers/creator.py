"""Production of ANSI escape codes for styling, cursor movement and erasing."""

from __future__ import annotations

from typing import Iterable, Optional

from .environment import AnsiEnvironment
from .types import (
    AnsiValue,
    Background,
    Color,
    ColorSpec,
    CursorMove,
    CursorPosition,
    DeviceControl,
    Erase,
    Foreground,
    Rgb24,
    Style,
    UnderlineColor,
)

_CSI = "\x1b["

_DEVICE_CODES = {
    DeviceControl.SAVE_CURSOR: f"{_CSI}s",
    DeviceControl.RESTORE_CURSOR: f"{_CSI}u",
    DeviceControl.HIDE_CURSOR: f"{_CSI}?25l",
    DeviceControl.SHOW_CURSOR: f"{_CSI}?25h",
}


def _u8(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} must be in 0..=255, got {value}")
    return value


class AnsiCreator:
    """Builds ANSI escape code strings.

    The detected environment capabilities are kept in ``env``; the codes
    produced do not depend on them.
    """

    def __init__(self, env: Optional[AnsiEnvironment] = None) -> None:
        self.env = AnsiEnvironment.detect() if env is None else env

    def format_text(self, text: str, attrs: Iterable) -> str:
        """Wrap ``text`` in the codes for ``attrs``, followed by a reset."""
        prefix = "".join(self.sgr_code(attr) for attr in attrs)
        return f"{prefix}{text}{self.sgr_code(Style.RESET)}"

    def sgr_code(self, attr) -> str:
        """Return the escape code for a single SGR attribute."""
        if isinstance(attr, Style):
            return f"{_CSI}{attr.value}m"
        if isinstance(attr, Foreground):
            return self._fg_code(attr.color)
        if isinstance(attr, Background):
            return self._bg_code(attr.color)
        if isinstance(attr, UnderlineColor):
            return self._underline_code(attr.color)
        raise TypeError(f"expected an SGR attribute, got {type(attr).__name__}")

    def fg_standard(self, code: int) -> str:
        """Return a standard foreground code (30-37 normal, 90-97 bright)."""
        return f"{_CSI}{_u8('code', code)}m"

    def fg_8bit(self, idx: int) -> str:
        """Return an 8-bit foreground code (SGR 38;5;N)."""
        return f"{_CSI}38;5;{_u8('idx', idx)}m"

    def fg_24bit(self, r: int, g: int, b: int) -> str:
        """Return a 24-bit foreground code (SGR 38;2;R;G;B)."""
        return f"{_CSI}38;2;{_u8('r', r)};{_u8('g', g)};{_u8('b', b)}m"

    def bg_standard(self, code: int) -> str:
        """Return a standard background code (40-47 normal, 100-107 bright)."""
        return f"{_CSI}{_u8('code', code)}m"

    def bg_8bit(self, idx: int) -> str:
        """Return an 8-bit background code (SGR 48;5;N)."""
        return f"{_CSI}48;5;{_u8('idx', idx)}m"

    def bg_24bit(self, r: int, g: int, b: int) -> str:
        """Return a 24-bit background code (SGR 48;2;R;G;B)."""
        return f"{_CSI}48;2;{_u8('r', r)};{_u8('g', g)};{_u8('b', b)}m"

    def underline_8bit(self, idx: int) -> str:
        """Return an 8-bit underline color code (SGR 58;5;N)."""
        return f"{_CSI}58;5;{_u8('idx', idx)}m"

    def underline_24bit(self, r: int, g: int, b: int) -> str:
        """Return a 24-bit underline color code (SGR 58;2;R;G;B)."""
        return f"{_CSI}58;2;{_u8('r', r)};{_u8('g', g)};{_u8('b', b)}m"

    def cursor_code(self, movement) -> str:
        """Return the escape code for a cursor movement."""
        if isinstance(movement, CursorMove):
            return f"{_CSI}{movement.n}{movement.direction.value}"
        if isinstance(movement, CursorPosition):
            return f"{_CSI}{movement.row};{movement.col}H"
        raise TypeError(
            f"expected a cursor movement, got {type(movement).__name__}"
        )

    def erase_code(self, erase: Erase) -> str:
        """Return the escape code for erasing part of the display or line."""
        if not isinstance(erase, Erase):
            raise TypeError(f"expected an Erase, got {type(erase).__name__}")
        return f"{_CSI}{erase.mode.value}{erase.target.value}"

    def device_code(self, device: DeviceControl) -> str:
        """Return the escape code for a device control command."""
        if not isinstance(device, DeviceControl):
            raise TypeError(
                f"expected a DeviceControl, got {type(device).__name__}"
            )
        return _DEVICE_CODES[device]

    def escape_code(self, code) -> str:
        """Return the escape code for any supported escape value."""
        if isinstance(code, (Style, Foreground, Background, UnderlineColor)):
            return self.sgr_code(code)
        if isinstance(code, (CursorMove, CursorPosition)):
            return self.cursor_code(code)
        if isinstance(code, Erase):
            return self.erase_code(code)
        if isinstance(code, DeviceControl):
            return self.device_code(code)
        raise TypeError(f"expected an ANSI escape, got {type(code).__name__}")

    def _fg_code(self, color: ColorSpec) -> str:
        if isinstance(color, Color):
            base = 90 if color.is_bright else 30
            return self.fg_standard(base + color.value % 8)
        if isinstance(color, AnsiValue):
            return self.fg_8bit(color.index)
        if isinstance(color, Rgb24):
            return self.fg_24bit(color.r, color.g, color.b)
        raise TypeError(f"expected a color, got {type(color).__name__}")

    def _bg_code(self, color: ColorSpec) -> str:
        if isinstance(color, Color):
            base = 100 if color.is_bright else 40
            return self.bg_standard(base + color.value % 8)
        if isinstance(color, AnsiValue):
            return self.bg_8bit(color.index)
        if isinstance(color, Rgb24):
            return self.bg_24bit(color.r, color.g, color.b)
        raise TypeError(f"expected a color, got {type(color).__name__}")

    def _underline_code(self, color: ColorSpec) -> str:
        # Standard colors have no underline-color form and yield nothing.
        if isinstance(color, AnsiValue):
            return self.underline_8bit(color.index)
        if isinstance(color, Rgb24):
            return self.underline_24bit(color.r, color.g, color.b)
        return ""