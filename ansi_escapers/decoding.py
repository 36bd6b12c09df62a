"""Decoding of CSI escape sequences into escape values.

Each function takes the parameter text found between ``ESC [`` and the
final byte of a sequence, and the final byte itself as a one-character
string.
"""

from __future__ import annotations

import re
from typing import Iterator, List, Optional, Union

from .types import (
    AnsiEscape,
    AnsiValue,
    Background,
    Color,
    CursorDirection,
    CursorMove,
    CursorPosition,
    DeviceControl,
    Erase,
    EraseMode,
    EraseTarget,
    Foreground,
    Rgb24,
    SgrAttribute,
    Style,
    UnderlineColor,
)

_UNSIGNED = re.compile(r"\+?[0-9]+")

_STYLES = {str(style.value): style for style in Style}

_STANDARD_COLORS = {}
for _color in Color:
    _offset = _color.value % 8
    _fg_base, _bg_base = (90, 100) if _color.is_bright else (30, 40)
    _STANDARD_COLORS[str(_fg_base + _offset)] = Foreground(_color)
    _STANDARD_COLORS[str(_bg_base + _offset)] = Background(_color)
del _color, _offset, _fg_base, _bg_base

_COLOR_TARGETS = {"38": Foreground, "48": Background, "58": UnderlineColor}

_CURSOR_DIRECTIONS = {direction.value: direction for direction in CursorDirection}
_ERASE_TARGETS = {target.value: target for target in EraseTarget}

_ERASE_MODES = {
    "": EraseMode.TO_END,
    "0": EraseMode.TO_END,
    "1": EraseMode.TO_START,
    "2": EraseMode.ALL,
}

_DEVICE_CODES = {
    ("", "s"): DeviceControl.SAVE_CURSOR,
    ("", "u"): DeviceControl.RESTORE_CURSOR,
    ("?25l", "l"): DeviceControl.HIDE_CURSOR,
    ("?25h", "h"): DeviceControl.SHOW_CURSOR,
    ("?25", "l"): DeviceControl.HIDE_CURSOR,
    ("?25", "h"): DeviceControl.SHOW_CURSOR,
}


def _parse_unsigned(text: Optional[str], limit: int) -> Optional[int]:
    """Parse an unsigned decimal no greater than ``limit``, or return None."""
    if text is None or not _UNSIGNED.fullmatch(text):
        return None
    value = int(text)
    return value if value <= limit else None


def _check_final(final_byte: str) -> str:
    if not isinstance(final_byte, str) or len(final_byte) != 1:
        raise ValueError(f"final byte must be a single character, got {final_byte!r}")
    return final_byte


def _extended_color(kind: Optional[str], params: Iterator[str]):
    if kind == "5":
        idx = _parse_unsigned(next(params, None), 0xFF)
        return None if idx is None else AnsiValue(idx)
    if kind == "2":
        r, g, b = (_parse_unsigned(next(params, None), 0xFF) for _ in range(3))
        if r is None or g is None or b is None:
            return None
        return Rgb24(r, g, b)
    return None


def parse_sgr(params: str) -> List[SgrAttribute]:
    """Decode the parameters of an SGR sequence such as ``"1;31"``.

    Unknown or incomplete parameters are skipped.
    """
    result: List[SgrAttribute] = []
    items = iter([part for part in params.split(";") if part])
    for param in items:
        if param in _STYLES:
            result.append(_STYLES[param])
        elif param in _STANDARD_COLORS:
            result.append(_STANDARD_COLORS[param])
        elif param in _COLOR_TARGETS:
            color = _extended_color(next(items, None), items)
            if color is not None:
                result.append(_COLOR_TARGETS[param](color))
    return result


def parse_cursor(
    params: str, final_byte: str
) -> Optional[Union[CursorMove, CursorPosition]]:
    """Decode a cursor movement, or return None if the final byte is not one."""
    final_byte = _check_final(final_byte)
    direction = _CURSOR_DIRECTIONS.get(final_byte)
    if direction is not None:
        n = _parse_unsigned(params, 0xFFFF)
        return CursorMove(direction, 1 if n is None else n)
    if final_byte in ("H", "f"):
        parts = iter(params.split(";"))
        row = _parse_unsigned(next(parts, None), 0xFFFF)
        col = _parse_unsigned(next(parts, None), 0xFFFF)
        return CursorPosition(1 if row is None else row, 1 if col is None else col)
    return None


def parse_erase(params: str, final_byte: str) -> Optional[Erase]:
    """Decode an erase of the display or line, or return None."""
    final_byte = _check_final(final_byte)
    mode = _ERASE_MODES.get(params)
    if mode is None:
        return None
    target = _ERASE_TARGETS.get(final_byte)
    if target is None:
        return None
    return Erase(target, mode)


def parse_device(params: str, final_byte: str) -> Optional[DeviceControl]:
    """Decode a cursor save/restore or visibility command, or return None."""
    final_byte = _check_final(final_byte)
    return _DEVICE_CODES.get((params, final_byte))


def parse_csi(params: str, final_byte: str) -> List[AnsiEscape]:
    """Decode a complete CSI sequence into the escapes it carries.

    Unrecognised sequences yield an empty list.
    """
    final_byte = _check_final(final_byte)
    if final_byte == "m":
        return list(parse_sgr(params))
    for decode in (parse_cursor, parse_erase, parse_device):
        escape = decode(params, final_byte)
        if escape is not None:
            return [escape]
    return []