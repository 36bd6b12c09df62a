# ansi_escapers

This library works in both directions with ANSI escape sequences:

- It builds escape sequences from typed values.
- It parses text that contains escape sequences. The result is the clean text, the styled spans and the positioned events.

## Install

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Typed values

`ansi_escapers.types` holds immutable, validated values for every supported code.

- **Plain styles:** `Style`, covering `RESET`, `BOLD`, `FAINT`, `ITALIC`, `UNDERLINE`, `BLINK_SLOW`, `BLINK_RAPID`, `REVERSE`, `CONCEAL` and `CROSSED_OUT`.
- **Colours:**
  - `Color`, the sixteen standard colours.
  - `AnsiValue(index)`, an 8-bit palette colour.
  - `Rgb24(r, g, b)`, a 24-bit colour.
- **Colour attributes:** `Foreground`, `Background` and `UnderlineColor`, each of which wraps a colour.
- **Cursor:** `CursorMove(direction, n)` together with `CursorDirection`, and `CursorPosition(row, col)`.
- **Erasing:** `Erase(target, mode)` together with `EraseTarget` (`DISPLAY`, `LINE`) and `EraseMode` (`TO_END`, `TO_START`, `ALL`).
- **Device control:** `DeviceControl`, covering save and restore of the cursor position and hiding and showing the cursor.

Values are checked when they are built:

- A palette index or colour component outside 0–255 raises `ValueError`.
- A cursor count, row or column outside 0–65535 raises `ValueError`.
- A value of the wrong type raises `TypeError`.

`sgr_sort_key` gives SGR attributes a fixed order. The order is styles first, then foreground, background and underline colours.

## Producing escape codes

`AnsiCreator` turns typed values into escape strings. You can pass it an `AnsiEnvironment`. If you don't, it calls `AnsiEnvironment.detect()`. That method reads `TERM`, `COLORTERM`, `TERM_PROGRAM` and `WT_SESSION`, checks whether stdout is a tty, and records three things:

- whether the terminal supports ANSI;
- whether it supports 256 colours;
- whether it supports truecolor.

The environment is kept on `creator.env` for you to consult. The codes produced do not depend on it.

```python
from ansi_escapers.creator import AnsiCreator
from ansi_escapers.environment import AnsiEnvironment
from ansi_escapers.types import (
    Color, Style, Foreground, AnsiValue,
    CursorMove, CursorDirection, CursorPosition,
    Erase, EraseTarget, EraseMode, DeviceControl,
)

creator = AnsiCreator(AnsiEnvironment.detect())

creator.format_text("Hello", [Style.BOLD, Foreground(Color.RED)])
# '\x1b[1m\x1b[31mHello\x1b[0m'

creator.fg_8bit(123)             # '\x1b[38;5;123m'
creator.bg_24bit(10, 20, 30)     # '\x1b[48;2;10;20;30m'
creator.underline_24bit(1, 2, 3) # '\x1b[58;2;1;2;3m'

creator.cursor_code(CursorMove(CursorDirection.UP, 3))  # '\x1b[3A'
creator.cursor_code(CursorPosition(row=3, col=4))       # '\x1b[3;4H'
creator.erase_code(Erase(EraseTarget.DISPLAY, EraseMode.ALL))  # '\x1b[2J'
creator.device_code(DeviceControl.HIDE_CURSOR)          # '\x1b[?25l'
```

`escape_code` accepts any of these values and dispatches to the right method. An `UnderlineColor` with a standard `Color` has no escape form, and it produces an empty string.

## Parsing text

`parse_ansi_annotated` in `ansi_escapers.interpreter` strips CSI sequences (`ESC [` … final byte) from a string. You can also call `AnsiParser(text).parse_annotated()` directly. The result is an `AnsiParseResult` with three parts:

- `text` is the cleaned text.
- `spans` is a tuple of `AnsiSpan(start, end, codes)`. Each span gives the SGR attributes active over the range `[start, end)`. A new colour of the same kind replaces the previous one, and `Style.RESET` clears them all. Empty ranges are left out.
- `points` is a tuple of `AnsiPoint(pos, code)` for non-SGR codes: cursor moves, erases and device controls.

```python
from ansi_escapers.interpreter import parse_ansi_annotated

result = parse_ansi_annotated("A\x1b[31mB\x1b[0mC\x1b[2J")
result.text    # 'ABC'
result.spans   # (AnsiSpan(start=1, end=2, codes=(Foreground(color=Color.RED),)),)
result.points  # (AnsiPoint(pos=3, code=Erase(...DISPLAY, ...ALL)),)
```

Positions are character indices into the cleaned string.

Sequences that are not understood are handled this way:

- Unknown sequences, and unknown or incomplete SGR parameters, are dropped silently.
- A sequence with no final byte removes everything from the escape character to the end of the input.

The lower-level decoders live in `ansi_escapers.decoding`: `parse_sgr`, `parse_cursor`, `parse_erase`, `parse_device` and `parse_csi`. Each takes the parameter text and the final byte.

## Limits

The parser recognises only CSI sequences. Other escapes, such as OSC titles or hyperlinks, stay in the cleaned text as they are. The package does not write to the terminal or emulate a screen. It only builds and reads escape strings.