"""Annotated parsing of text that contains ANSI escape codes.

The parser strips CSI sequences from the input and reports what they did:
SGR attributes become spans over ranges of the cleaned text, and every
other recognised escape becomes a point at a position in it. Positions
are indices into the cleaned string.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional, Tuple

from .decoding import parse_csi
from .types import (
    AnsiEscape,
    Background,
    Foreground,
    SgrAttribute,
    Style,
    UnderlineColor,
    sgr_sort_key,
)

# ESC [ followed by anything up to the first final byte (0x40-0x7E). A
# sequence with no final byte runs to the end of the input and is dropped.
_CSI_PATTERN = re.compile(
    r"\x1b\[(?P<params>[^\x40-\x7e]*)(?:(?P<final>[\x40-\x7e])|\Z)"
)

_SGR_TYPES = (Style, Foreground, Background, UnderlineColor)
_COLOR_TYPES = (Foreground, Background, UnderlineColor)


@dataclass(frozen=True)
class AnsiSpan:
    """A range ``[start, end)`` of the cleaned text and the SGR attributes on it."""

    start: int
    end: int
    codes: Tuple[SgrAttribute, ...]


@dataclass(frozen=True)
class AnsiPoint:
    """A non-SGR escape occurring at ``pos`` in the cleaned text."""

    pos: int
    code: AnsiEscape


@dataclass(frozen=True)
class AnsiParseResult:
    """The cleaned text with the spans and points found in the input."""

    text: str
    spans: Tuple[AnsiSpan, ...] = field(default_factory=tuple)
    points: Tuple[AnsiPoint, ...] = field(default_factory=tuple)


class _SpanTracker:
    """Follows the active SGR attributes and records spans as they change."""

    def __init__(self) -> None:
        self.spans: List[AnsiSpan] = []
        self._active: set = set()
        self._emitted: FrozenSet[SgrAttribute] = frozenset()
        self._start: Optional[int] = None

    def _close(self, pos: int) -> None:
        if self._start is not None and self._emitted:
            codes = tuple(sorted(self._emitted, key=sgr_sort_key))
            self.spans.append(AnsiSpan(self._start, pos, codes))
        self._start = None

    def apply(self, attr: SgrAttribute, pos: int) -> None:
        if attr is Style.RESET:
            self._close(pos)
            self._active.clear()
        else:
            if isinstance(attr, _COLOR_TYPES):
                kind = type(attr)
                self._active = {a for a in self._active if type(a) is not kind}
            self._active.add(attr)
        if self._active != self._emitted:
            self._close(pos)
            if self._active:
                self._start = pos
            self._emitted = frozenset(self._active)

    def finish(self, pos: int) -> Tuple[AnsiSpan, ...]:
        self._close(pos)
        return tuple(span for span in self.spans if span.start != span.end)


class AnsiParser:
    """Parses a string containing ANSI escape codes."""

    def __init__(self, text: str) -> None:
        if not isinstance(text, str):
            raise TypeError(f"expected a str, got {type(text).__name__}")
        self.text = text

    def parse_annotated(self) -> AnsiParseResult:
        """Strip escape codes and return the cleaned text with its annotations."""
        pieces: List[str] = []
        points: List[AnsiPoint] = []
        tracker = _SpanTracker()
        out_pos = 0
        last = 0

        for match in _CSI_PATTERN.finditer(self.text):
            plain = self.text[last:match.start()]
            pieces.append(plain)
            out_pos += len(plain)
            last = match.end()

            final = match.group("final")
            if final is None:
                continue
            for escape in parse_csi(match.group("params"), final):
                if isinstance(escape, _SGR_TYPES):
                    tracker.apply(escape, out_pos)
                else:
                    points.append(AnsiPoint(out_pos, escape))

        tail = self.text[last:]
        pieces.append(tail)
        out_pos += len(tail)

        return AnsiParseResult(
            text="".join(pieces),
            spans=tracker.finish(out_pos),
            points=tuple(points),
        )


def parse_ansi_annotated(text: str) -> AnsiParseResult:
    """Parse ``text`` and return the cleaned text with its spans and points."""
    return AnsiParser(text).parse_annotated()