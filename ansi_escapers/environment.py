"""Detection of the ANSI capabilities of the current terminal."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from typing import Mapping, Optional, TextIO


def _is_tty(stream: object) -> bool:
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except (ValueError, OSError):
        return False


@dataclass(frozen=True)
class AnsiEnvironment:
    """The ANSI capabilities of a terminal."""

    supports_ansi: bool = False
    supports_truecolor: bool = False
    supports_8bit_color: bool = False

    @classmethod
    def detect(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        stream: Optional[TextIO] = None,
        platform: Optional[str] = None,
    ) -> "AnsiEnvironment":
        """Inspect the environment, output stream and platform.

        Each argument defaults to the live process value: ``os.environ``,
        ``sys.stdout`` and ``sys.platform``.
        """
        env = os.environ if environ is None else environ
        out = sys.stdout if stream is None else stream
        plat = sys.platform if platform is None else platform
        is_tty = _is_tty(out)

        if plat.startswith("win"):
            term = env.get("TERM")
            supports_ansi = is_tty
            supports_truecolor = (
                "WT_SESSION" in env
                or env.get("TERM_PROGRAM") == "vscode"
                or (term is not None and ("xterm" in term or "truecolor" in term))
            )
            return cls(supports_ansi, supports_truecolor, supports_ansi)

        term = env.get("TERM", "")
        colorterm = env.get("COLORTERM", "")
        supports_ansi = is_tty and term not in ("", "dumb")
        supports_truecolor = (
            colorterm in ("truecolor", "24bit")
            or "truecolor" in term
            or "24bit" in term
        )
        supports_8bit = "256color" in term or supports_truecolor
        return cls(supports_ansi, supports_truecolor, supports_8bit)