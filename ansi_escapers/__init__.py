"""Create ANSI escape codes from typed values and parse text containing them."""

__version__ = "0.2.0"