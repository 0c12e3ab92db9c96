"""Pygments colouring for reference values printed in the terminal."""

from __future__ import annotations

from functools import lru_cache

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import CppLexer
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from .config import DEFAULT_STYLE


@lru_cache(maxsize=8)
def _normalize_style(style: str) -> str:
    """Return ``style`` if Pygments knows it, else the default style."""
    try:
        get_style_by_name(style)
    except ClassNotFound:
        return DEFAULT_STYLE
    return style


@lru_cache(maxsize=8)
def _formatter_for_style(style: str) -> TerminalFormatter:
    return TerminalFormatter(style=_normalize_style(style))


_LEXER = CppLexer(stripnl=False, ensurenl=False)


def colorize_value(value: str, style: str = DEFAULT_STYLE) -> str:
    """Highlight a one-line source value as C++, without a trailing newline."""
    if not value:
        return value
    return highlight(value, _LEXER, _formatter_for_style(style)).rstrip("\n")
