"""Syntax profiles and the per-line highlighter."""

from .highlight import STYLE_TABLE, Highlight, Style, style_for
from .highlighter import highlight_line, is_separator
from .profiles import (
    C_PROFILE,
    PROFILES,
    PYTHON_PROFILE,
    SyntaxProfile,
    select_profile,
)

__all__ = [
    "Highlight",
    "Style",
    "STYLE_TABLE",
    "style_for",
    "highlight_line",
    "is_separator",
    "SyntaxProfile",
    "C_PROFILE",
    "PYTHON_PROFILE",
    "PROFILES",
    "select_profile",
]
