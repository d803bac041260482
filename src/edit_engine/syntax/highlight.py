"""Highlight classes and their display styles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


class Highlight(Enum):
    """Classification assigned to every rendered character."""

    NORMAL = "normal"
    NUMBER = "number"
    STRING = "string"
    LINE_COMMENT = "line_comment"
    BLOCK_COMMENT = "block_comment"
    KEYWORD_PRIMARY = "keyword_primary"
    KEYWORD_SECONDARY = "keyword_secondary"
    IDENTIFIER = "identifier"
    SEARCH_MATCH = "search_match"


@dataclass(frozen=True, slots=True)
class Style:
    """Terminal-agnostic display attribute for a highlight class."""

    foreground: Optional[str] = None
    bold: bool = False


STYLE_TABLE: Mapping[Highlight, Style] = MappingProxyType(
    {
        Highlight.NORMAL: Style(),
        Highlight.NUMBER: Style("red"),
        Highlight.STRING: Style("magenta"),
        Highlight.LINE_COMMENT: Style("cyan"),
        Highlight.BLOCK_COMMENT: Style("cyan"),
        Highlight.KEYWORD_PRIMARY: Style("yellow"),
        Highlight.KEYWORD_SECONDARY: Style("green"),
        Highlight.IDENTIFIER: Style(),
        Highlight.SEARCH_MATCH: Style("blue", bold=True),
    }
)


def style_for(tag: Highlight) -> Style:
    return STYLE_TABLE[tag]


__all__ = ["Highlight", "Style", "STYLE_TABLE", "style_for"]
