"""Single-pass syntax classifier for one rendered line."""

from __future__ import annotations

from functools import lru_cache
from typing import List, Optional, Tuple

from .highlight import Highlight
from .profiles import SyntaxProfile

SEPARATORS = ",.()+-/*=~%<>[];"


def is_separator(ch: str) -> bool:
    return not ch or ch == "\0" or ch.isspace() or ch in SEPARATORS


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


@lru_cache(maxsize=None)
def _keyword_table(profile: SyntaxProfile) -> Tuple[Tuple[str, Highlight], ...]:
    entries = [(word, Highlight.KEYWORD_PRIMARY) for word in profile.keywords]
    entries += [(word, Highlight.KEYWORD_SECONDARY) for word in profile.types]
    # Longest first so "constexpr" wins over "const".
    entries.sort(key=lambda entry: -len(entry[0]))
    return tuple(entries)


def _match_keyword(
    text: str, start: int, table: Tuple[Tuple[str, Highlight], ...]
) -> Optional[Tuple[str, Highlight]]:
    for word, tag in table:
        if not text.startswith(word, start):
            continue
        end = start + len(word)
        if is_separator(text[end] if end < len(text) else ""):
            return word, tag
    return None


def highlight_line(
    rendered: str,
    profile: Optional[SyntaxProfile],
    open_comment_in: bool = False,
) -> Tuple[List[Highlight], bool]:
    """Classify ``rendered`` and return ``(highlight, open_comment_out)``.

    ``open_comment_in`` says whether the previous line ended inside a block
    comment. The result has exactly one entry per rendered character and
    depends only on the three arguments.
    """

    size = len(rendered)
    hl = [Highlight.NORMAL] * size
    if profile is None:
        return hl, False

    table = _keyword_table(profile)
    line_comment = profile.line_comment
    if profile.has_block_comments:
        block_start = profile.block_comment_start
        block_end = profile.block_comment_end
    else:
        block_start = block_end = ""

    prev_sep = True
    in_string = ""
    in_comment = open_comment_in and bool(block_start)

    i = 0
    while i < size:
        ch = rendered[i]
        prev_hl = hl[i - 1] if i > 0 else Highlight.NORMAL

        if (
            line_comment
            and not in_string
            and not in_comment
            and rendered.startswith(line_comment, i)
        ):
            hl[i:] = [Highlight.LINE_COMMENT] * (size - i)
            break

        if in_comment:
            if rendered.startswith(block_end, i):
                end = i + len(block_end)
                hl[i:end] = [Highlight.BLOCK_COMMENT] * len(block_end)
                i = end
                in_comment = False
                prev_sep = True
                continue
            hl[i] = Highlight.BLOCK_COMMENT
            i += 1
            continue

        if block_start and not in_string and rendered.startswith(block_start, i):
            end = i + len(block_start)
            hl[i:end] = [Highlight.BLOCK_COMMENT] * len(block_start)
            i = end
            in_comment = True
            prev_sep = False
            continue

        if profile.highlights_strings:
            if in_string:
                hl[i] = Highlight.STRING
                if ch == "\\" and i + 1 < size:
                    hl[i + 1] = Highlight.STRING
                    i += 2
                    prev_sep = True
                    continue
                if ch == in_string:
                    in_string = ""
                i += 1
                prev_sep = True
                continue
            if ch in ('"', "'"):
                in_string = ch
                hl[i] = Highlight.STRING
                i += 1
                prev_sep = False
                continue

        if profile.highlights_numbers and (
            (_is_digit(ch) and (prev_sep or prev_hl is Highlight.NUMBER))
            or (ch == "." and prev_hl is Highlight.NUMBER)
        ):
            hl[i] = Highlight.NUMBER
            i += 1
            prev_sep = False
            continue

        if prev_sep:
            keyword = _match_keyword(rendered, i, table)
            if keyword is not None:
                word, tag = keyword
                hl[i : i + len(word)] = [tag] * len(word)
                i += len(word)
                prev_sep = False
                continue

        if ch.isalnum() or ch == "_":
            hl[i] = Highlight.IDENTIFIER
        prev_sep = is_separator(ch)
        i += 1

    return hl, in_comment


__all__ = ["SEPARATORS", "is_separator", "highlight_line"]
