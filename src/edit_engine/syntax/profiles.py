"""Static table of language profiles selected by filename."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

HL_HIGHLIGHT_NUMBERS = 1 << 0
HL_HIGHLIGHT_STRINGS = 1 << 1


@dataclass(frozen=True, slots=True)
class SyntaxProfile:
    """Keyword tiers, comment delimiters and feature flags for one language.

    An empty delimiter means the language has no such comment form.
    """

    name: str
    filematch: tuple[str, ...]
    keywords: tuple[str, ...]
    types: tuple[str, ...] = ()
    line_comment: str = ""
    block_comment_start: str = ""
    block_comment_end: str = ""
    flags: int = 0

    @property
    def highlights_numbers(self) -> bool:
        return bool(self.flags & HL_HIGHLIGHT_NUMBERS)

    @property
    def highlights_strings(self) -> bool:
        return bool(self.flags & HL_HIGHLIGHT_STRINGS)

    @property
    def has_block_comments(self) -> bool:
        return bool(self.block_comment_start and self.block_comment_end)

    def matches(self, filename: str) -> bool:
        for pattern in self.filematch:
            if pattern.startswith("."):
                if filename.endswith(pattern):
                    return True
            elif pattern in filename:
                return True
        return False


C_PROFILE = SyntaxProfile(
    name="c",
    filematch=(".c", ".h", ".cpp", ".hpp", ".cc"),
    keywords=(
        "auto", "break", "case", "continue", "default", "do", "else", "enum",
        "extern", "for", "goto", "if", "register", "return", "sizeof",
        "static", "struct", "switch", "typedef", "union", "volatile", "while",
        "NULL",
        # C++
        "alignas", "alignof", "asm", "class", "constexpr", "const_cast",
        "decltype", "delete", "dynamic_cast", "explicit", "export", "false",
        "friend", "inline", "mutable", "namespace", "new", "noexcept",
        "nullptr", "operator", "private", "protected", "public",
        "reinterpret_cast", "static_assert", "static_cast", "template",
        "this", "thread_local", "throw", "true", "try", "typeid", "typename",
        "virtual",
    ),
    types=(
        "int", "long", "double", "float", "char", "unsigned", "signed",
        "void", "short", "const", "bool", "size_t",
    ),
    line_comment="//",
    block_comment_start="/*",
    block_comment_end="*/",
    flags=HL_HIGHLIGHT_NUMBERS | HL_HIGHLIGHT_STRINGS,
)

PYTHON_PROFILE = SyntaxProfile(
    name="python",
    filematch=(".py", ".pyw"),
    keywords=(
        "and", "as", "assert", "async", "await", "break", "class", "continue",
        "def", "del", "elif", "else", "except", "finally", "for", "from",
        "global", "if", "import", "in", "is", "lambda", "nonlocal", "not",
        "or", "pass", "raise", "return", "try", "while", "with", "yield",
        "None", "True", "False",
    ),
    types=(
        "int", "float", "str", "bytes", "bool", "list", "dict", "set",
        "tuple", "object", "type",
    ),
    line_comment="#",
    flags=HL_HIGHLIGHT_NUMBERS | HL_HIGHLIGHT_STRINGS,
)

PROFILES: tuple[SyntaxProfile, ...] = (C_PROFILE, PYTHON_PROFILE)


def select_profile(filename: Optional[str]) -> Optional[SyntaxProfile]:
    """Return the first profile whose patterns match ``filename``."""

    if not filename:
        return None
    for profile in PROFILES:
        if profile.matches(filename):
            return profile
    return None


__all__ = [
    "HL_HIGHLIGHT_NUMBERS",
    "HL_HIGHLIGHT_STRINGS",
    "SyntaxProfile",
    "C_PROFILE",
    "PYTHON_PROFILE",
    "PROFILES",
    "select_profile",
]
