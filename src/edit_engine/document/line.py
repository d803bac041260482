"""Single editable line with its derived render and highlight forms."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from edit_engine.syntax import Highlight, SyntaxProfile, highlight_line

from .render import to_rendered


@dataclass(slots=True)
class Line:
    raw: str = ""
    rendered: str = ""
    highlight: List[Highlight] = field(default_factory=list)
    open_comment_out: bool = False

    @property
    def size(self) -> int:
        return len(self.raw)

    def derive(self, profile: Optional[SyntaxProfile], open_comment_in: bool) -> bool:
        """Recompute render and highlight; report whether the outgoing state changed."""

        self.rendered = to_rendered(self.raw)
        self.highlight, open_out = highlight_line(
            self.rendered, profile, open_comment_in
        )
        changed = open_out != self.open_comment_out
        self.open_comment_out = open_out
        return changed


__all__ = ["Line"]
