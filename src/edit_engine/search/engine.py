"""Incremental, cyclic, bidirectional literal search."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from edit_engine.document import Document, rendered_column_to_raw
from edit_engine.runtime import telemetry
from edit_engine.syntax import Highlight

END_KEYS = frozenset({"ENTER", "ESC"})
FORWARD_KEYS = frozenset({"RIGHT", "DOWN"})
BACKWARD_KEYS = frozenset({"LEFT", "UP"})


@dataclass(frozen=True, slots=True)
class SearchMatch:
    row: int
    col: int
    rendered_col: int
    length: int


class SearchEngine:
    """Finds the query line by line and paints the hit as ``SEARCH_MATCH``.

    Only one line carries the match overlay at a time; its original
    highlight is kept aside and put back before the next step.
    """

    def __init__(self) -> None:
        self.last_match: Optional[int] = None
        self.direction = 1
        self._saved: Optional[Tuple[int, List[Highlight]]] = None

    @property
    def active_overlay(self) -> Optional[int]:
        return self._saved[0] if self._saved else None

    def reset(self, document: Document) -> None:
        self._restore(document)
        self.last_match = None
        self.direction = 1

    def feed(self, document: Document, query: str, key: str) -> Optional[SearchMatch]:
        """Advance the search after ``key`` was pressed with ``query`` typed."""

        self._restore(document)

        if key in END_KEYS:
            self.last_match = None
            self.direction = 1
            return None
        if key in FORWARD_KEYS:
            self.direction = 1
        elif key in BACKWARD_KEYS:
            self.direction = -1
        else:
            self.last_match = None
            self.direction = 1

        if self.last_match is None:
            self.direction = 1
        if not query:
            return None

        total = document.num_lines
        current = self.last_match if self.last_match is not None else -1
        for _ in range(total):
            current += self.direction
            if current < 0:
                current = total - 1
            elif current >= total:
                current = 0

            line = document.line(current)
            if line is None:
                continue
            start = line.rendered.find(query)
            if start == -1:
                continue

            self.last_match = current
            self._saved = (current, list(line.highlight))
            end = start + len(query)
            line.highlight[start:end] = [Highlight.SEARCH_MATCH] * len(query)
            telemetry.record_event(
                "search.match",
                level="debug",
                data={"row": current, "col": start, "direction": self.direction},
            )
            return SearchMatch(
                row=current,
                col=rendered_column_to_raw(line.raw, start),
                rendered_col=start,
                length=len(query),
            )
        return None

    def _restore(self, document: Document) -> None:
        if self._saved is None:
            return
        row, highlight = self._saved
        self._saved = None
        line = document.line(row)
        if line is not None and len(line.highlight) == len(highlight):
            line.highlight[:] = highlight


__all__ = ["SearchEngine", "SearchMatch"]
