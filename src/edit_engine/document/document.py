"""Line store that keeps rendered text and highlights in step with raw edits."""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from edit_engine.runtime import telemetry
from edit_engine.syntax import SyntaxProfile, select_profile

from .line import Line

# Cascades longer than this are worth a debug event.
CASCADE_EVENT_THRESHOLD = 64


class Document:
    """Ordered lines plus dirty counter, filename and active syntax profile.

    Index arguments that fall outside the document turn the call into a
    no-op; nothing here raises for bad positions.
    """

    def __init__(
        self,
        lines: Sequence[str] = (),
        *,
        filename: Optional[str] = None,
        profile: Optional[SyntaxProfile] = None,
    ) -> None:
        self._lines: list[Line] = [Line(raw=text) for text in lines]
        self.filename = filename
        self._profile = profile
        self.dirty = 0
        self.rehighlight_all()

    @classmethod
    def from_text(cls, text: str, *, filename: Optional[str] = None) -> "Document":
        parts = text.split("\n")
        if parts and parts[-1] == "":
            parts.pop()
        return cls(
            [part.rstrip("\r") for part in parts],
            filename=filename,
            profile=select_profile(filename),
        )

    def to_text(self) -> str:
        return "".join(f"{line.raw}\n" for line in self._lines)

    @property
    def lines(self) -> Sequence[Line]:
        return tuple(self._lines)

    @property
    def num_lines(self) -> int:
        return len(self._lines)

    @property
    def profile(self) -> Optional[SyntaxProfile]:
        return self._profile

    def line(self, index: int) -> Optional[Line]:
        if 0 <= index < len(self._lines):
            return self._lines[index]
        return None

    def raw_lines(self) -> Tuple[str, ...]:
        return tuple(line.raw for line in self._lines)

    def mark_clean(self) -> None:
        self.dirty = 0

    def set_filename(self, filename: Optional[str]) -> None:
        self.filename = filename
        self.select_profile_for(filename)

    def select_profile_for(self, filename: Optional[str]) -> Optional[SyntaxProfile]:
        """Switch to the profile matching ``filename`` (or none) and return it."""

        self.set_profile(select_profile(filename))
        return self._profile

    def set_profile(self, profile: Optional[SyntaxProfile]) -> None:
        self._profile = profile
        self.rehighlight_all()

    def rehighlight_all(self) -> None:
        open_comment = False
        for line in self._lines:
            line.derive(self._profile, open_comment)
            open_comment = line.open_comment_out

    # -- line level ---------------------------------------------------------

    def insert_line(self, at: int, text: str = "") -> bool:
        if at < 0 or at > len(self._lines):
            return False
        self._lines.insert(at, Line(raw=text))
        self._touch()
        self._refresh(at, 2)
        return True

    def delete_line(self, at: int) -> bool:
        if at < 0 or at >= len(self._lines):
            return False
        del self._lines[at]
        self._touch()
        self._refresh(at, 1)
        return True

    def append_text(self, row: int, text: str) -> bool:
        line = self.line(row)
        if line is None:
            return False
        line.raw += text
        self._touch()
        self._refresh(row, 1)
        return True

    def split_line(self, row: int, col: int) -> Optional[Tuple[int, int]]:
        """Insert a line break at ``(row, col)`` and return the new cursor."""

        if row == len(self._lines):
            self.insert_line(row, "")
            return (row + 1, 0)
        line = self.line(row)
        if line is None:
            return None
        col = min(max(col, 0), line.size)
        if col == 0:
            self.insert_line(row, "")
            return (row + 1, 0)
        remainder = line.raw[col:]
        line.raw = line.raw[:col]
        self._lines.insert(row + 1, Line(raw=remainder))
        self._touch()
        self._refresh(row, 3)
        return (row + 1, 0)

    def join_with_previous(self, row: int) -> Optional[Tuple[int, int]]:
        """Append ``row`` to the line above it; return the join point."""

        if row <= 0 or row >= len(self._lines):
            return None
        join_col = self._lines[row - 1].size
        self.append_text(row - 1, self._lines[row].raw)
        self.delete_line(row)
        return (row - 1, join_col)

    # -- character level ----------------------------------------------------

    def insert_char(self, row: int, col: int, ch: str) -> bool:
        line = self.line(row)
        if line is None:
            return False
        if col < 0 or col > line.size:
            col = line.size
        line.raw = line.raw[:col] + ch + line.raw[col:]
        self._touch()
        self._refresh(row, 1)
        return True

    def delete_char(self, row: int, col: int) -> bool:
        """Delete the character before ``col``."""

        line = self.line(row)
        if line is None or col <= 0 or col > line.size:
            return False
        line.raw = line.raw[: col - 1] + line.raw[col:]
        self._touch()
        self._refresh(row, 1)
        return True

    # -- derivation ---------------------------------------------------------

    def _touch(self) -> None:
        self.dirty += 1

    def _refresh(self, start: int, count: int) -> None:
        """Re-derive ``count`` lines from ``start``, then cascade forward.

        The cascade keeps going only while a line's outgoing block-comment
        state differs from what it was before, so it never revisits a line.
        """

        index = max(start, 0)
        forced_end = index + count
        derived = 0
        while index < len(self._lines):
            incoming = self._lines[index - 1].open_comment_out if index > 0 else False
            changed = self._lines[index].derive(self._profile, incoming)
            derived += 1
            index += 1
            if not changed and index >= forced_end:
                break

        if derived > CASCADE_EVENT_THRESHOLD:
            telemetry.record_event(
                "document.cascade",
                level="debug",
                data={"start": start, "lines": derived},
            )


__all__ = ["Document", "CASCADE_EVENT_THRESHOLD"]
