"""Cursor and last-operation state tied to the active document."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

Cursor = Tuple[int, int]  # (row, column) in raw coordinates


class Operation(Enum):
    NONE = ""
    INSERT = "(INSERT)"
    DELETE = "(DELETE)"
    SAVE = "(SAVE)"

    @property
    def label(self) -> str:
        return self.value


@dataclass(slots=True)
class EditorState:
    """Mutable cursor plus the label of the last edit shown in the status bar."""

    cursor: Cursor = (0, 0)
    last_operation: Operation = Operation.NONE


__all__ = ["Cursor", "Operation", "EditorState"]
