"""Exception types surfaced by the engine."""

from __future__ import annotations


class EditEngineError(RuntimeError):
    """Base class for engine errors."""


class DocumentIOError(EditEngineError):
    """Raised when a document cannot be read from or written to disk."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class TerminalGeometryError(EditEngineError):
    """Raised when the host cannot supply a usable screen size."""

    def __init__(self, rows: int, cols: int) -> None:
        super().__init__(f"Unusable terminal geometry {rows}x{cols}")
        self.rows = rows
        self.cols = cols


__all__ = ["EditEngineError", "DocumentIOError", "TerminalGeometryError"]
