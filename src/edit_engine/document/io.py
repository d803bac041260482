"""Plain-text persistence for documents."""

from __future__ import annotations

from pathlib import Path
from typing import Union

from edit_engine.errors import DocumentIOError
from edit_engine.runtime import telemetry

from .document import Document

PathLike = Union[str, Path]

ENCODING = "utf-8"
# Undecodable bytes survive a load/save round trip.
ERRORS = "surrogateescape"


def load_document(path: PathLike, *, missing_ok: bool = False) -> Document:
    """Read ``path`` into a new Document bound to that filename.

    With ``missing_ok`` a file that does not exist yet yields an empty
    document, so the first save creates it.
    """

    name = str(path)
    with telemetry.span("document::load", component="io", metadata={"path": name}):
        try:
            with open(name, encoding=ENCODING, errors=ERRORS, newline="") as handle:
                text = handle.read()
        except FileNotFoundError as exc:
            if missing_ok:
                return Document.from_text("", filename=name)
            raise DocumentIOError(name, exc.strerror or "not found") from exc
        except OSError as exc:
            raise DocumentIOError(name, exc.strerror or str(exc)) from exc
    return Document.from_text(text, filename=name)


def save_document(document: Document, path: PathLike | None = None) -> int:
    """Write ``document`` to ``path`` (default: its filename); return bytes written."""

    target = str(path) if path is not None else document.filename
    if not target:
        raise DocumentIOError("", "no filename")
    payload = document.to_text().encode(ENCODING, ERRORS)
    with telemetry.span("document::save", component="io", metadata={"path": target}):
        try:
            with open(target, "wb") as handle:
                handle.write(payload)
        except OSError as exc:
            raise DocumentIOError(target, exc.strerror or str(exc)) from exc
    document.mark_clean()
    return len(payload)


__all__ = ["load_document", "save_document"]
