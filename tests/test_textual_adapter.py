from __future__ import annotations

from typing import List

from edit_engine.adapters.textual import (
    TextualEditorAdapter,
    TextualUIHooks,
    normalize_textual_key,
)
from edit_engine.adapters.textual.app import render_frame
from edit_engine.document import Document
from edit_engine.modes import KeyInput
from edit_engine.session import EditorSession
from edit_engine.view import Frame


def make_adapter(session: EditorSession):
    frames: List[Frame] = []
    events: List[tuple[str, object | None]] = []
    hooks = TextualUIHooks(
        paint=frames.append,
        handle_event=lambda name, payload: events.append((name, payload)),
    )
    return TextualEditorAdapter(session, hooks), frames, events


def test_normalize_textual_keys() -> None:
    assert normalize_textual_key("pageup") == KeyInput(key="PAGE_UP")
    assert normalize_textual_key("escape") == KeyInput(key="ESC")
    assert normalize_textual_key("tab", "\t") == KeyInput(key="TAB", text="\t")
    assert normalize_textual_key("ctrl+s") == KeyInput.ctrl("s")
    assert normalize_textual_key("a", "a") == KeyInput.char("a")
    assert normalize_textual_key("f5") is None
    assert normalize_textual_key("ctrl+up") is None


def test_adapter_paints_after_each_key() -> None:
    session = EditorSession()
    adapter, frames, _ = make_adapter(session)

    assert len(frames) == 1
    adapter.handle_textual_key("h", "h")
    adapter.handle_textual_key("i", "i")

    assert len(frames) == 3
    assert frames[-1].lines[0].text == "hi"
    assert frames[-1].cursor == (0, 2)


def test_adapter_ignores_unknown_keys() -> None:
    session = EditorSession()
    adapter, frames, _ = make_adapter(session)

    assert adapter.handle_textual_key("f12") is None
    assert len(frames) == 1


def test_adapter_relays_quit_event() -> None:
    session = EditorSession()
    adapter, _, events = make_adapter(session)

    adapter.handle_textual_key("ctrl+q")

    assert adapter.should_quit is True
    assert events == [("session.quit", None)]


def test_adapter_resize_repaints() -> None:
    session = EditorSession(Document(["abc"]))
    adapter, frames, _ = make_adapter(session)

    adapter.resize(5, 30)

    assert frames[-1].width == 30
    assert len(frames[-1].lines) == 5


def test_render_frame_layout() -> None:
    session = EditorSession(Document(["int x;"], filename="a.c"), screen_rows=4)
    frame = session.frame()

    text = render_frame(frame)
    rows = text.plain.split("\n")

    assert rows[0] == frame.top_bar
    assert rows[1] == "int x;"
    assert rows[2:5] == ["~", "~", "~"]
    assert rows[5] == frame.status_bar
    assert rows[6] == frame.message
