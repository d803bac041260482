from __future__ import annotations

from typing import List

from edit_engine.document import Document, Operation
from edit_engine.modes import KeyInput
from edit_engine.runtime import EditorSettings
from edit_engine.session import EditorSession
from edit_engine.syntax import Highlight


def make_session(*lines: str, filename: str | None = None, rows: int = 10) -> EditorSession:
    document = Document(lines, filename=filename)
    return EditorSession(
        document, settings=EditorSettings(), screen_rows=rows, clock=lambda: 100.0
    )


def press(session: EditorSession, *keys: str) -> None:
    for key in keys:
        session.handle_key(KeyInput(key=key))


def ctrl(session: EditorSession, letter: str):
    return session.handle_key(KeyInput.ctrl(letter))


def type_text(session: EditorSession, text: str) -> None:
    for ch in text:
        session.handle_key(KeyInput.char(ch))


def mode_name(session: EditorSession) -> str:
    return session.modes.active_mode.name


def test_help_is_the_initial_status() -> None:
    session = make_session()

    assert session.frame().message == session.settings.help_message


def test_typing_on_empty_document_appends_line() -> None:
    session = make_session()

    type_text(session, "hi")

    assert session.document.raw_lines() == ("hi",)
    assert session.cursor == (0, 2)
    assert session.state.last_operation is Operation.INSERT
    assert session.document.dirty
    assert "(INSERT)" in session.frame().status_bar


def test_enter_and_backspace_join() -> None:
    session = make_session()
    type_text(session, "hi")

    press(session, "ENTER")
    assert session.document.raw_lines() == ("hi", "")
    assert session.cursor == (1, 0)

    press(session, "BACKSPACE")
    assert session.document.raw_lines() == ("hi",)
    assert session.cursor == (0, 2)
    assert session.state.last_operation is Operation.DELETE


def test_backspace_at_document_start_is_noop() -> None:
    session = make_session("abc")

    ctrl(session, "h")

    assert session.document.raw_lines() == ("abc",)
    assert session.document.dirty == 0


def test_delete_forward() -> None:
    session = make_session("abc")
    press(session, "DELETE")
    assert session.document.raw_lines() == ("bc",)
    assert session.cursor == (0, 0)

    session = make_session("ab", "cd")
    session.cursor = (0, 2)
    press(session, "DELETE")
    assert session.document.raw_lines() == ("abcd",)
    assert session.cursor == (0, 2)


def test_tab_inserts_tab_character() -> None:
    session = make_session("x")

    session.handle_key(KeyInput(key="TAB", text="\t"))

    assert session.document.raw_lines() == ("\tx",)
    assert session.frame().cursor == (0, 8)


def test_horizontal_motion_wraps_lines() -> None:
    session = make_session("ab", "cd")
    session.cursor = (1, 0)

    press(session, "LEFT")
    assert session.cursor == (0, 2)

    press(session, "RIGHT")
    assert session.cursor == (1, 0)

    press(session, "END")
    assert session.cursor == (1, 2)
    press(session, "HOME")
    assert session.cursor == (1, 0)


def test_vertical_motion_clamps_column() -> None:
    session = make_session("abcdef", "x")
    session.cursor = (0, 5)

    press(session, "DOWN")
    assert session.cursor == (1, 1)

    press(session, "DOWN", "DOWN")
    assert session.cursor == (2, 0)

    session.cursor = (0, 0)
    press(session, "UP")
    assert session.cursor == (0, 0)


def test_page_down_and_up() -> None:
    session = make_session(*[str(n) for n in range(100)])

    press(session, "PAGE_DOWN")
    assert session.cursor == (19, 0)

    press(session, "PAGE_UP")
    assert session.cursor == (0, 0)


def test_quit_needs_confirmation_when_dirty() -> None:
    session = make_session()
    quits: List[object] = []
    session.bus.subscribe("session.quit", quits.append)
    type_text(session, "x")

    statuses = [ctrl(session, "q").status for _ in range(3)]

    assert statuses == ["quit_pending"] * 3
    assert session.should_quit is False
    assert "1 more times" in session.frame().message

    ctrl(session, "q")
    assert session.should_quit is True
    assert quits == [None]


def test_other_key_resets_quit_confirmation() -> None:
    session = make_session()
    type_text(session, "x")
    ctrl(session, "q")
    ctrl(session, "q")

    press(session, "LEFT")

    for _ in range(3):
        ctrl(session, "q")
    assert session.should_quit is False


def test_clean_document_quits_immediately() -> None:
    session = make_session("abc")

    result = ctrl(session, "x")

    assert result.status == "quit"
    assert session.should_quit is True


def test_save_with_filename(tmp_path) -> None:
    path = tmp_path / "a.txt"
    session = make_session("abc", filename=str(path))
    saved: List[object] = []
    session.bus.subscribe("file.save", saved.append)
    type_text(session, "x")

    ctrl(session, "s")

    assert path.read_text() == "xabc\n"
    assert session.document.dirty == 0
    assert session.frame().message == "5 bytes written to disk"
    assert session.state.last_operation is Operation.SAVE
    assert saved == [{"path": str(path), "bytes": 5}]


def test_save_as_prompt(tmp_path) -> None:
    path = tmp_path / "new.c"
    session = make_session("int x;")

    ctrl(session, "s")
    assert mode_name(session) == "prompt"
    assert session.frame().message.startswith("Save as: ")

    type_text(session, str(path))
    press(session, "ENTER")

    assert mode_name(session) == "edit"
    assert path.read_text() == "int x;\n"
    assert session.document.filename == str(path)
    assert session.document.line(0).highlight[0] is Highlight.KEYWORD_SECONDARY


def test_save_as_cancelled() -> None:
    session = make_session("abc")

    ctrl(session, "s")
    press(session, "ESC")

    assert mode_name(session) == "edit"
    assert session.document.filename is None
    assert session.frame().message == "Save aborted"


def test_save_failure_keeps_document_dirty(tmp_path) -> None:
    session = make_session("abc", filename=str(tmp_path / "missing" / "a.txt"))
    type_text(session, "x")

    ctrl(session, "s")

    assert session.frame().message.startswith("Can't save! I/O error:")
    assert session.document.dirty


def test_open_prompt_replaces_document(tmp_path) -> None:
    path = tmp_path / "other.txt"
    path.write_text("one\ntwo\n")
    session = make_session("abc")
    session.cursor = (0, 2)

    ctrl(session, "o")
    type_text(session, str(path))
    press(session, "ENTER")

    assert session.document.raw_lines() == ("one", "two")
    assert session.cursor == (0, 0)
    assert session.status.text == f"Opened {path}"


def test_open_needs_confirmation_when_dirty(tmp_path) -> None:
    session = make_session()
    type_text(session, "x")

    assert ctrl(session, "o").status == "open_pending"
    assert mode_name(session) == "edit"

    ctrl(session, "o")
    assert mode_name(session) == "prompt"


def test_open_missing_file_keeps_document(tmp_path) -> None:
    missing = tmp_path / "nope.txt"
    session = make_session("abc")

    ctrl(session, "o")
    type_text(session, str(missing))
    press(session, "ENTER")

    assert session.document.raw_lines() == ("abc",)
    assert session.status.text.startswith(f"Can't open {missing}:")
    frame = session.frame()
    assert frame.message == session.status.text[: frame.width]


def test_find_moves_to_match_and_escape_restores() -> None:
    session = make_session("foo", "bar", "foo")
    session.cursor = (1, 1)

    ctrl(session, "f")
    type_text(session, "foo")
    assert session.cursor == (0, 0)

    press(session, "RIGHT")
    assert session.cursor == (2, 0)
    assert session.document.line(2).highlight == [Highlight.SEARCH_MATCH] * 3

    press(session, "ESC")
    assert mode_name(session) == "edit"
    assert session.cursor == (1, 1)
    assert session.viewport.snapshot() == (0, 0)
    assert session.document.line(2).highlight != [Highlight.SEARCH_MATCH] * 3


def test_find_enter_keeps_match_position() -> None:
    session = make_session(*[f"line {n}" for n in range(40)], "needle")

    ctrl(session, "f")
    type_text(session, "needle")
    press(session, "ENTER")

    assert mode_name(session) == "edit"
    assert session.cursor == (40, 0)
    session.frame()
    assert session.viewport.row_offset == 40


def test_help_and_unbound_keys() -> None:
    session = make_session("abc")
    session.set_status("something else")

    ctrl(session, "g")
    assert session.frame().message == session.settings.help_message

    result = session.handle_key(KeyInput(key="F5"))
    assert result.consumed is False


def test_status_message_expires() -> None:
    now = [0.0]
    session = EditorSession(settings=EditorSettings(status_timeout_s=5.0), clock=lambda: now[0])

    assert session.frame().message
    now[0] = 10.0
    assert session.frame().message == ""
    assert session.frame(now=1.0).message


def test_open_path_for_new_file(tmp_path) -> None:
    path = tmp_path / "fresh.py"

    session = EditorSession.open_path(str(path))

    assert session.document.num_lines == 0
    assert session.document.filename == str(path)
