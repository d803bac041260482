from __future__ import annotations

import os
from typing import List, Optional

from edit_engine.modes import KeyInput, PromptHandler, complete_path
from edit_engine.session import EditorSession


class RecordingHandler(PromptHandler):
    def __init__(self) -> None:
        self.calls: List[tuple[str, str]] = []

    def on_key(self, session, query, key):
        self.calls.append((query, key))
        return None


def start(session: EditorSession, handler: PromptHandler) -> List[Optional[str]]:
    results: List[Optional[str]] = []
    result = session.start_prompt(
        "Name: {}", handler, lambda _session, value: results.append(value)
    )
    session.modes.switch_mode(result.switch_to)
    return results


def test_prompt_collects_text_and_commits() -> None:
    session = EditorSession()
    handler = RecordingHandler()
    results = start(session, handler)

    for ch in "abx":
        session.handle_key(KeyInput.char(ch))
    session.handle_key(KeyInput(key="BACKSPACE"))
    assert session.frame().message == "Name: ab"

    session.handle_key(KeyInput(key="ENTER"))

    assert results == ["ab"]
    assert handler.calls[-1] == ("ab", "ENTER")
    assert [key for _, key in handler.calls[:3]] == ["a", "b", "x"]
    assert session.modes.active_mode.name == "edit"
    assert session.frame().message == ""


def test_enter_on_empty_prompt_keeps_prompting() -> None:
    session = EditorSession()
    results = start(session, PromptHandler())

    session.handle_key(KeyInput(key="ENTER"))

    assert results == []
    assert session.modes.active_mode.name == "prompt"


def test_escape_cancels_with_none() -> None:
    session = EditorSession()
    results = start(session, PromptHandler())
    session.handle_key(KeyInput.char("z"))

    result = session.handle_key(KeyInput(key="ESC"))

    assert results == [None]
    assert result.status == "prompt_cancel"
    assert session.modes.active_mode.name == "edit"


def test_control_keys_do_not_type() -> None:
    session = EditorSession()
    start(session, PromptHandler())

    session.handle_key(KeyInput.char("a"))
    session.handle_key(KeyInput.ctrl("s"))
    session.handle_key(KeyInput(key="TAB", text="\t"))
    session.handle_key(KeyInput.ctrl("h"))

    assert session.prompt.query == ""


def test_tab_completes_common_prefix(tmp_path) -> None:
    (tmp_path / "alpha.txt").write_text("")
    (tmp_path / "alphabet.txt").write_text("")
    (tmp_path / "subdir").mkdir()

    assert complete_path(str(tmp_path / "al")) == str(tmp_path / "alpha")
    assert complete_path(str(tmp_path / "su")) == str(tmp_path / "subdir") + os.sep
    assert complete_path(str(tmp_path / "zz")) == str(tmp_path / "zz")
    assert complete_path(str(tmp_path / "missing" / "x")) == str(tmp_path / "missing" / "x")


def test_open_prompt_tab_completion(tmp_path) -> None:
    (tmp_path / "notes.txt").write_text("hello\n")
    session = EditorSession()

    session.handle_key(KeyInput.ctrl("o"))
    for ch in str(tmp_path / "no"):
        session.handle_key(KeyInput.char(ch))
    session.handle_key(KeyInput(key="TAB", text="\t"))

    assert session.prompt.query == str(tmp_path / "notes.txt")

    session.handle_key(KeyInput(key="ENTER"))
    assert session.document.raw_lines() == ("hello",)
