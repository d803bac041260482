"""Executable Textual app that hosts the editor session."""

from __future__ import annotations

import argparse
import os
from typing import Any, Callable, Optional, Sequence

from rich.style import Style as RichStyle
from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.widget import Widget

from edit_engine import APP_NAME, __version__
from edit_engine.errors import DocumentIOError, TerminalGeometryError
from edit_engine.runtime import EditorSettings, telemetry
from edit_engine.session import EditorSession
from edit_engine.syntax import Highlight, style_for
from edit_engine.view import Frame

from .controller import TextualEditorAdapter, TextualUIHooks

# Top bar, status bar and message bar around the text rows.
CHROME_ROWS = 3

BAR_STYLE = RichStyle(reverse=True)
CURSOR_STYLE = RichStyle(reverse=True)


def _rich_style(tag: Highlight) -> Optional[RichStyle]:
    style = style_for(tag)
    if style.foreground is None and not style.bold:
        return None
    return RichStyle(color=style.foreground, bold=style.bold or None)


def render_frame(frame: Frame) -> Text:
    """Turn a frame into rich text, one run per highlight class."""

    result = Text(no_wrap=True, overflow="crop")
    result.append(frame.top_bar, style=BAR_STYLE)
    result.append("\n")

    cursor_y, cursor_x = frame.cursor
    for y, line in enumerate(frame.lines):
        text = line.text
        start = 0
        for x in range(1, len(text) + 1):
            if x == len(text) or line.highlight[x] is not line.highlight[start]:
                result.append(text[start:x], style=_rich_style(line.highlight[start]))
                start = x
        if y == cursor_y:
            line_start = len(result) - len(text)
            if cursor_x < len(text):
                result.stylize(CURSOR_STYLE, line_start + cursor_x, line_start + cursor_x + 1)
            else:
                result.append(" " * (cursor_x - len(text)))
                result.append(" ", style=CURSOR_STYLE)
        result.append("\n")

    result.append(frame.status_bar, style=BAR_STYLE)
    result.append("\n")
    result.append(frame.message)
    return result


class EditorView(Widget, can_focus=True):
    """Paints the latest frame and forwards key presses."""

    DEFAULT_CSS = """
    EditorView {
        height: 1fr;
        width: 1fr;
    }
    """

    def __init__(
        self,
        on_editor_key: Callable[[str, Optional[str]], None],
        on_editor_resize: Callable[[int, int], None],
    ) -> None:
        super().__init__(id="editor-view")
        self._on_editor_key = on_editor_key
        self._on_editor_resize = on_editor_resize
        self._frame: Optional[Frame] = None

    def show_frame(self, frame: Frame) -> None:
        self._frame = frame
        self.refresh()

    def render(self) -> Text:
        if self._frame is None:
            return Text("")
        return render_frame(self._frame)

    def on_key(self, event: events.Key) -> None:
        event.stop()
        event.prevent_default()
        self._on_editor_key(event.key, event.character)

    def on_resize(self, event: events.Resize) -> None:
        self._on_editor_resize(event.size.height - CHROME_ROWS, event.size.width)


class EditEngineApp(App[None]):
    """Full-screen Textual UI embedding one editor session."""

    TITLE = f"{APP_NAME} {__version__}"
    ENABLE_COMMAND_PALETTE = False

    def __init__(self, session: EditorSession) -> None:
        super().__init__()
        self.session = session
        self.adapter: TextualEditorAdapter | None = None
        self.logger = telemetry.get_logger("edit_engine.adapters.textual")
        self._view = EditorView(self._handle_key, self._handle_resize)

    def compose(self) -> ComposeResult:
        yield self._view

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            paint=self._view.show_frame,
            handle_event=self._handle_event,
            log=self.logger.debug,
        )
        self.adapter = TextualEditorAdapter(self.session, hooks)
        self._view.focus()
        size = self._view.size
        if size.width and size.height:
            self._handle_resize(size.height - CHROME_ROWS, size.width)
        # Status messages expire on a clock, not on input.
        self.set_interval(1.0, self.adapter.refresh)

    async def action_quit(self) -> None:
        # Ctrl-Q is an app-level binding; route it through the quit gate.
        self._handle_key("ctrl+q", None)

    def _handle_key(self, key: str, character: Optional[str]) -> None:
        if self.adapter is None:
            return
        self.adapter.handle_textual_key(key, character)
        if self.adapter.should_quit:
            self.exit()

    def _handle_resize(self, rows: int, cols: int) -> None:
        if self.adapter is None:
            return
        try:
            self.adapter.resize(rows, cols)
        except TerminalGeometryError as exc:
            self.logger.error(str(exc))
            self.exit(return_code=1, message=str(exc))

    def _handle_event(self, name: str, payload: Any | None) -> None:
        if name == "file.open":
            self.sub_title = self.session.document.filename or ""


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME, description="Small syntax-highlighting text editor."
    )
    parser.add_argument("file", nargs="?", help="File to open (created on save)")
    parser.add_argument(
        "--log-file",
        default=os.environ.get(f"{telemetry.ENV_PREFIX}LOG_FILE"),
        help="Write logs to this file while the editor runs",
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get(f"{telemetry.ENV_PREFIX}LOG_LEVEL", "INFO"),
        help="Minimum log level (default: INFO)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.log_file:
        os.environ[f"{telemetry.ENV_PREFIX}LOG_FILE"] = args.log_file
    os.environ[f"{telemetry.ENV_PREFIX}LOG_LEVEL"] = args.log_level
    telemetry.configure()

    settings = EditorSettings.from_env()
    try:
        if args.file:
            session = EditorSession.open_path(args.file, settings=settings)
        else:
            session = EditorSession(settings=settings)
    except DocumentIOError as exc:
        parser.exit(1, f"{APP_NAME}: {exc}\n")

    app = EditEngineApp(session)
    app.run()
    if app.return_code:
        raise SystemExit(app.return_code)


if __name__ == "__main__":  # pragma: no cover - manual entry point
    main()
