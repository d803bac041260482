"""Built-in keymap that seeds edit mode with the editor's control keys."""

from __future__ import annotations

from typing import Iterable, Sequence

from edit_engine.actions import commands as command_actions
from edit_engine.actions import editing as editing_actions
from edit_engine.actions import motion as motion_actions

from .models import ActionRef, Binding, bind
from .registry import KeymapRegistry

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(
        id="file.save",
        handler=command_actions.save,
        description="Write the document, prompting for a name if needed",
    ),
    ActionRef(
        id="file.open",
        handler=command_actions.open_file,
        description="Prompt for a file to open",
    ),
    ActionRef(
        id="session.quit",
        handler=command_actions.quit_editor,
        description="Quit, confirming when there are unsaved changes",
    ),
    ActionRef(
        id="search.find",
        handler=command_actions.find,
        description="Incremental search",
    ),
    ActionRef(
        id="session.help",
        handler=command_actions.show_help,
        description="Show the key help in the message bar",
    ),
    ActionRef(
        id="session.noop",
        handler=command_actions.noop,
        description="Do nothing (redraw happens after every key)",
    ),
    ActionRef(
        id="edit.newline",
        handler=editing_actions.insert_newline,
        description="Split the line at the cursor",
    ),
    ActionRef(
        id="edit.tab",
        handler=editing_actions.insert_tab,
        description="Insert a tab character",
    ),
    ActionRef(
        id="edit.delete_backward",
        handler=editing_actions.delete_backward,
        description="Delete the character left of the cursor",
    ),
    ActionRef(
        id="edit.delete_forward",
        handler=editing_actions.delete_forward,
        description="Delete the character under the cursor",
    ),
    ActionRef(
        id="motion.move",
        handler=motion_actions.move_cursor,
        description="Move the cursor by one step",
    ),
    ActionRef(
        id="motion.page",
        handler=motion_actions.page,
        description="Move the cursor by one screen",
    ),
)

DEFAULT_BINDINGS: tuple[Binding, ...] = (
    bind("edit.save", "ctrl+s", "file.save"),
    bind("edit.open", "ctrl+o", "file.open"),
    bind("edit.quit", "ctrl+q", "session.quit"),
    bind("edit.quit_alt", "ctrl+x", "session.quit"),
    bind("edit.find", "ctrl+f", "search.find"),
    bind("edit.help", "ctrl+g", "session.help"),
    bind("edit.redraw", "ctrl+l", "session.noop"),
    bind("edit.escape", "ESC", "session.noop"),
    bind("edit.newline", "ENTER", "edit.newline"),
    bind("edit.tab", "TAB", "edit.tab"),
    bind("edit.backspace", "BACKSPACE", "edit.delete_backward"),
    bind("edit.backspace_ctrl", "ctrl+h", "edit.delete_backward"),
    bind("edit.delete", "DELETE", "edit.delete_forward"),
    bind("edit.up", "UP", "motion.move"),
    bind("edit.down", "DOWN", "motion.move"),
    bind("edit.left", "LEFT", "motion.move"),
    bind("edit.right", "RIGHT", "motion.move"),
    bind("edit.home", "HOME", "motion.move"),
    bind("edit.end", "END", "motion.move"),
    bind("edit.page_up", "PAGE_UP", "motion.page"),
    bind("edit.page_down", "PAGE_DOWN", "motion.page"),
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
    exclude_bindings: Sequence[str] | None = None,
) -> None:
    """Register the built-in actions and edit-mode bindings."""

    skipped = set(exclude_bindings or ())

    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=replace)

    for binding in DEFAULT_BINDINGS:
        if binding.id in skipped:
            continue
        registry.register_binding(binding, replace=replace)

    if extra_bindings:
        for binding in extra_bindings:
            registry.register_binding(binding, replace=replace)


__all__ = ["load_default_keymaps", "DEFAULT_ACTIONS", "DEFAULT_BINDINGS"]
