"""Key events, session modes and prompt strategies."""

from .base_mode import KeyInput, Mode, ModeBus, ModeResult
from .edit_mode import EditMode, key_to_token
from .prompt_handlers import (
    OpenFilePromptHandler,
    PromptHandler,
    SearchPromptHandler,
    complete_path,
)
from .prompt_mode import PromptMode

__all__ = [
    "KeyInput",
    "Mode",
    "ModeBus",
    "ModeResult",
    "EditMode",
    "PromptMode",
    "PromptHandler",
    "SearchPromptHandler",
    "OpenFilePromptHandler",
    "complete_path",
    "key_to_token",
]
