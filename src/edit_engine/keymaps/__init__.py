"""Declarative keymap registry.

The built-in bindings live in ``edit_engine.keymaps.defaults``; they point at
``edit_engine.actions`` and are imported from there.
"""

from .models import ActionRef, Binding, KeyStroke, bind
from .registry import (
    KeymapConflictError,
    KeymapRegistry,
    RegistryStats,
    ResolutionMatch,
)

__all__ = [
    "ActionRef",
    "Binding",
    "KeyStroke",
    "bind",
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
    "ResolutionMatch",
]
