"""Document engine for a terminal text editor."""

APP_NAME = "edit-engine"

__all__ = [
    "actions",
    "adapters",
    "document",
    "errors",
    "keymaps",
    "modes",
    "runtime",
    "search",
    "session",
    "syntax",
    "view",
]

__version__ = "0.1.0"
