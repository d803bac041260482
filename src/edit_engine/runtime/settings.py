"""Editor settings resolved from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

ENV_PREFIX = "EDIT_ENGINE_"

DEFAULT_QUIT_TIMES = 3
DEFAULT_STATUS_TIMEOUT_S = 5.0
DEFAULT_HELP_MESSAGE = (
    "HELP: Ctrl-S = save | Ctrl-Q = quit | Ctrl-F = find | Ctrl-O = open"
)


@dataclass(slots=True)
class EditorSettings:
    """Tunables for a single editing session."""

    quit_times: int = DEFAULT_QUIT_TIMES
    status_timeout_s: float = DEFAULT_STATUS_TIMEOUT_S
    help_message: str = DEFAULT_HELP_MESSAGE

    @classmethod
    def from_env(cls) -> "EditorSettings":
        return cls(
            quit_times=max(0, _env_int("QUIT_TIMES", DEFAULT_QUIT_TIMES)),
            status_timeout_s=_env_float("STATUS_TIMEOUT", DEFAULT_STATUS_TIMEOUT_S),
        )


def _env_int(name: str, fallback: int) -> int:
    value = os.environ.get(f"{ENV_PREFIX}{name}")
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


def _env_float(name: str, fallback: float) -> float:
    value = os.environ.get(f"{ENV_PREFIX}{name}")
    if value is None:
        return fallback
    try:
        return float(value)
    except ValueError:
        return fallback


__all__ = ["EditorSettings"]
