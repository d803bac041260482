"""Runtime services: telemetry and settings."""

from . import telemetry
from .settings import EditorSettings

__all__ = ["telemetry", "EditorSettings"]
