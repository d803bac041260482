"""Viewport scrolling and frame assembly."""

from .frame import Frame, FrameLine, StatusMessage, banner, build_frame
from .viewport import Viewport

__all__ = ["Viewport", "Frame", "FrameLine", "StatusMessage", "banner", "build_frame"]
