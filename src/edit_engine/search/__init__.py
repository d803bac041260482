"""Incremental search over rendered text."""

from .engine import SearchEngine, SearchMatch

__all__ = ["SearchEngine", "SearchMatch"]
