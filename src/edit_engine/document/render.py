"""Mapping between raw and rendered (tab-expanded) columns."""

from __future__ import annotations

TAB_STOP = 8


def to_rendered(raw: str) -> str:
    """Expand every tab to the next multiple of ``TAB_STOP``."""

    if "\t" not in raw:
        return raw
    out: list[str] = []
    width = 0
    for ch in raw:
        if ch == "\t":
            pad = TAB_STOP - (width % TAB_STOP)
            out.append(" " * pad)
            width += pad
        else:
            out.append(ch)
            width += 1
    return "".join(out)


def raw_column_to_rendered(raw: str, col: int) -> int:
    rx = 0
    for ch in raw[: max(col, 0)]:
        if ch == "\t":
            rx += (TAB_STOP - 1) - (rx % TAB_STOP)
        rx += 1
    return rx


def rendered_column_to_raw(raw: str, rx: int) -> int:
    """Return the first raw column whose rendered extent passes ``rx``."""

    cur_rx = 0
    for cx, ch in enumerate(raw):
        if ch == "\t":
            cur_rx += (TAB_STOP - 1) - (cur_rx % TAB_STOP)
        cur_rx += 1
        if cur_rx > rx:
            return cx
    return len(raw)


__all__ = [
    "TAB_STOP",
    "to_rendered",
    "raw_column_to_rendered",
    "rendered_column_to_raw",
]
