from edit_engine.document import (
    TAB_STOP,
    raw_column_to_rendered,
    rendered_column_to_raw,
    to_rendered,
)


def test_tabs_expand_to_next_stop() -> None:
    assert to_rendered("\tx") == " " * TAB_STOP + "x"
    assert to_rendered("ab\tc") == "ab" + " " * 6 + "c"
    assert to_rendered("plain") == "plain"


def test_raw_to_rendered_column() -> None:
    assert raw_column_to_rendered("\tx", 0) == 0
    assert raw_column_to_rendered("\tx", 1) == 8
    assert raw_column_to_rendered("ab\tc", 3) == 8
    assert raw_column_to_rendered("ab\tc", 4) == 9


def test_rendered_to_raw_column_inside_tab() -> None:
    assert rendered_column_to_raw("\tx", 3) == 0
    assert rendered_column_to_raw("\tx", 8) == 1
    assert rendered_column_to_raw("\tx", 50) == 2


def test_column_mapping_round_trips() -> None:
    for raw in ("", "abc", "\t\tx", "a\tb\tc", "    \tz"):
        for col in range(len(raw) + 1):
            rx = raw_column_to_rendered(raw, col)
            assert rendered_column_to_raw(raw, rx) == col


def test_tab_width_depends_on_rendered_column() -> None:
    assert to_rendered("\t") == " " * 8
    assert to_rendered("abc\t") == "abc" + " " * 5
