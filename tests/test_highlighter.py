from edit_engine.syntax import (
    C_PROFILE,
    PYTHON_PROFILE,
    Highlight,
    highlight_line,
    select_profile,
    style_for,
)


def hl(text: str, open_in: bool = False, profile=C_PROFILE):
    return highlight_line(text, profile, open_in)


def test_keywords_numbers_identifiers() -> None:
    tags, open_out = hl("int x = 42;")

    assert tags[0:3] == [Highlight.KEYWORD_SECONDARY] * 3
    assert tags[4] is Highlight.IDENTIFIER
    assert tags[8:10] == [Highlight.NUMBER] * 2
    assert tags[10] is Highlight.NORMAL
    assert open_out is False


def test_digit_after_identifier_is_not_a_number() -> None:
    tags, _ = hl("x1")

    assert tags == [Highlight.IDENTIFIER, Highlight.IDENTIFIER]


def test_decimal_point_continues_number() -> None:
    tags, _ = hl("3.14")

    assert tags == [Highlight.NUMBER] * 4


def test_string_with_escaped_quote() -> None:
    text = 'x = "a\\"b" + 1'
    tags, _ = hl(text)

    assert tags[4:10] == [Highlight.STRING] * 6
    assert tags[13] is Highlight.NUMBER


def test_line_comment_runs_to_end() -> None:
    tags, open_out = hl("a // b")

    assert tags[2:] == [Highlight.LINE_COMMENT] * 4
    assert open_out is False


def test_comment_markers_inside_string_are_text() -> None:
    tags, _ = hl('"//" x')

    assert tags[0:4] == [Highlight.STRING] * 4
    assert tags[5] is Highlight.IDENTIFIER


def test_block_comment_spans_lines() -> None:
    first, open_out = hl("a /* b")
    assert first[2:] == [Highlight.BLOCK_COMMENT] * 4
    assert open_out is True

    second, open_out = hl("c */ d", open_in=True)
    assert second[0:4] == [Highlight.BLOCK_COMMENT] * 4
    assert second[5] is Highlight.IDENTIFIER
    assert open_out is False


def test_line_comment_marker_inside_block_comment() -> None:
    tags, open_out = hl("/* // */ x")

    assert tags[0:8] == [Highlight.BLOCK_COMMENT] * 8
    assert tags[9] is Highlight.IDENTIFIER
    assert open_out is False


def test_longest_keyword_wins() -> None:
    tags, _ = hl("constexpr int")
    assert tags[0:9] == [Highlight.KEYWORD_PRIMARY] * 9

    tags, _ = hl("constant")
    assert tags == [Highlight.IDENTIFIER] * 8


def test_no_profile_is_plain() -> None:
    tags, open_out = highlight_line('int "x" /*', None, True)

    assert tags == [Highlight.NORMAL] * 10
    assert open_out is False


def test_python_profile_has_no_block_comments() -> None:
    tags, _ = hl("def f(): # note", profile=PYTHON_PROFILE)
    assert tags[0:3] == [Highlight.KEYWORD_PRIMARY] * 3
    assert tags[9:] == [Highlight.LINE_COMMENT] * 6

    _, open_out = hl("/* x", open_in=True, profile=PYTHON_PROFILE)
    assert open_out is False


def test_one_tag_per_character_and_stable() -> None:
    samples = ["", "   ", "/*", "*/", '"unterminated', "a.b(c)[1] = 0x1f;", "\0x"]
    for text in samples:
        for open_in in (False, True):
            first = hl(text, open_in)
            assert len(first[0]) == len(text)
            assert hl(text, open_in) == first


def test_profile_selection_by_filename() -> None:
    assert select_profile("main.c") is C_PROFILE
    assert select_profile("lib/util.hpp") is C_PROFILE
    assert select_profile("tool.py") is PYTHON_PROFILE
    assert select_profile("notes.txt") is None
    assert select_profile(None) is None


def test_styles_cover_every_highlight() -> None:
    for tag in Highlight:
        style_for(tag)
    assert style_for(Highlight.SEARCH_MATCH).bold is True
