from dataclasses import replace

from diffpaint.ansi import ANSI_SGR_RESET, GREEN, RED, AnsiStyle
from diffpaint.paint import (
    ANSI_CSI_CLEAR_TO_BOL,
    ANSI_CSI_CLEAR_TO_EOL,
    expand_tabs,
    is_whitespace_error,
    mark_empty_line,
    paint_sections,
    prepare,
    right_fill_background_color,
    style_sections_contain_more_than_one_style,
    update_styles,
)
from diffpaint.style import Style
from diffpaint.syntax_color import SyntaxStyle

PLAIN = Style()
EMPH = Style(ansi_term_style=AnsiStyle(background=GREEN), is_emph=True)
NON_EMPH = Style(ansi_term_style=AnsiStyle(background=RED))
WS_ERROR = Style(ansi_term_style=AnsiStyle(background=RED, is_reverse=True))
NULL_SYNTAX = SyntaxStyle()


def test_expand_tabs_replaces_tabs():
    assert expand_tabs("a\tb", 4) == "a" + " " * 4 + "b"


def test_expand_tabs_zero_width_keeps_tabs():
    assert expand_tabs("a\tb", 0) == "a\tb"


def test_prepare_replaces_marker_and_appends_newline():
    assert prepare("+foo", 4) == " foo\n"
    assert prepare("-\tx", 2) == " " + " " * 2 + "x\n"


def test_prepare_empty_line():
    assert prepare("", 4) == "\n"


def test_more_than_one_style():
    assert not style_sections_contain_more_than_one_style([])
    assert not style_sections_contain_more_than_one_style([(PLAIN, "ab")])
    assert not style_sections_contain_more_than_one_style([(PLAIN, "a"), (PLAIN, "b")])
    assert style_sections_contain_more_than_one_style([(PLAIN, "a"), (EMPH, "b")])


def test_is_whitespace_error():
    assert is_whitespace_error([(PLAIN, " \t \n")])
    assert is_whitespace_error([(PLAIN, " "), (EMPH, "  \n")])
    assert not is_whitespace_error([(PLAIN, " x\n")])
    assert not is_whitespace_error([(PLAIN, " \n")])
    assert not is_whitespace_error([(PLAIN, " ")])


def test_update_styles_non_emph():
    sections = [[(PLAIN, " a"), (EMPH, "b\n")]]
    updated = update_styles(sections, None, NON_EMPH)
    assert updated == [[(NON_EMPH, " a"), (EMPH, "b\n")]]


def test_update_styles_single_style_line_unchanged():
    sections = [[(PLAIN, " ab\n")]]
    assert update_styles(sections, None, NON_EMPH) == sections


def test_update_styles_whitespace_error_without_distinction():
    sections = [[(PLAIN, " "), (PLAIN, "  \n")]]
    updated = update_styles(sections, WS_ERROR, None)
    assert updated == [[(WS_ERROR, " "), (WS_ERROR, "  \n")]]


def test_update_styles_whitespace_error_only_emph_sections():
    sections = [[(PLAIN, " "), (EMPH, "  \n")]]
    updated = update_styles(sections, WS_ERROR, NON_EMPH)
    assert updated == [[(NON_EMPH, " "), (WS_ERROR, "  \n")]]


def test_right_fill_background_color():
    fill = Style.from_colors(None, GREEN)
    result = right_fill_background_color("abc", fill)
    assert result == "abc" + fill.ansi_term_style.prefix() + ANSI_CSI_CLEAR_TO_EOL + ANSI_SGR_RESET


def test_right_fill_strips_trailing_reset_of_line():
    fill = Style()
    result = right_fill_background_color("x" + ANSI_SGR_RESET, fill)
    assert result == "x" + ANSI_CSI_CLEAR_TO_EOL + ANSI_SGR_RESET


def test_mark_empty_line_with_and_without_marker():
    style = Style.from_colors(None, GREEN)
    assert mark_empty_line(style, "", None) == style.paint(ANSI_CSI_CLEAR_TO_BOL)
    assert mark_empty_line(style, "12", " ") == "12" + style.paint(" ")


def test_paint_sections_plain():
    line = " ab\n"
    assert paint_sections([(NULL_SYNTAX, line)], [(PLAIN, line)]) == ("ab", False)


def test_paint_sections_with_prefix_and_style():
    line = " ab\n"
    painted, is_empty = paint_sections([(NULL_SYNTAX, line)], [(NON_EMPH, line)], "+")
    assert painted == "+" + NON_EMPH.paint("ab")
    assert not is_empty


def test_paint_sections_empty_line():
    line = " \n"
    assert paint_sections([(NULL_SYNTAX, line)], [(EMPH, line)]) == ("", True)


def test_paint_sections_syntax_foreground_applied():
    line = " a\n"
    syntax_style = replace(
        NULL_SYNTAX, foreground=replace(NULL_SYNTAX.foreground, r=1)
    )
    diff_style = replace(NON_EMPH, is_syntax_highlighted=True)
    painted, _ = paint_sections([(syntax_style, line)], [(diff_style, line)])
    assert painted != diff_style.paint("a")
    assert painted.endswith("a" + ANSI_SGR_RESET)