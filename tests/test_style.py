import pytest

from diffpaint.ansi import GREEN, RED, AnsiStyle, Color, color_to_string, parse_color
from diffpaint.style import (
    GIT_DEFAULT_MINUS_STYLE,
    GIT_DEFAULT_PLUS_STYLE,
    DecorationKind,
    DecorationStyle,
    Style,
    ansi_term_style_equality,
    line_has_style_other_than,
)


def _style(fg=None, bg=None, attrs=()):
    return Style(
        ansi_term_style=AnsiStyle(
            foreground=parse_color(fg, True) if fg else None,
            background=parse_color(bg, True) if bg else None,
            **{name: True for name in attrs},
        )
    )


BUS = ("is_bold", "is_underline", "is_strikethrough")

GIT_STYLE_EXAMPLES = [
    ((None, None, ()), "\x1b[mtext\x1b[m\n"),
    (("0", None, ()), "\x1b[30m+\x1b[m\x1b[30mtext\x1b[m\n"),
    (("black", None, ()), "\x1b[30m+\x1b[m\x1b[30mtext\x1b[m\n"),
    (("1", None, ()), "\x1b[31m+\x1b[m\x1b[31mtext\x1b[m\n"),
    (("red", None, ()), "\x1b[31m+\x1b[m\x1b[31mtext\x1b[m\n"),
    (("0", "1", ()), "\x1b[30;41m+\x1b[m\x1b[30;41mtext\x1b[m\n"),
    (("black", "red", ()), "\x1b[30;41m+\x1b[m\x1b[30;41mtext\x1b[m\n"),
    (("19", None, ()), "\x1b[38;5;19m+\x1b[m\x1b[38;5;19mtext\x1b[m\n"),
    (("black", "19", ()), "\x1b[30;48;5;19m+\x1b[m\x1b[30;48;5;19mtext\x1b[m\n"),
    (("19", "black", ()), "\x1b[38;5;19;40m+\x1b[m\x1b[38;5;19;40mtext\x1b[m\n"),
    (("19", "20", ()), "\x1b[38;5;19;48;5;20m+\x1b[m\x1b[38;5;19;48;5;20mtext\x1b[m\n"),
    (("#aabbcc", None, ()), "\x1b[38;2;170;187;204m+\x1b[m\x1b[38;2;170;187;204mtext\x1b[m\n"),
    (("0", "#aabbcc", ()), "\x1b[30;48;2;170;187;204m+\x1b[m\x1b[30;48;2;170;187;204mtext\x1b[m\n"),
    (("#aabbcc", "0", ()), "\x1b[38;2;170;187;204;40m+\x1b[m\x1b[38;2;170;187;204;40mtext\x1b[m\n"),
    (
        ("19", "#aabbcc", ()),
        "\x1b[38;5;19;48;2;170;187;204m+\x1b[m\x1b[38;5;19;48;2;170;187;204mtext\x1b[m\n",
    ),
    (
        ("#aabbcc", "19", ()),
        "\x1b[38;2;170;187;204;48;5;19m+\x1b[m\x1b[38;2;170;187;204;48;5;19mtext\x1b[m\n",
    ),
    (
        ("#aabbcc", "#ddeeff", ()),
        "\x1b[38;2;170;187;204;48;2;221;238;255m+\x1b[m"
        "\x1b[38;2;170;187;204;48;2;221;238;255mtext\x1b[m\n",
    ),
    (
        ("#aabbcc", "#ddeeff", ("is_bold",)),
        "\x1b[1;38;2;170;187;204;48;2;221;238;255m+\x1b[m"
        "\x1b[1;38;2;170;187;204;48;2;221;238;255mtext\x1b[m\n",
    ),
    (
        ("#aabbcc", "#ddeeff", ("is_bold", "is_underline")),
        "\x1b[1;4;38;2;170;187;204;48;2;221;238;255m+\x1b[m"
        "\x1b[1;4;38;2;170;187;204;48;2;221;238;255mtext\x1b[m\n",
    ),
    (
        ("#aabbcc", "#ddeeff", BUS),
        "\x1b[1;4;9;38;2;170;187;204;48;2;221;238;255m+\x1b[m"
        "\x1b[1;4;9;38;2;170;187;204;48;2;221;238;255mtext\x1b[m\n",
    ),
    (("0", "1", BUS), "\x1b[1;4;9;30;41m+\x1b[m\x1b[1;4;9;30;41mtext\x1b[m\n"),
    (("0", "19", BUS), "\x1b[1;4;9;30;48;5;19m+\x1b[m\x1b[1;4;9;30;48;5;19mtext\x1b[m\n"),
    (("19", "0", BUS), "\x1b[1;4;9;38;5;19;40m+\x1b[m\x1b[1;4;9;38;5;19;40mtext\x1b[m\n"),
    (
        ("#aabbcc", "0", BUS),
        "\x1b[1;4;9;38;2;170;187;204;40m+\x1b[m\x1b[1;4;9;38;2;170;187;204;40mtext\x1b[m\n",
    ),
    (
        ("#aabbcc", "19", BUS),
        "\x1b[1;4;9;38;2;170;187;204;48;5;19m+\x1b[m"
        "\x1b[1;4;9;38;2;170;187;204;48;5;19mtext\x1b[m\n",
    ),
    (
        ("19", "#aabbcc", BUS),
        "\x1b[1;4;9;38;5;19;48;2;170;187;204m+\x1b[m"
        "\x1b[1;4;9;38;5;19;48;2;170;187;204mtext\x1b[m\n",
    ),
    (
        ("0", "#aabbcc", BUS),
        "\x1b[1;4;9;30;48;2;170;187;204m+\x1b[m\x1b[1;4;9;30;48;2;170;187;204mtext\x1b[m\n",
    ),
    (
        ("black", "#ddeeff", ()),
        "\x1b[30;48;2;221;238;255m+\x1b[m\x1b[30;48;2;221;238;255mtext\x1b[m\n",
    ),
    (("brightred", None, ()), "\x1b[91m+\x1b[m\x1b[91mtext\x1b[m\n"),
    ((None, None, ("is_blink",)), "\x1b[5m+\x1b[m\x1b[5mtext\x1b[m\n"),
]


@pytest.mark.parametrize("spec, git_output", GIT_STYLE_EXAMPLES)
def test_style_is_applied_to_git_output(spec, git_output):
    assert _style(*spec).is_applied_to(git_output)


def test_is_applied_to_negative_assertion():
    style_from_24 = _style("#aabbcc", "19", BUS)
    git_output_from_25 = (
        "\x1b[1;4;9;38;5;19;48;2;170;187;204m+\x1b[m"
        "\x1b[1;4;9;38;5;19;48;2;170;187;204mtext\x1b[m\n"
    )
    assert not style_from_24.is_applied_to(git_output_from_25)


MINUS_LINE = "\x1b[31m-____\x1b[m\n"
PLUS_LINE = "\x1b[32m+\x1b[m\x1b[32m____\x1b[m\n"


def test_git_default_styles():
    assert GIT_DEFAULT_MINUS_STYLE.is_applied_to(MINUS_LINE)
    assert not GIT_DEFAULT_MINUS_STYLE.is_applied_to(PLUS_LINE)
    assert GIT_DEFAULT_PLUS_STYLE.is_applied_to(PLUS_LINE)
    assert not GIT_DEFAULT_PLUS_STYLE.is_applied_to(MINUS_LINE)


def test_line_has_style_other_than():
    assert not line_has_style_other_than("", [])
    assert not line_has_style_other_than("", [GIT_DEFAULT_MINUS_STYLE])

    assert not line_has_style_other_than(MINUS_LINE, [GIT_DEFAULT_MINUS_STYLE])
    assert not line_has_style_other_than(PLUS_LINE, [GIT_DEFAULT_PLUS_STYLE])

    assert line_has_style_other_than(MINUS_LINE, [GIT_DEFAULT_PLUS_STYLE])
    assert line_has_style_other_than(MINUS_LINE, [])
    assert line_has_style_other_than(PLUS_LINE, [GIT_DEFAULT_MINUS_STYLE])
    assert line_has_style_other_than(PLUS_LINE, [])


def test_unstyled_text_is_not_applied():
    assert not Style().is_applied_to("text")


def test_display_of_styles():
    assert str(Style(is_raw=True, is_omitted=True)) == "raw"
    assert str(Style()) == "normal"
    assert str(GIT_DEFAULT_MINUS_STYLE) == color_to_string(RED)
    highlighted = Style(ansi_term_style=AnsiStyle(background=GREEN), is_syntax_highlighted=True)
    assert str(highlighted) == "syntax " + color_to_string(GREEN)
    assert str(_style("red", None, ("is_bold", "is_underline"))).split() == ["bold", "ul", "red"]


def test_get_background_color_honours_reverse():
    style = Style.from_colors(RED, GREEN)
    assert style.get_background_color() == GREEN
    reversed_style = Style(ansi_term_style=AnsiStyle(foreground=RED, background=GREEN, is_reverse=True))
    assert reversed_style.get_background_color() == RED


def test_paint_and_painted_string():
    style = Style.from_colors(RED, None)
    assert style.paint("x") == style.ansi_term_style.paint("x")
    assert style.to_painted_string() == style.paint(str(style))
    assert Style().paint("x") == "x"


def test_ansi_term_style_equality_treats_low_indices_as_named():
    fixed = AnsiStyle(foreground=Color.fixed(1))
    named = AnsiStyle(foreground=RED)
    assert ansi_term_style_equality(fixed, named)
    assert ansi_term_style_equality(named, fixed)
    assert not ansi_term_style_equality(AnsiStyle(foreground=Color.fixed(9)), named)
    assert not ansi_term_style_equality(named, AnsiStyle(foreground=RED, is_bold=True))
    assert not ansi_term_style_equality(named, AnsiStyle())


def test_no_decoration_carries_no_style():
    decoration = DecorationStyle(DecorationKind.NO_DECORATION, AnsiStyle(foreground=RED))
    assert decoration == DecorationStyle()
    boxed = DecorationStyle(DecorationKind.BOX, AnsiStyle(foreground=RED))
    assert boxed.ansi_term_style.foreground == RED