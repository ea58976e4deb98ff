"""Styles applied to diff output, and detection of styles already present in input."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Optional

from diffpaint.ansi import (
    GREEN,
    RED,
    AnsiStyle,
    Color,
    color_to_string,
    parse_first_style,
    starts_with_ansi_style_sequence,
)


class DecorationKind(Enum):
    BOX = "box"
    UNDERLINE = "ul"
    OVERLINE = "ol"
    UNDER_OVERLINE = "ul ol"
    BOX_WITH_UNDERLINE = "box ul"
    BOX_WITH_OVERLINE = "box ol"
    BOX_WITH_UNDER_OVERLINE = "box ul ol"
    NO_DECORATION = "none"


@dataclass(frozen=True)
class DecorationStyle:
    """A decoration (box and/or lines) drawn in a given style. No decoration carries no style."""

    kind: DecorationKind = DecorationKind.NO_DECORATION
    ansi_term_style: AnsiStyle = AnsiStyle()

    def __post_init__(self) -> None:
        if self.kind is DecorationKind.NO_DECORATION and not self.ansi_term_style.is_plain:
            object.__setattr__(self, "ansi_term_style", AnsiStyle())


@dataclass(frozen=True)
class Style:
    ansi_term_style: AnsiStyle = AnsiStyle()
    is_emph: bool = False
    is_omitted: bool = False
    is_raw: bool = False
    is_syntax_highlighted: bool = False
    decoration_style: DecorationStyle = DecorationStyle()

    @classmethod
    def from_colors(cls, foreground: Optional[Color], background: Optional[Color]) -> "Style":
        return cls(ansi_term_style=AnsiStyle(foreground=foreground, background=background))

    def paint(self, text: str) -> str:
        return self.ansi_term_style.paint(text)

    def get_background_color(self) -> Optional[Color]:
        """The colour that shows as background, taking reverse video into account."""
        if self.ansi_term_style.is_reverse:
            return self.ansi_term_style.foreground
        return self.ansi_term_style.background

    def is_applied_to(self, s: str) -> bool:
        """True if the first style escape in s is equivalent to this style."""
        parsed = parse_first_style(s)
        if parsed is None:
            return False
        return ansi_term_style_equality(parsed, self.ansi_term_style)

    def to_painted_string(self) -> str:
        """The style string, painted in this style."""
        return self.paint(str(self))

    def __str__(self) -> str:
        if self.is_raw:
            return "raw"
        ats = self.ansi_term_style
        words = []
        if self.is_omitted:
            words.append("omit")
        for flag, word in (
            (ats.is_blink, "blink"),
            (ats.is_bold, "bold"),
            (ats.is_dimmed, "dim"),
            (ats.is_italic, "italic"),
            (ats.is_reverse, "reverse"),
            (ats.is_strikethrough, "strike"),
            (ats.is_underline, "ul"),
        ):
            if flag:
                words.append(word)
        if self.is_syntax_highlighted:
            words.append("syntax")
        elif ats.foreground is not None:
            words.append(color_to_string(ats.foreground))
        else:
            words.append("normal")
        if ats.background is not None:
            words.append(color_to_string(ats.background))
        return " ".join(words)


def _16_color_equality(a: Color, b: Color) -> bool:
    return a.kind == "fixed" and b.kind == "named" and a.value == b.value


def _color_equality(a: Optional[Color], b: Optional[Color]) -> bool:
    if a is None or b is None:
        return a is None and b is None
    return a == b or _16_color_equality(a, b) or _16_color_equality(b, a)


def ansi_term_style_equality(a: AnsiStyle, b: AnsiStyle) -> bool:
    """Equality of styles treating 256-colour indices 0-7 as the basic colours."""
    if replace(a, foreground=None, background=None) != replace(
        b, foreground=None, background=None
    ):
        return False
    return _color_equality(a.foreground, b.foreground) and _color_equality(
        a.background, b.background
    )


GIT_DEFAULT_MINUS_STYLE = Style(ansi_term_style=AnsiStyle(foreground=RED))
GIT_DEFAULT_PLUS_STYLE = Style(ansi_term_style=AnsiStyle(foreground=GREEN))


def line_has_style_other_than(line: str, styles: Iterable[Style]) -> bool:
    """True if the line starts with a style escape that none of the given styles matches."""
    if not starts_with_ansi_style_sequence(line):
        return False
    return not any(style.is_applied_to(line) for style in styles)