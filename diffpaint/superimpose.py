"""Overlaying syntax-highlighting styles on diff styles, character by character."""

from __future__ import annotations

from dataclasses import replace
from itertools import groupby
from typing import Iterable, List, Sequence, Tuple, TypeVar

from diffpaint.style import Style
from diffpaint.syntax_color import SyntaxStyle, to_ansi_color

T = TypeVar("T")

StylePair = Tuple[SyntaxStyle, Style]


class StyleMismatchError(ValueError):
    """The two section lists being superimposed do not spell the same text."""


def explode(style_sections: Iterable[Tuple[T, str]]) -> List[Tuple[T, str]]:
    """Split (style, text) sections into one (style, character) pair per character."""
    return [(style, char) for style, text in style_sections for char in text]


def superimpose(
    style_section_pairs: Iterable[Tuple[Tuple[SyntaxStyle, str], Tuple[Style, str]]],
) -> List[Tuple[StylePair, str]]:
    """Combine aligned per-character syntax and diff styles into style pairs."""
    superimposed: List[Tuple[StylePair, str]] = []
    for (syntax_style, char_1), (style, char_2) in style_section_pairs:
        if char_1 != char_2:
            raise StyleMismatchError(
                "String mismatch encountered while superimposing style sections: "
                f"'{char_1}' vs '{char_2}'"
            )
        superimposed.append(((syntax_style, style), char_1))
    return superimposed


def _superimposed_style(
    pair: StylePair, true_color: bool, null_syntax_style: SyntaxStyle
) -> Style:
    syntax_style, style = pair
    if style.is_syntax_highlighted and syntax_style != null_syntax_style:
        foreground = to_ansi_color(syntax_style.foreground, true_color)
        return replace(
            style, ansi_term_style=replace(style.ansi_term_style, foreground=foreground)
        )
    return style


def coalesce(
    style_sections: Sequence[Tuple[StylePair, str]],
    true_color: bool,
    null_syntax_style: SyntaxStyle,
) -> List[Tuple[Style, str]]:
    """Join runs of characters sharing a style pair into sections of resolved styles.

    A newline ending the final section, needed only by the highlighter, is dropped.
    """
    runs = [
        (pair, "".join(char for _, char in group))
        for pair, group in groupby(style_sections, key=lambda section: section[0])
    ]
    if runs:
        last_pair, last_text = runs[-1]
        if last_text.endswith("\n"):
            runs[-1] = (last_pair, last_text[:-1])
    return [
        (_superimposed_style(pair, true_color, null_syntax_style), text)
        for pair, text in runs
    ]


def superimpose_style_sections(
    sections_1: Sequence[Tuple[SyntaxStyle, str]],
    sections_2: Sequence[Tuple[Style, str]],
    true_color: bool,
    null_syntax_style: SyntaxStyle,
) -> List[Tuple[Style, str]]:
    """Overlay syntax-highlighting foregrounds onto diff styles over the same text."""
    return coalesce(
        superimpose(zip(explode(sections_1), explode(sections_2))),
        true_color,
        null_syntax_style,
    )