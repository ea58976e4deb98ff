"""Painting of diff lines: tab expansion, style rules, background fill and section painting."""

from __future__ import annotations

from dataclasses import replace
from typing import List, Optional, Sequence, Tuple

import regex

from diffpaint.ansi import ANSI_SGR_RESET
from diffpaint.style import Style
from diffpaint.superimpose import superimpose_style_sections
from diffpaint.syntax_color import SyntaxStyle

ANSI_CSI_CLEAR_TO_EOL = "\x1b[0K"
ANSI_CSI_CLEAR_TO_BOL = "\x1b[1K"

_FIRST_GRAPHEME = regex.compile(r"\X")

StyleSections = List[Tuple[Style, str]]


def expand_tabs(line: str, tab_width: int) -> str:
    """Replace each tab by tab_width spaces; a tab width of 0 leaves tabs alone."""
    if tab_width > 0:
        return line.replace("\t", " " * tab_width)
    return line


def prepare(line: str, tab_width: int) -> str:
    """Replace the leading -/+/space marker by a space, expand tabs and end with a newline.

    The terminating newline is needed by many syntax definitions to highlight correctly.
    """
    if not line:
        return "\n"
    first = _FIRST_GRAPHEME.match(line)
    rest = line[first.end():] if first else ""
    return f" {expand_tabs(rest, tab_width)}\n"


def style_sections_contain_more_than_one_style(sections: Sequence[Tuple[Style, str]]) -> bool:
    """True if the sections do not all share the style of the first section."""
    if len(sections) <= 1:
        return False
    first_style = sections[0][0]
    return any(style != first_style for style, _ in sections)


def is_whitespace_error(sections: Sequence[Tuple[Style, str]]) -> bool:
    """True if, beyond the initial space, the line holds only spaces and tabs, at least one.

    The first character is always the space that replaced the +/- marker.
    """
    chars = (c for _, text in sections for c in text)
    next(chars, None)
    any_chars = False
    for c in chars:
        if c == "\n":
            return any_chars
        if c not in " \t":
            return False
        any_chars = True
    return False


def update_styles(
    style_sections: Sequence[Sequence[Tuple[Style, str]]],
    whitespace_error_style: Optional[Style] = None,
    non_emph_style: Optional[Style] = None,
) -> List[StyleSections]:
    """Apply the non-emph and whitespace-error rules to each line's sections.

    A line with both emph and non-emph sections gets non_emph_style on its non-emph
    sections. A line that is a whitespace error gets whitespace_error_style on its emph
    sections, or on every section if it has no emph/non-emph distinction.
    """
    updated: List[StyleSections] = []
    for line_sections in style_sections:
        mixed = style_sections_contain_more_than_one_style(line_sections)
        update_non_emph = non_emph_style is not None and mixed
        whitespace_error = whitespace_error_style is not None and is_whitespace_error(
            line_sections
        )
        new_sections: StyleSections = []
        for style, text in line_sections:
            if whitespace_error and (style.is_emph or not mixed):
                new_sections.append((whitespace_error_style, text))
            elif update_non_emph and not style.is_emph:
                new_sections.append((non_emph_style, text))
            else:
                new_sections.append((style, text))
        updated.append(new_sections)
    return updated


def right_fill_background_color(line: str, fill_style: Style) -> str:
    """Extend the fill style's background colour from the end of line to the terminal edge."""
    line += fill_style.paint("")
    if line.lower().endswith(ANSI_SGR_RESET.lower()):
        line = line[: -len(ANSI_SGR_RESET)]
    return line + ANSI_CSI_CLEAR_TO_EOL + ANSI_SGR_RESET


def mark_empty_line(empty_line_style: Style, line: str, marker: Optional[str] = None) -> str:
    """Mark an empty line with the style, using marker text or else clearing to line start."""
    return line + empty_line_style.paint(marker if marker is not None else ANSI_CSI_CLEAR_TO_BOL)


def paint_sections(
    syntax_sections: Sequence[Tuple[SyntaxStyle, str]],
    diff_sections: Sequence[Tuple[Style, str]],
    painted_prefix: Optional[str] = None,
    true_color: bool = True,
    null_syntax_style: SyntaxStyle = SyntaxStyle(),
) -> Tuple[str, bool]:
    """Paint a prepared line and report whether it is empty.

    The leading space of the prepared line is dropped, and painted_prefix, if given,
    is emitted in its place.
    """
    parts: List[str] = []
    handled_prefix = False
    is_empty = True
    for style, text in superimpose_style_sections(
        syntax_sections, diff_sections, true_color, null_syntax_style
    ):
        if not handled_prefix:
            if painted_prefix is not None:
                parts.append(painted_prefix)
            text = text[1:]
            handled_prefix = True
        if text:
            parts.append(style.paint(text))
            is_empty = False
    return "".join(parts), is_empty