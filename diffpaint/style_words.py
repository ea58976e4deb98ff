"""Parsing of style strings: colours, attributes and special decoration words."""

from __future__ import annotations

from enum import Flag
from typing import Optional, Tuple

from diffpaint.ansi import AnsiStyle, Color, parse_color
from diffpaint.style import Style

_QUOTES = "\"'"

_ATTRIBUTE_WORDS = {
    "blink": "is_blink",
    "bold": "is_bold",
    "dim": "is_dimmed",
    "hidden": "is_hidden",
    "italic": "is_italic",
    "reverse": "is_reverse",
    "strike": "is_strikethrough",
    "ul": "is_underline",
    "underline": "is_underline",
}

# Words that are meaningful in hunk-header-style and are accepted without effect here.
_IGNORED_WORDS = frozenset({"line-number", "file"})


class StyleParseError(ValueError):
    """A style string could not be interpreted."""


class DecorationAttributes(Flag):
    EMPTY = 0
    BOX = 1
    OVERLINE = 2
    UNDERLINE = 4


def _words(s: str):
    for word in s.lower().split():
        yield word.strip(_QUOTES)


def _parse_color_word(word: str, true_color: bool) -> Optional[Color]:
    try:
        return parse_color(word, true_color)
    except ValueError as exc:
        raise StyleParseError(str(exc)) from exc


def parse_ansi_term_style(
    s: str, default: Optional[Style], true_color: bool
) -> Tuple[AnsiStyle, bool, bool, bool]:
    """Parse a style string into (ansi style, is_omitted, is_raw, is_syntax_highlighted).

    The first colour word is the foreground and the second the background; 'auto' takes the
    colour from the default style and 'syntax' (foreground only) requests syntax highlighting.
    """
    attributes = {}
    foreground: Optional[Color] = None
    background: Optional[Color] = None
    seen_foreground = seen_background = False
    foreground_is_auto = background_is_auto = False
    is_omitted = is_raw = False
    seen_omit = seen_raw = False
    is_syntax_highlighted = False

    for word in _words(s):
        if word in _ATTRIBUTE_WORDS:
            attributes[_ATTRIBUTE_WORDS[word]] = True
        elif word == "omit":
            seen_omit = is_omitted = True
        elif word == "raw":
            seen_raw = is_raw = True
        elif word in _IGNORED_WORDS:
            continue
        elif not seen_foreground:
            if word == "syntax":
                is_syntax_highlighted = True
            elif word == "auto":
                foreground_is_auto = True
                foreground = default.ansi_term_style.foreground if default else None
                is_syntax_highlighted = default.is_syntax_highlighted if default else False
            else:
                foreground = _parse_color_word(word, true_color)
            seen_foreground = True
        elif not seen_background:
            if word == "syntax":
                raise StyleParseError(
                    "You have used the special color 'syntax' as a background color "
                    "(second color in a style string). It may only be used as a foreground "
                    "color (first color in a style string)."
                )
            if word == "auto":
                background_is_auto = True
                background = default.ansi_term_style.background if default else None
            else:
                background = _parse_color_word(word, true_color)
            seen_background = True
        else:
            raise StyleParseError(
                f"Invalid style string: {s}. See the STYLES section of the help text."
            )

    if foreground_is_auto and background_is_auto:
        if not seen_omit:
            is_omitted = default.is_omitted if default else False
        if not seen_raw:
            is_raw = default.is_raw if default else False

    style = AnsiStyle(foreground=foreground, background=background, **attributes)
    return style, is_omitted, is_raw, is_syntax_highlighted


def _extract_special_decoration_attributes(
    style_string: str, is_decoration_style_string: bool
) -> Tuple[DecorationAttributes, str]:
    # In a decoration style string ul/ol request an underline/overline decoration;
    # elsewhere they are ordinary character attributes.
    attributes = DecorationAttributes.EMPTY
    remaining = []
    for token in _words(style_string):
        if token == "box":
            attributes |= DecorationAttributes.BOX
        elif token == "overline" or (is_decoration_style_string and token == "ol"):
            attributes |= DecorationAttributes.OVERLINE
        elif token == "underline" or (is_decoration_style_string and token == "ul"):
            attributes |= DecorationAttributes.UNDERLINE
        elif token in ("none", "plain"):
            continue
        else:
            remaining.append(token)
    return attributes, " ".join(remaining)


def extract_special_decoration_attributes(
    style_string: str,
) -> Tuple[DecorationAttributes, str]:
    """Split a decoration style string into its decoration attributes and the rest."""
    return _extract_special_decoration_attributes(style_string, True)


def extract_special_decoration_attributes_from_non_decoration_style_string(
    style_string: str,
) -> Tuple[DecorationAttributes, str]:
    """As extract_special_decoration_attributes, but 'ul' and 'ol' stay in the style string."""
    return _extract_special_decoration_attributes(style_string, False)