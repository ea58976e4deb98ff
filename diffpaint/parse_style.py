"""Construction of styles and decoration styles from style strings."""

from __future__ import annotations

from dataclasses import replace
from typing import Optional

from diffpaint.ansi import AnsiStyle
from diffpaint.style import DecorationKind, DecorationStyle, Style
from diffpaint.style_words import (
    DecorationAttributes,
    StyleParseError,
    extract_special_decoration_attributes,
    extract_special_decoration_attributes_from_non_decoration_style_string,
    parse_ansi_term_style,
)

_BOX = DecorationAttributes.BOX
_UL = DecorationAttributes.UNDERLINE
_OL = DecorationAttributes.OVERLINE

_DECORATION_KINDS = {
    DecorationAttributes.EMPTY: DecorationKind.NO_DECORATION,
    _BOX: DecorationKind.BOX,
    _UL: DecorationKind.UNDERLINE,
    _OL: DecorationKind.OVERLINE,
    _UL | _OL: DecorationKind.UNDER_OVERLINE,
    _BOX | _UL: DecorationKind.BOX_WITH_UNDERLINE,
    _BOX | _OL: DecorationKind.BOX_WITH_OVERLINE,
    _BOX | _UL | _OL: DecorationKind.BOX_WITH_UNDER_OVERLINE,
}


def decoration_style_from_str(style_string: str, true_color: bool = True) -> DecorationStyle:
    """Parse a decoration style string such as 'box ul red'."""
    special_attributes, remaining = extract_special_decoration_attributes(style_string)
    ansi_style, _is_omitted, is_raw, is_syntax_highlighted = parse_ansi_term_style(
        remaining, None, true_color
    )
    if is_raw:
        raise StyleParseError("'raw' may not be used in a decoration style.")
    if is_syntax_highlighted:
        raise StyleParseError("'syntax' may not be used in a decoration style.")
    kind = _DECORATION_KINDS.get(special_attributes, DecorationKind.NO_DECORATION)
    return DecorationStyle(kind, ansi_style)


def apply_special_decoration_attributes(
    style: Style, special_attributes: DecorationAttributes
) -> DecorationStyle:
    """The decoration of style, with its kind replaced by the given attributes if any."""
    if special_attributes == DecorationAttributes.EMPTY:
        return style.decoration_style
    kind = _DECORATION_KINDS.get(special_attributes, DecorationKind.NO_DECORATION)
    return DecorationStyle(kind, style.decoration_style.ansi_term_style)


def style_from_str(
    style_string: str,
    default: Optional[Style] = None,
    decoration_style_string: Optional[str] = None,
    true_color: bool = True,
    is_emph: bool = False,
) -> Style:
    """Build a Style from a style string and an optional decoration style string.

    A style string holds up to two colours (foreground, then background) and any number
    of attributes.
    """
    ansi_style, is_omitted, is_raw, is_syntax_highlighted = parse_ansi_term_style(
        style_string, default, true_color
    )
    decoration_style = decoration_style_from_str(decoration_style_string or "", true_color)
    return Style(
        ansi_term_style=ansi_style,
        is_emph=is_emph,
        is_omitted=is_omitted,
        is_raw=is_raw,
        is_syntax_highlighted=is_syntax_highlighted,
        decoration_style=decoration_style,
    )


def style_from_git_str(git_style_string: str) -> Style:
    """Build a Style from a git colour configuration value."""
    return style_from_str(git_style_string, None, None, True, False)


def style_from_str_with_special_decoration_attributes(
    style_string: str,
    default: Optional[Style] = None,
    decoration_style_string: Optional[str] = None,
    true_color: bool = True,
    is_emph: bool = False,
) -> Style:
    """As style_from_str, but 'box', 'overline' and 'underline' set the decoration kind."""
    special_attributes, remaining = (
        extract_special_decoration_attributes_from_non_decoration_style_string(style_string)
    )
    style = style_from_str(remaining, default, decoration_style_string, true_color, is_emph)
    return replace(
        style,
        decoration_style=apply_special_decoration_attributes(style, special_attributes),
    )


def style_from_str_with_deprecated_foreground(
    style_string: str,
    default: Optional[Style] = None,
    decoration_style_string: Optional[str] = None,
    deprecated_foreground_color_arg: Optional[str] = None,
    true_color: bool = True,
    is_emph: bool = False,
) -> Style:
    """As style_from_str_with_special_decoration_attributes, with an overriding foreground.

    The foreground colour, when given, applies to both the text and the decoration.
    """
    style = style_from_str_with_special_decoration_attributes(
        style_string, default, decoration_style_string, true_color, is_emph
    )
    if deprecated_foreground_color_arg is None:
        return style
    foreground = parse_ansi_term_style(deprecated_foreground_color_arg, None, true_color)[
        0
    ].foreground
    decoration = style.decoration_style
    if decoration.kind is not DecorationKind.NO_DECORATION:
        decoration = DecorationStyle(
            decoration.kind, replace(decoration.ansi_term_style, foreground=foreground)
        )
    return replace(
        style,
        ansi_term_style=replace(style.ansi_term_style, foreground=foreground),
        decoration_style=decoration,
    )


__all__ = [
    "AnsiStyle",
    "apply_special_decoration_attributes",
    "decoration_style_from_str",
    "style_from_git_str",
    "style_from_str",
    "style_from_str_with_deprecated_foreground",
    "style_from_str_with_special_decoration_attributes",
]