"""Colours and styles as produced by a syntax highlighter, and their mapping to terminal colours."""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Optional

from diffpaint.ansi import Color, parse_color


@dataclass(frozen=True)
class SyntaxColor:
    """An RGBA colour. Alpha 0 marks a terminal palette index held in the red channel."""

    r: int
    g: int
    b: int
    a: int = 0xFF

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not isinstance(channel, int) or not 0 <= channel <= 255:
                raise ValueError(f"Invalid colour channel value: {channel!r}")


BLACK = SyntaxColor(0x00, 0x00, 0x00, 0xFF)
WHITE = SyntaxColor(0xFF, 0xFF, 0xFF, 0xFF)


@dataclass(frozen=True)
class SyntaxStyle:
    """Foreground, background and font style of a highlighted span."""

    foreground: SyntaxColor = SyntaxColor(0, 0, 0, 0)
    background: SyntaxColor = SyntaxColor(0, 0, 0, 0)
    font_style: FrozenSet[str] = frozenset()


def syntect_color_from_ansi_number(n: int) -> Optional[SyntaxColor]:
    """Encode a 256-colour index as a colour with the index in red and zero alpha."""
    if not 0 <= n <= 255:
        return None
    return SyntaxColor(n, 0, 0, 0)


def syntect_color_from_ansi_name(name: str) -> Optional[SyntaxColor]:
    """Encode one of the 16 named terminal colours; None for anything else."""
    if not name.isalpha():
        return None
    try:
        color = parse_color(name, True)
    except ValueError:
        return None
    if color is None:
        return None
    return syntect_color_from_ansi_number(color.value)


def to_ansi_color(color: SyntaxColor, true_color: bool) -> Optional[Color]:
    """Convert a highlighter colour to a terminal colour."""
    if color.a == 0:
        if color.r < 8:
            return Color.named(color.r)
        return Color.fixed(color.r)
    if color.a == 1:
        return None
    return parse_color(f"#{color.r:02x}{color.g:02x}{color.b:02x}", true_color)