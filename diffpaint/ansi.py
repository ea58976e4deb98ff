"""ANSI colours, SGR text styles and parsing of SGR escape sequences."""

from __future__ import annotations

import re
from dataclasses import dataclass, fields
from typing import Iterator, Optional, Tuple, Union

ANSI_SGR_RESET = "\x1b[0m"

ANSI_16_COLOR_NAMES = (
    "black",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "white",
)

_NAME_ALIASES = {"purple": "magenta"}
_SGR_RE = re.compile(r"\x1b\[([0-9;]*)m")
_DIGITS_RE = re.compile(r"[0-9]+")
_HEX_RE = re.compile(r"#([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})")
_CUBE_LEVELS = (0, 95, 135, 175, 215, 255)

_COLOR_KINDS = ("named", "fixed", "rgb")


@dataclass(frozen=True)
class Color:
    """A terminal colour: one of the 8 basic colours, a 256-colour index, or 24-bit RGB."""

    kind: str
    value: Union[int, Tuple[int, int, int]]

    def __post_init__(self) -> None:
        if self.kind not in _COLOR_KINDS:
            raise ValueError(f"Unknown colour kind: {self.kind!r}")
        if self.kind == "named":
            if not isinstance(self.value, int) or not 0 <= self.value < 8:
                raise ValueError(f"Invalid basic colour index: {self.value!r}")
        elif self.kind == "fixed":
            if not isinstance(self.value, int) or not 0 <= self.value <= 255:
                raise ValueError(f"Invalid 256-colour index: {self.value!r}")
        else:
            if (
                not isinstance(self.value, tuple)
                or len(self.value) != 3
                or not all(isinstance(c, int) and 0 <= c <= 255 for c in self.value)
            ):
                raise ValueError(f"Invalid RGB colour: {self.value!r}")

    @classmethod
    def named(cls, index: int) -> "Color":
        return cls("named", index)

    @classmethod
    def fixed(cls, index: int) -> "Color":
        return cls("fixed", index)

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> "Color":
        return cls("rgb", (r, g, b))

    def sgr_code(self, background: bool = False) -> str:
        """The SGR parameter string selecting this colour."""
        if self.kind == "named":
            return str((40 if background else 30) + self.value)
        lead = "48" if background else "38"
        if self.kind == "fixed":
            return f"{lead};5;{self.value}"
        r, g, b = self.value
        return f"{lead};2;{r};{g};{b}"


BLACK = Color.named(0)
RED = Color.named(1)
GREEN = Color.named(2)
YELLOW = Color.named(3)
BLUE = Color.named(4)
MAGENTA = Color.named(5)
CYAN = Color.named(6)
WHITE = Color.named(7)

# Attribute fields in the order their SGR codes are emitted.
_ATTRIBUTE_CODES = (
    ("is_bold", 1),
    ("is_dimmed", 2),
    ("is_italic", 3),
    ("is_underline", 4),
    ("is_blink", 5),
    ("is_reverse", 7),
    ("is_hidden", 8),
    ("is_strikethrough", 9),
)
_ATTRIBUTE_ON = {code: name for name, code in _ATTRIBUTE_CODES}
_ATTRIBUTE_OFF = {
    22: ("is_bold", "is_dimmed"),
    23: ("is_italic",),
    24: ("is_underline",),
    25: ("is_blink",),
    27: ("is_reverse",),
    28: ("is_hidden",),
    29: ("is_strikethrough",),
}


@dataclass(frozen=True)
class AnsiStyle:
    """Foreground and background colours plus character attributes."""

    foreground: Optional[Color] = None
    background: Optional[Color] = None
    is_bold: bool = False
    is_dimmed: bool = False
    is_italic: bool = False
    is_underline: bool = False
    is_blink: bool = False
    is_reverse: bool = False
    is_hidden: bool = False
    is_strikethrough: bool = False

    @property
    def is_plain(self) -> bool:
        return self == AnsiStyle()

    def prefix(self) -> str:
        """The escape sequence that switches this style on, or '' for a plain style."""
        if self.is_plain:
            return ""
        codes = [str(code) for name, code in _ATTRIBUTE_CODES if getattr(self, name)]
        if self.foreground is not None:
            codes.append(self.foreground.sgr_code(background=False))
        if self.background is not None:
            codes.append(self.background.sgr_code(background=True))
        return "\x1b[" + ";".join(codes) + "m"

    def paint(self, text: str) -> str:
        """Wrap text in this style's escape sequences."""
        if self.is_plain:
            return text
        return f"{self.prefix()}{text}{ANSI_SGR_RESET}"


def _ansi256_from_rgb(r: int, g: int, b: int) -> int:
    def nearest_level(c: int) -> int:
        return min(range(len(_CUBE_LEVELS)), key=lambda i: abs(_CUBE_LEVELS[i] - c))

    ir, ig, ib = (nearest_level(c) for c in (r, g, b))
    cube = (_CUBE_LEVELS[ir], _CUBE_LEVELS[ig], _CUBE_LEVELS[ib])
    cube_distance = sum((x - y) ** 2 for x, y in zip(cube, (r, g, b)))

    grey_index = min(23, max(0, round(((r + g + b) / 3 - 8) / 10)))
    grey = 8 + 10 * grey_index
    grey_distance = sum((grey - c) ** 2 for c in (r, g, b))

    if cube_distance <= grey_distance:
        return 16 + 36 * ir + 6 * ig + ib
    return 232 + grey_index


def parse_color(s: str, true_color: bool) -> Optional[Color]:
    """Parse a colour word; 'normal' means no colour. Raises ValueError when invalid."""
    word = s.strip().lower()
    if word == "normal":
        return None
    hex_match = _HEX_RE.fullmatch(word)
    if hex_match:
        r, g, b = (int(part, 16) for part in hex_match.groups())
        if true_color:
            return Color.rgb(r, g, b)
        return Color.fixed(_ansi256_from_rgb(r, g, b))
    if _DIGITS_RE.fullmatch(word):
        number = int(word)
        if number > 255:
            raise ValueError(f"Invalid color: {s} (256-colour indices are 0-255)")
        return Color.fixed(number)
    bright = word.startswith("bright")
    name = word[len("bright"):] if bright else word
    name = _NAME_ALIASES.get(name, name)
    if name in ANSI_16_COLOR_NAMES:
        index = ANSI_16_COLOR_NAMES.index(name)
        return Color.fixed(index + 8) if bright else Color.named(index)
    raise ValueError(f"Invalid color or style attribute: {s}")


def color_to_string(color: Color) -> str:
    """A colour word that parse_color turns back into the same colour."""
    if color.kind == "named":
        return ANSI_16_COLOR_NAMES[color.value]
    if color.kind == "fixed":
        if 8 <= color.value < 16:
            return "bright" + ANSI_16_COLOR_NAMES[color.value - 8]
        return str(color.value)
    r, g, b = color.value
    return f"#{r:02x}{g:02x}{b:02x}"


def _extended_color(params: Iterator[int]) -> Optional[Color]:
    mode = next(params, None)
    try:
        if mode == 5:
            index = next(params, None)
            return None if index is None else Color.fixed(index)
        if mode == 2:
            channels = [next(params, None) for _ in range(3)]
            if None in channels:
                return None
            return Color.rgb(*channels)
    except ValueError:
        return None
    return None


def _style_from_sgr_params(text: str) -> AnsiStyle:
    state = {f.name: f.default for f in fields(AnsiStyle)}
    params = iter([int(p) if p else 0 for p in text.split(";")] if text else [])
    for code in params:
        if code == 0:
            state = {f.name: f.default for f in fields(AnsiStyle)}
        elif code in _ATTRIBUTE_ON:
            state[_ATTRIBUTE_ON[code]] = True
        elif code in _ATTRIBUTE_OFF:
            for name in _ATTRIBUTE_OFF[code]:
                state[name] = False
        elif 30 <= code <= 37:
            state["foreground"] = Color.named(code - 30)
        elif code == 38:
            state["foreground"] = _extended_color(params)
        elif code == 39:
            state["foreground"] = None
        elif 40 <= code <= 47:
            state["background"] = Color.named(code - 40)
        elif code == 48:
            state["background"] = _extended_color(params)
        elif code == 49:
            state["background"] = None
        elif 90 <= code <= 97:
            state["foreground"] = Color.fixed(code - 90 + 8)
        elif 100 <= code <= 107:
            state["background"] = Color.fixed(code - 100 + 8)
    return AnsiStyle(**state)


def parse_first_style(s: str) -> Optional[AnsiStyle]:
    """The style set by the first SGR escape sequence in s, or None if there is none."""
    match = _SGR_RE.search(s)
    if match is None:
        return None
    return _style_from_sgr_params(match.group(1))


def starts_with_ansi_style_sequence(s: str) -> bool:
    """True if s begins with an SGR escape sequence."""
    return _SGR_RE.match(s) is not None