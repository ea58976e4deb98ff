"""Choice of syntax-highlighting theme and of light versus dark background mode.

If light or dark mode is not chosen explicitly it follows from the syntax theme; with no
syntax theme chosen a dark-background default is used.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Collection, Mapping, Optional, Tuple

LIGHT_SYNTAX_THEMES = (
    "GitHub",
    "gruvbox-light",
    "gruvbox-white",
    "Monokai Extended Light",
    "OneHalfLight",
    "Solarized (light)",
)

DEFAULT_LIGHT_SYNTAX_THEME = "GitHub"
DEFAULT_DARK_SYNTAX_THEME = "Monokai Extended"


@dataclass(frozen=True)
class ThemeSelection:
    """The chosen mode and syntax theme; a theme of None means no syntax highlighting."""

    is_light_mode: bool
    syntax_theme: Optional[str]


def is_light_syntax_theme(theme: str) -> bool:
    return theme in LIGHT_SYNTAX_THEMES or "light" in theme.lower()


def is_no_syntax_highlighting_syntax_theme_name(theme_name: str) -> bool:
    return theme_name.lower() == "none"


def valid_syntax_theme_name_or_none(
    theme_name: Optional[str], theme_names: Collection[str]
) -> Optional[str]:
    """The name if it is a known theme or the special no-highlighting name, else None."""
    if theme_name is not None and (
        is_no_syntax_highlighting_syntax_theme_name(theme_name) or theme_name in theme_names
    ):
        return theme_name
    return None


def get_is_light_mode_and_syntax_theme_name(
    theme_arg: Optional[str],
    bat_theme_env_var: Optional[str],
    light_mode_arg: bool,
    theme_names: Collection[str],
) -> Tuple[bool, str]:
    """Return (is_light_mode, theme_name).

    An explicit theme takes precedence over BAT_THEME; an explicit light mode takes
    precedence over the mode inferred from the theme.
    """
    theme = valid_syntax_theme_name_or_none(theme_arg, theme_names)
    if theme is None:
        theme = valid_syntax_theme_name_or_none(bat_theme_env_var, theme_names)
    if theme is None:
        if light_mode_arg:
            return True, DEFAULT_LIGHT_SYNTAX_THEME
        return False, DEFAULT_DARK_SYNTAX_THEME
    if light_mode_arg:
        return True, theme
    return is_light_syntax_theme(theme), theme


def select_theme(
    syntax_theme: Optional[str],
    light: bool,
    theme_names: Collection[str],
    environ: Optional[Mapping[str, str]] = None,
) -> ThemeSelection:
    """Choose mode and theme from the options and the BAT_THEME environment variable."""
    env = os.environ if environ is None else environ
    is_light_mode, theme_name = get_is_light_mode_and_syntax_theme_name(
        syntax_theme, env.get("BAT_THEME"), light, theme_names
    )
    if is_no_syntax_highlighting_syntax_theme_name(theme_name):
        return ThemeSelection(is_light_mode, None)
    return ThemeSelection(is_light_mode, theme_name)