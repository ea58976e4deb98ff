"""Rewrite rules for options.

They express deprecated usages in their current form and implement options defined as
equivalent to a set of other options.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Collection, Optional, Tuple

HUNK_HEADER_DECORATION_DEFAULT = "blue box"


class OptionRewriteError(ValueError):
    """Deprecated and current options were combined in a way that cannot be honoured."""


@dataclass
class RewritableOptions:
    """The options that the rewrite rules read and change."""

    minus_style: str = "normal auto"
    minus_emph_style: str = "normal auto"
    plus_style: str = "syntax auto"
    plus_emph_style: str = "syntax auto"
    commit_style: str = "raw"
    commit_decoration_style: str = ""
    file_style: str = "blue"
    file_decoration_style: str = "blue ul"
    hunk_header_decoration_style: str = HUNK_HEADER_DECORATION_DEFAULT
    syntax_theme: Optional[str] = None
    deprecated_theme: Optional[str] = None
    deprecated_hunk_style: Optional[str] = None
    deprecated_highlight_minus_lines: bool = False
    deprecated_minus_background_color: Optional[str] = None
    deprecated_minus_emph_background_color: Optional[str] = None
    deprecated_plus_background_color: Optional[str] = None
    deprecated_plus_emph_background_color: Optional[str] = None


def apply_rewrite_rules(
    opt: RewritableOptions, supplied_options: Collection[str] = ()
) -> RewritableOptions:
    """Apply all rewrite rules to opt in place and return it.

    supplied_options holds the names of the options given explicitly by the user.
    """
    _rewrite_style_strings_for_deprecated_minus_plus_options(opt)
    _rewrite_deprecated_commit_and_file_style_box(opt)
    _rewrite_deprecated_hunk_style(opt)
    _rewrite_deprecated_theme(opt, supplied_options)
    return opt


def _rewrite_deprecated_theme(opt: RewritableOptions, supplied_options: Collection[str]) -> None:
    if "deprecated-theme" in supplied_options and opt.deprecated_theme is not None:
        opt.syntax_theme = opt.deprecated_theme


def _rewrite_style_strings_for_deprecated_minus_plus_options(opt: RewritableOptions) -> None:
    minus_foreground = "syntax" if opt.deprecated_highlight_minus_lines else None
    rules = (
        ("minus_style", ("normal", "auto"), minus_foreground,
         opt.deprecated_minus_background_color, "minus"),
        ("minus_emph_style", ("normal", "auto"), minus_foreground,
         opt.deprecated_minus_emph_background_color, "minus-emph"),
        ("plus_style", ("syntax", "auto"), None,
         opt.deprecated_plus_background_color, "plus"),
        ("plus_emph_style", ("syntax", "auto"), None,
         opt.deprecated_plus_emph_background_color, "plus-emph"),
    )
    for field, default_pair, foreground, background, element_name in rules:
        rewritten = _rewritten_minus_plus_style_string(
            getattr(opt, field), default_pair, (foreground, background), element_name
        )
        if rewritten is not None:
            setattr(opt, field, rewritten)


def _rewrite_deprecated_commit_and_file_style_box(opt: RewritableOptions) -> None:
    # --{commit,file}-style box means --{commit,file}-decoration-style 'box ul'.
    if opt.commit_style == "box":
        opt.commit_decoration_style = f"box ul {opt.commit_decoration_style}"
        opt.commit_style = ""
    if opt.file_style == "box":
        opt.file_decoration_style = f"box ul {opt.file_decoration_style}"
        opt.file_style = ""


def _rewrite_deprecated_hunk_style(opt: RewritableOptions) -> None:
    # --hunk-style box       => --hunk-header-decoration-style box
    # --hunk-style underline => --hunk-header-decoration-style underline
    # --hunk-style plain     => --hunk-header-decoration-style ''
    if opt.deprecated_hunk_style is None:
        return
    if opt.hunk_header_decoration_style != HUNK_HEADER_DECORATION_DEFAULT:
        raise OptionRewriteError(
            "Deprecated option --hunk-style cannot be used with "
            "--hunk-header-decoration-style. Use --hunk-header-decoration-style."
        )
    attr = opt.deprecated_hunk_style.lower()
    if attr == "plain":
        opt.hunk_header_decoration_style = ""
    elif attr:
        opt.hunk_header_decoration_style = attr
    opt.deprecated_hunk_style = None


def _rewritten_minus_plus_style_string(
    style: str,
    default_pair: Tuple[str, str],
    deprecated_pair: Tuple[Optional[str], Optional[str]],
    element_name: str,
) -> Optional[str]:
    foreground, background = deprecated_pair
    if foreground is None and background is None:
        return None
    # Deprecated values only take effect while the style is at its default value.
    if style == f"{default_pair[0]} {default_pair[1]}":
        return f"{foreground or default_pair[0]} {background or default_pair[1]}"
    if background is not None:
        raise OptionRewriteError(
            f"--{element_name}-color cannot be used with --{element_name}-style. "
            f'Use --{element_name}-style="fg bg attr1 attr2 ..." to set foreground color, '
            f"background color, and style attributes. --{element_name}-color can only be "
            "used to set the background color. (It is still available for "
            "backwards-compatibility.)"
        )
    raise OptionRewriteError(
        f"Deprecated option --highlight-removed cannot be used with --{element_name}-style. "
        f'Use --{element_name}-style="fg bg attr1 attr2 ..." to set foreground color, '
        "background color, and style attributes."
    )