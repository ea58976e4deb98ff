# diffpaint

Building blocks for colourising `git diff` output in a terminal.

- `diffpaint.ansi`: terminal colours (`Color`), text styles (`AnsiStyle`),
  colour words (`parse_color`, `color_to_string`) and reading the style set by
  the first SGR escape sequence in a string (`parse_first_style`,
  `starts_with_ansi_style_sequence`).
- `diffpaint.style`: `Style` and `DecorationStyle`, comparison of styles that
  treats 256-colour indices 0–7 as the basic colours
  (`ansi_term_style_equality`), and `line_has_style_other_than`, which tells
  whether a line from git already carries a style other than the expected ones.
- `diffpaint.style_words` and `diffpaint.parse_style`: style strings such as
  `"bold red #ddeeff"` and decoration strings such as
  `"ol red box bold green ul"` turned into styles.
- `diffpaint.syntax_color`: RGBA colours and styles as a syntax highlighter
  produces them, and their conversion to terminal colours (`to_ansi_color`).
- `diffpaint.parse`: file paths and events from `---`/`+++`/`rename`/`copy`/
  `mode` lines, `diff --git` lines, hunk headers, diff-stat lines, relative
  paths (`diff_paths`) and file-change descriptions.
- `diffpaint.superimpose`: laying syntax-highlighting foreground colours over
  diff styles, character by character.
- `diffpaint.paint`: tab expansion, line preparation, whitespace-error
  detection, the non-emph and whitespace-error style rules (`update_styles`),
  background fill to the end of the line, empty-line marking and painting of
  a prepared line (`paint_sections`).
- `diffpaint.options`: option values tagged with their provenance
  (`option_value`), rewriting of deprecated options (`rewrite`), and choice of
  syntax theme and light or dark mode (`theme`).

## Installation

```
pip install .
```

## Examples

Parse a style string and paint text with it:

```python
from diffpaint.parse_style import style_from_str

style = style_from_str("bold red green", None, "box ul", True, False)
print(style.paint("hello"))
print(style)            # bold red green
```

Parse diff metadata:

```python
from diffpaint.parse import parse_file_meta_line, parse_hunk_header

parse_hunk_header("@@ -74,15 +75,14 @@ pub fn delta(\n")
# (" pub fn delta(\n", [(74, 15), (75, 14)])

path, event = parse_file_meta_line("--- a/src/main.rs", True, None)
# path == "src/main.rs", event.kind is FileEventKind.CHANGE
```

Check whether a line from git already has a style other than the expected ones:

```python
from diffpaint.parse_style import style_from_git_str
from diffpaint.style import line_has_style_other_than

plus = style_from_git_str("green")
line_has_style_other_than("\x1b[32m+\x1b[m\x1b[32mtext\x1b[m\n", [plus])  # False
```

Prepare and paint a line:

```python
from diffpaint.paint import paint_sections, prepare
from diffpaint.style import Style
from diffpaint.syntax_color import SyntaxStyle

line = prepare("+\tfoo", 4)        # "     foo\n"
paint_sections([(SyntaxStyle(), line)], [(Style(), line)])
# ("    foo", False)
```

Rewrite deprecated options and choose a theme:

```python
from diffpaint.options.rewrite import RewritableOptions, apply_rewrite_rules
from diffpaint.options.theme import select_theme

opt = apply_rewrite_rules(RewritableOptions(deprecated_hunk_style="underline"))
opt.hunk_header_decoration_style   # "underline"

select_theme(None, False, {"GitHub", "Monokai Extended"}, {"BAT_THEME": "GitHub"})
# ThemeSelection(is_light_mode=True, syntax_theme="GitHub")
```

## Errors

- Invalid style strings raise `diffpaint.style_words.StyleParseError`.
- Conflicting deprecated and current options raise
  `diffpaint.options.rewrite.OptionRewriteError`.
- `ProvenancedOptionValue.as_type` raises `OptionValueTypeError` when the value
  is not of the expected type.
- Superimposing sections over different text raises
  `diffpaint.superimpose.StyleMismatchError`.
- `parse_hunk_header` raises `ValueError` for a line that is not a hunk header.

## What it does not do

This is a library of parts, not a finished diff viewer. It has no command to
run, does not read `git diff` output from a stream or drive a pager, does not
read git configuration files, and contains no syntax highlighter or theme
definitions: syntax styles and the set of known theme names are supplied by
the caller.

## Running the tests

```
pip install ".[test]"
pytest
```