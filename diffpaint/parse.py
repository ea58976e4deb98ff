"""Parsing of diff metadata lines: file paths, file events, diff stats and hunk headers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

import regex

# Mnemonic prefixes that git may put in front of file paths (diff.mnemonicPrefix).
DIFF_PREFIXES = ("a/", "b/", "c/", "i/", "o/", "w/")

# Captures the path, and the content from the pipe onwards, in lines like
# " src/delta.rs  | 14 ++++++++++----"
DIFF_STAT_LINE_REGEX = re.compile(r" ([^\| ][^\|]+[^\| ]) +(\| +[0-9]+ .+)")

_HUNK_HEADER_REGEX = re.compile(r"@+ ([^@]+)@+(.*\s?)")
_HUNK_HEADER_FILE_COORDINATE_REGEX = re.compile(
    r"""
    [-+]
    (\d+)            # hunk start line number
    (?:
      ,
      (\d+)          # optional hunk length (defaults to 1)
    )?
    """,
    re.VERBOSE,
)

_GRAPHEME_REGEX = regex.compile(r"\X")

_ARROW = "⟶  "


class FileEventKind(Enum):
    CHANGE = "change"
    COPY = "copy"
    RENAME = "rename"
    MODE_CHANGE = "mode-change"
    NO_EVENT = "no-event"


@dataclass(frozen=True)
class FileEvent:
    """What a file metadata line says happened; mode changes carry the mode."""

    kind: FileEventKind
    mode: Optional[str] = None


@dataclass(frozen=True)
class FileLabels:
    """Labels put in front of file names in file change descriptions."""

    modified: str = ""
    removed: str = ""
    added: str = ""
    renamed: str = ""
    copied: str = ""


def _components(path: str) -> List[str]:
    """Path components: a leading '/' for absolute paths, no empty or inner '.' parts."""
    parts = path.split("/")
    components: List[str] = []
    if path.startswith("/"):
        components.append("/")
    elif parts and parts[0] == ".":
        components.append(".")
    components.extend(part for part in parts if part and part != ".")
    return components


def diff_paths(path: str, base: str) -> Optional[str]:
    """The relative path leading from base to path, or None if there is none."""
    path_is_absolute = path.startswith("/")
    base_is_absolute = base.startswith("/")
    if path_is_absolute != base_is_absolute:
        return path if path_is_absolute else None

    path_parts = iter(_components(path))
    base_parts = iter(_components(base))
    result: List[str] = []
    while True:
        a = next(path_parts, None)
        b = next(base_parts, None)
        if a is None and b is None:
            break
        if b is None:
            result.append(a)
            result.extend(path_parts)
            break
        if a is None:
            result.append("..")
        elif not result and a == b:
            continue
        elif b == ".":
            result.append(a)
        elif b == "..":
            return None
        else:
            result.append("..")
            result.extend(".." for _ in base_parts)
            result.append(a)
            result.extend(path_parts)
            break
    return "/".join(result)


def get_file_extension_from_marker_line(line: str) -> Optional[str]:
    """Given '--- one.rs\\t2019-11-20 06:16:08.000000000 +0100' return 'rs'."""
    column = line.split("\t", 1)[0]
    words = column.split(" ")
    if len(words) < 2:
        return None
    return words[1].split(".")[-1]


def _parse_file_path(s: str, git_diff_name: bool) -> str:
    # If a file name contains a space, git appends a tab to the path in metadata lines.
    path = s[:-1] if s.endswith("\t") else s
    if path == "/dev/null":
        return path
    if git_diff_name:
        if path.startswith(DIFF_PREFIXES):
            return path[2:]
        return path
    return path.split("\t", 1)[0]


_META_LINE_PREFIXES = (
    ("rename from ", FileEventKind.RENAME),
    ("rename to ", FileEventKind.RENAME),
    ("copy from ", FileEventKind.COPY),
    ("copy to ", FileEventKind.COPY),
)


def parse_file_meta_line(
    line: str, git_diff_name: bool, relative_path_base: Optional[str] = None
) -> Tuple[str, FileEvent]:
    """Return the path named in a file metadata line and the event it describes."""
    if line.startswith(("--- ", "+++ ")):
        path_or_mode = _parse_file_path(line[4:], git_diff_name)
        event = FileEvent(FileEventKind.CHANGE)
    elif line.startswith(("old mode ", "new mode ")):
        path_or_mode = ""
        event = FileEvent(FileEventKind.MODE_CHANGE, line[9:])
    else:
        for prefix, kind in _META_LINE_PREFIXES:
            if line.startswith(prefix):
                path_or_mode = line[len(prefix):]
                event = FileEvent(kind)
                break
        else:
            path_or_mode = ""
            event = FileEvent(FileEventKind.NO_EVENT)

    if relative_path_base is not None and event.kind is not FileEventKind.MODE_CHANGE:
        relative_path = diff_paths(path_or_mode, relative_path_base)
        if relative_path is not None:
            path_or_mode = relative_path

    return path_or_mode, event


def get_repeated_file_path_from_diff_line(line: str) -> Optional[str]:
    """Given 'diff --git a/src/my file.rs b/src/my file.rs' return 'src/my file.rs'."""
    prefix = "diff --git "
    if not line.startswith(prefix):
        return None
    graphemes = _GRAPHEME_REGEX.findall(line[len(prefix):])
    if not graphemes:
        return None
    midpoint = len(graphemes) // 2
    if graphemes[midpoint] != " ":
        return None
    first_path = _parse_file_path("".join(graphemes[:midpoint]), True)
    second_path = _parse_file_path("".join(graphemes[midpoint + 1:]), True)
    return first_path if first_path == second_path else None


def relativize_path_in_diff_stat_line(
    line: str, cwd_relative_to_repo_root: str, diff_stat_align_width: int
) -> Optional[str]:
    """Rewrite a diff stat line so that its path is relative to the working directory."""
    match = DIFF_STAT_LINE_REGEX.search(line)
    if match is None:
        return None
    relative_path = diff_paths(match.group(1), cwd_relative_to_repo_root)
    if relative_path is None:
        return None
    padding = " " * max(0, diff_stat_align_width - len(relative_path))
    return f" {relative_path}{padding}{match.group(2)}"


def _file_name(path: str) -> Optional[str]:
    parts = [part for part in path.split("/") if part and part != "."]
    if not parts or parts[-1] == "..":
        return None
    return parts[-1]


def _get_extension(path: str) -> Optional[str]:
    """The extension of the file name, or the whole file name if it has none (e.g. Makefile)."""
    name = _file_name(path)
    if name is None:
        return None
    dot = name.rfind(".")
    if dot > 0:
        return name[dot + 1:]
    return name


def get_file_extension_from_file_meta_line_file_path(path: str) -> Optional[str]:
    if not path or path == "/dev/null":
        return None
    extension = _get_extension(path)
    return None if extension is None else extension.strip()


def _format_label(label: str) -> str:
    return f"{label} " if label else ""


def get_file_change_description_from_file_paths(
    minus_file: str,
    plus_file: str,
    comparing: bool,
    minus_file_event: FileEvent,
    plus_file_event: FileEvent,
    labels: FileLabels = FileLabels(),
) -> str:
    """Describe a file change, e.g. 'src/main.rs: mode +x' or 'renamed: a ⟶   b'."""
    if comparing:
        return f"comparing: {minus_file} {_ARROW} {plus_file}"
    if (
        minus_file_event.kind is FileEventKind.MODE_CHANGE
        and plus_file_event.kind is FileEventKind.MODE_CHANGE
        and minus_file == plus_file
    ):
        old_mode, new_mode = minus_file_event.mode, plus_file_event.mode
        # 100755 (executable) and 100644 are the only file modes git records.
        if (old_mode, new_mode) == ("100644", "100755"):
            return f"{plus_file}: mode +x"
        if (old_mode, new_mode) == ("100755", "100644"):
            return f"{plus_file}: mode -x"
        return f"{plus_file}: {old_mode} {_ARROW} {new_mode}"
    if minus_file == plus_file:
        return f"{_format_label(labels.modified)}{minus_file}"
    if plus_file == "/dev/null":
        return f"{_format_label(labels.removed)}{minus_file}"
    if minus_file == "/dev/null":
        return f"{_format_label(labels.added)}{plus_file}"
    if minus_file_event.kind is FileEventKind.RENAME:
        label = labels.renamed
    elif minus_file_event.kind is FileEventKind.COPY:
        label = labels.copied
    else:
        label = ""
    return f"{_format_label(label)}{minus_file} {_ARROW} {plus_file}"


def parse_hunk_header(line: str) -> Tuple[str, List[Tuple[int, int]]]:
    """Given '@@ -74,15 +74,14 @@ pub fn delta(' return the code fragment ' pub fn delta('
    and a list of (line_number, hunk_length) pairs.
    """
    match = _HUNK_HEADER_REGEX.search(line)
    if match is None:
        raise ValueError(f"Not a hunk header: {line!r}")
    coordinates = [
        (int(start), int(length) if length is not None else 1)
        for start, length in _HUNK_HEADER_FILE_COORDINATE_REGEX.findall(match.group(1))
        for length in [length or None]
    ]
    return match.group(2), coordinates