"""Ignore patterns that keep files and directories out of organization."""

from __future__ import annotations

import os
import re
from typing import Iterable


class _BadPattern(ValueError):
    """A glob pattern that cannot be parsed."""


def _read_class_char(pattern: str, i: int) -> tuple[str, int]:
    if i >= len(pattern) or pattern[i] in "-]":
        raise _BadPattern(pattern)
    if pattern[i] == "\\":
        i += 1
        if i >= len(pattern):
            raise _BadPattern(pattern)
    return pattern[i], i + 1


def _translate_class(pattern: str, i: int) -> tuple[str, int]:
    n = len(pattern)
    negated = i < n and pattern[i] == "^"
    if negated:
        i += 1
    parts: list[str] = []
    seen = 0
    while True:
        if i < n and pattern[i] == "]" and seen:
            i += 1
            break
        lo, i = _read_class_char(pattern, i)
        hi = lo
        if i < n and pattern[i] == "-":
            hi, i = _read_class_char(pattern, i + 1)
        seen += 1
        if lo == hi:
            parts.append(re.escape(lo))
        elif lo < hi:
            parts.append(f"{re.escape(lo)}-{re.escape(hi)}")
    if not parts:
        return ("." if negated else "(?!)"), i
    return f"[{'^' if negated else ''}{''.join(parts)}]", i


def _translate(pattern: str) -> str:
    out: list[str] = []
    i, n = 0, len(pattern)
    while i < n:
        ch = pattern[i]
        if ch == "*":
            out.append("[^/]*")
            i += 1
        elif ch == "?":
            out.append("[^/]")
            i += 1
        elif ch == "\\":
            if i + 1 >= n:
                raise _BadPattern(pattern)
            out.append(re.escape(pattern[i + 1]))
            i += 2
        elif ch == "[":
            fragment, i = _translate_class(pattern, i + 1)
            out.append(fragment)
        else:
            out.append(re.escape(ch))
            i += 1
    return "".join(out)


def _glob_match(pattern: str, text: str) -> bool:
    """Shell-style match where ``*`` and ``?`` never cross a ``/``."""
    return re.fullmatch(_translate(pattern), text, re.DOTALL) is not None


def wildcard_match(pattern: str, text: str) -> bool:
    """Match ``text`` against a pattern with ``*``, ``?`` and ``[...]`` wildcards."""
    if pattern.endswith("*"):
        return text.startswith(pattern[:-1])
    if pattern.startswith("*"):
        return text.endswith(pattern[1:])
    try:
        return _glob_match(pattern, text)
    except _BadPattern:
        return pattern.replace("*", "") in text


def simple_match(pattern: str, text: str) -> bool:
    """Exact comparison, or wildcard matching when the pattern holds ``*``."""
    if "*" not in pattern:
        return pattern == text
    return wildcard_match(pattern, text)


def match_pattern(pattern: str, rel_path: str, file_name: str) -> bool:
    """Tell whether a file, given by its slash-separated relative path and name, matches."""
    pattern = pattern.strip().replace(os.sep, "/")

    if "/" not in pattern and "*" not in pattern:
        return file_name == pattern

    if pattern.endswith("/"):
        dir_pattern = pattern[:-1]
        directories = rel_path.split("/")[:-1]
        if any(simple_match(dir_pattern, part) for part in directories):
            return True
        return (rel_path + "/").startswith(pattern)

    if pattern.startswith("/"):
        return simple_match(pattern[1:], rel_path)

    if "*" in pattern:
        return wildcard_match(pattern, rel_path) or wildcard_match(pattern, file_name)

    return pattern in rel_path or pattern in file_name


def _relative_path(root: str, path: str) -> str:
    if os.path.isabs(root) != os.path.isabs(path):
        return path
    try:
        return os.path.relpath(path, root)
    except ValueError:
        return path


class IgnoreManager:
    """A list of ignore patterns evaluated relative to a root directory."""

    def __init__(self, root_path, patterns: Iterable[str] | None = None) -> None:
        self.root_path = os.fspath(root_path)
        self._patterns: list[str] = list(patterns or ())

    @property
    def patterns(self) -> list[str]:
        """A copy of the loaded patterns."""
        return list(self._patterns)

    def load_ignore_file(self, ignore_file_path) -> None:
        """Add patterns from a file, skipping blanks and ``#`` comments.

        A missing file is not an error; other read failures raise ``OSError``.
        """
        if not os.path.exists(ignore_file_path):
            return
        added = 0
        with open(ignore_file_path, encoding="utf-8", errors="replace") as handle:
            for raw in handle:
                line = raw.strip()
                if not line or line.startswith("#"):
                    continue
                self._patterns.append(line)
                added += 1
        if added > 0:
            print(f"Loaded {added} ignore patterns from .organizerignore")

    def should_ignore(self, file_path) -> bool:
        """Return True when any pattern matches the given path."""
        file_path = os.fspath(file_path)
        rel_path = _relative_path(self.root_path, file_path).replace(os.sep, "/")
        file_name = os.path.basename(os.path.normpath(file_path))
        return any(
            match_pattern(pattern, rel_path, file_name) for pattern in self._patterns
        )

    def print_summary(self) -> None:
        """Print the number of patterns, if any."""
        if self._patterns:
            print(f"  🚫 Ignore patterns: {len(self._patterns)}")