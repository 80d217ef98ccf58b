"""Recursive discovery and categorization of files by extension."""

from __future__ import annotations

import os
import stat
from typing import Iterator

from .config import ExtensionMapping
from .ignore import IgnoreManager

NO_EXTENSION = "No Extension"
UNKNOWN = "Unknown"

_CATEGORY_SUFFIXES: dict[str, str] = {
    "Images": "jpg jpeg png gif bmp svg webp tiff ico",
    "Documents": "pdf doc docx txt rtf odt pages",
    "Spreadsheets": "xls xlsx csv ods numbers",
    "Presentations": "ppt pptx odp key",
    "Code": (
        "go js ts py java c cpp h hpp cs php rb rs swift kt scala "
        "html css scss sass less xml json yaml yml toml ini cfg conf"
    ),
    "Archives": "zip rar 7z tar gz bz2 xz iso",
    "Audio": "mp3 wav flac aac ogg wma m4a",
    "Video": "mp4 avi mkv mov wmv flv webm m4v 3gp",
    "Executables": "exe msi deb rpm dmg app apk",
}

_EXTENSION_CATEGORIES: dict[str, str] = {
    f".{suffix}": category
    for category, suffixes in _CATEGORY_SUFFIXES.items()
    for suffix in suffixes.split()
}


class ScanError(Exception):
    """Raised when a directory cannot be scanned."""


def default_extension_categories() -> dict[str, str]:
    """Return a fresh copy of the built-in extension-to-category table."""
    return dict(_EXTENSION_CATEGORIES)


def _extension(path: str) -> str:
    """Lower-cased text from the last dot of the final path element, or ''."""
    name = os.path.basename(path)
    dot = name.rfind(".")
    return name[dot:].lower() if dot >= 0 else ""


def _lookup_category(ext: str, extension_mapping: ExtensionMapping | None) -> str | None:
    if extension_mapping is not None:
        return extension_mapping.get_mapping(ext)
    return _EXTENSION_CATEGORIES.get(ext)


def _is_ignored(path: str, ignore_manager: IgnoreManager | None) -> bool:
    return ignore_manager is not None and ignore_manager.should_ignore(path)


def _walk_directory(directory: str, ignore_manager: IgnoreManager | None) -> Iterator[str]:
    try:
        names = sorted(os.listdir(directory))
    except OSError as exc:
        print(f"Warning: Could not access {directory}: {exc}")
        return
    for name in names:
        path = os.path.join(directory, name)
        try:
            mode = os.lstat(path).st_mode
        except OSError as exc:
            print(f"Warning: Could not access {path}: {exc}")
            continue
        if _is_ignored(path, ignore_manager):
            continue
        if stat.S_ISDIR(mode):
            yield from _walk_directory(path, ignore_manager)
        else:
            yield path


def _iter_files(root: str, ignore_manager: IgnoreManager | None) -> Iterator[str]:
    try:
        mode = os.lstat(root).st_mode
    except OSError as exc:
        print(f"Warning: Could not access {root}: {exc}")
        return
    if _is_ignored(root, ignore_manager):
        return
    if stat.S_ISDIR(mode):
        yield from _walk_directory(root, ignore_manager)
    else:
        yield root


def scan_files(
    root_path,
    extension_mapping: ExtensionMapping | None = None,
    ignore_manager: IgnoreManager | None = None,
) -> dict[str, list[str]]:
    """Walk ``root_path`` recursively and group file paths by category.

    Files with no extension go to "No Extension", unmapped ones to "Unknown".
    Raises ScanError when the root does not exist.
    """
    root = os.fspath(root_path)
    try:
        os.stat(root)
    except FileNotFoundError as exc:
        raise ScanError(f"directory does not exist: {root}") from exc
    except OSError:
        pass

    categories: dict[str, list[str]] = {}
    for path in _iter_files(root, ignore_manager):
        ext = _extension(path)
        category = _lookup_category(ext, extension_mapping)
        if category is None:
            category = NO_EXTENSION if ext == "" else UNKNOWN
        categories.setdefault(category, []).append(path)
    return categories