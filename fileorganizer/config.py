"""Extension-to-category mappings from defaults, a JSON config file and the command line."""

from __future__ import annotations

import json
import os
from typing import Iterable, Mapping

_INVALID_CATEGORY_CHARS = ("/", "\\", ":", "*", "?", '"', "<", ">", "|")


class ConfigError(Exception):
    """Raised for an invalid configuration, mapping, extension or category."""


def validate_extension(ext: str) -> None:
    """Raise ConfigError unless ``ext`` looks like ``.something``."""
    if ext == "":
        raise ConfigError("extension cannot be empty")
    if not ext.startswith("."):
        raise ConfigError("extension must start with '.'")
    if len(ext) == 1:
        raise ConfigError("extension must have content after '.'")


def validate_category(category: str) -> None:
    """Raise ConfigError unless ``category`` is usable as a folder name."""
    if category == "":
        raise ConfigError("category cannot be empty")
    if category.strip() != category:
        raise ConfigError("category cannot have leading or trailing whitespace")
    for char in _INVALID_CATEGORY_CHARS:
        if char in category:
            raise ConfigError(f"category contains invalid character '{char}'")


def _lookup_field(document: dict, name: str):
    if name in document:
        return document[name]
    lowered = name.lower()
    for key, value in document.items():
        if key.lower() == lowered:
            return value
    return None


def _parse_custom_mappings(text: str) -> dict[str, str]:
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"failed to parse config JSON: {exc}") from exc
    if document is None:
        return {}
    if not isinstance(document, dict):
        raise ConfigError("failed to parse config JSON: top level must be an object")

    description = _lookup_field(document, "description")
    if description is not None and not isinstance(description, str):
        raise ConfigError("failed to parse config JSON: description must be a string")

    custom = _lookup_field(document, "customMappings")
    if custom is None:
        return {}
    if not isinstance(custom, dict) or not all(
        isinstance(value, str) for value in custom.values()
    ):
        raise ConfigError(
            "failed to parse config JSON: customMappings must map strings to strings"
        )
    return custom


class ExtensionMapping:
    """Case-insensitive map of file extensions to category names.

    Later sources override earlier ones: defaults, then config, then CLI.
    """

    def __init__(self, default_mappings: Mapping[str, str]) -> None:
        self._mappings: dict[str, str] = dict(default_mappings)
        self._sources: dict[str, str] = {ext: "default" for ext in default_mappings}

    def _set(self, ext: str, category: str, source: str) -> None:
        key = ext.lower()
        self._mappings[key] = category
        self._sources[key] = source

    def load_config(self, config_path) -> None:
        """Merge ``customMappings`` from a JSON file; a missing file is not an error."""
        if not os.path.exists(config_path):
            return
        try:
            with open(config_path, encoding="utf-8") as handle:
                text = handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigError(f"failed to read config file: {exc}") from exc

        count = 0
        for ext, category in _parse_custom_mappings(text).items():
            try:
                validate_extension(ext)
            except ConfigError as exc:
                print(f"Warning: Invalid extension '{ext}' in config: {exc}")
                continue
            try:
                validate_category(category)
            except ConfigError as exc:
                print(
                    f"Warning: Invalid category '{category}' for extension '{ext}': {exc}"
                )
                continue
            self._set(ext, category, "config")
            count += 1

        print(f"Loaded {count} custom mappings from config file")

    def apply_cli_mappings(self, cli_mappings: Iterable[str]) -> None:
        """Apply ``.ext=Category`` overrides; raise ConfigError on the first bad one."""
        count = 0
        for mapping in cli_mappings:
            ext, sep, category = mapping.partition("=")
            if not sep:
                raise ConfigError(
                    f"invalid mapping format '{mapping}', expected '.ext=Category'"
                )
            ext = ext.strip()
            category = category.strip()
            try:
                validate_extension(ext)
            except ConfigError as exc:
                raise ConfigError(f"invalid extension '{ext}': {exc}") from exc
            try:
                validate_category(category)
            except ConfigError as exc:
                raise ConfigError(f"invalid category '{category}': {exc}") from exc
            self._set(ext, category, "cli")
            count += 1

        if count > 0:
            print(f"Applied {count} CLI mapping overrides")

    def get_mapping(self, ext: str) -> str | None:
        """Return the category for ``ext`` (any case), or None if unmapped."""
        return self._mappings.get(ext.lower())

    def as_dict(self) -> dict[str, str]:
        """Return a copy of all current mappings."""
        return dict(self._mappings)

    def print_summary(self) -> None:
        """Print how many mappings came from the config file and the command line."""
        sources = list(self._sources.values())
        config_count = sources.count("config")
        cli_count = sources.count("cli")
        if config_count == 0 and cli_count == 0:
            return
        print("\n📋 Custom Rules Applied:")
        if config_count > 0:
            print(f"  📄 Config file mappings: {config_count}")
        if cli_count > 0:
            print(f"  ⚡ CLI overrides: {cli_count}")