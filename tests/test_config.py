import json

import pytest

from fileorganizer.config import (
    ConfigError,
    ExtensionMapping,
    validate_category,
    validate_extension,
)


def test_new_extension_mapping():
    mapping = ExtensionMapping({".txt": "Documents", ".jpg": "Images", ".mp3": "Audio"})
    assert mapping.get_mapping(".txt") == "Documents"
    assert mapping.get_mapping(".jpg") == "Images"
    assert mapping.get_mapping(".TXT") == "Documents"
    assert mapping.get_mapping(".zzz") is None


def test_load_config(tmp_path):
    config_path = tmp_path / "config.json"
    config_path.write_text(
        json.dumps(
            {
                "customMappings": {".md": "Notes", ".log": "Logs", ".bak": "Backups"},
                "description": "Test config",
            }
        )
    )
    mapping = ExtensionMapping({".txt": "Documents"})
    mapping.load_config(config_path)
    assert mapping.get_mapping(".md") == "Notes"
    assert mapping.get_mapping(".log") == "Logs"
    assert mapping.get_mapping(".txt") == "Documents"


def test_load_config_invalid_json(tmp_path):
    config_path = tmp_path / "config.json"
    config_path.write_text(
        '{\n "customMappings": {\n ".md": "Notes"\n // Invalid JSON - missing closing brace\n'
    )
    mapping = ExtensionMapping({".txt": "Documents"})
    with pytest.raises(ConfigError, match="failed to parse config JSON"):
        mapping.load_config(config_path)


def test_load_config_wrong_value_type(tmp_path):
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"customMappings": {".md": 3}}))
    mapping = ExtensionMapping({})
    with pytest.raises(ConfigError, match="failed to parse config JSON"):
        mapping.load_config(config_path)


def test_load_config_non_existent_file():
    mapping = ExtensionMapping({".txt": "Documents"})
    mapping.load_config("/nonexistent/config.json")
    assert mapping.get_mapping(".txt") == "Documents"


def test_load_config_skips_invalid_entries(tmp_path, capsys):
    config_path = tmp_path / "config.json"
    config_path.write_text(
        json.dumps({"customMappings": {"txt": "X", ".ok": "Fine", ".bad": "a/b"}})
    )
    mapping = ExtensionMapping({})
    mapping.load_config(config_path)
    assert mapping.get_mapping(".ok") == "Fine"
    assert mapping.get_mapping("txt") is None
    assert mapping.get_mapping(".bad") is None
    out = capsys.readouterr().out
    assert "Warning: Invalid extension 'txt' in config" in out
    assert "Loaded 1 custom mappings from config file" in out


def test_load_config_lowercases_extensions(tmp_path):
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"customMappings": {".MD": "Notes"}}))
    mapping = ExtensionMapping({})
    mapping.load_config(config_path)
    assert mapping.as_dict() == {".md": "Notes"}


def test_apply_cli_mappings():
    mapping = ExtensionMapping({".txt": "Documents", ".jpg": "Images"})
    mapping.apply_cli_mappings([".md=Notes", ".log=Logs", ".txt=TextFiles"])
    assert mapping.get_mapping(".md") == "Notes"
    assert mapping.get_mapping(".log") == "Logs"
    assert mapping.get_mapping(".txt") == "TextFiles"
    assert mapping.get_mapping(".jpg") == "Images"


def test_apply_cli_mappings_trims_whitespace():
    mapping = ExtensionMapping({})
    mapping.apply_cli_mappings([" .md = Notes "])
    assert mapping.get_mapping(".md") == "Notes"


@pytest.mark.parametrize("bad", ["invalid-format", ".md"])
def test_apply_cli_mappings_invalid_format(bad):
    mapping = ExtensionMapping({".txt": "Documents"})
    with pytest.raises(ConfigError, match="invalid mapping format"):
        mapping.apply_cli_mappings([bad])


def test_apply_cli_mappings_empty_extension():
    mapping = ExtensionMapping({".txt": "Documents"})
    with pytest.raises(ConfigError, match="invalid extension"):
        mapping.apply_cli_mappings(["=Category"])


def test_apply_cli_mappings_invalid_category():
    mapping = ExtensionMapping({})
    with pytest.raises(ConfigError, match="invalid category"):
        mapping.apply_cli_mappings([".md=Docs|Notes"])


@pytest.mark.parametrize("ext", [".txt", ".md", ".jpg", ".MP3"])
def test_validate_extension_valid(ext):
    assert validate_extension(ext) is None


@pytest.mark.parametrize("ext", ["", ".", "txt", "md"])
def test_validate_extension_invalid(ext):
    with pytest.raises(ConfigError):
        validate_extension(ext)


@pytest.mark.parametrize("category", ["Documents", "Images", "Audio_Files", "Code-Files"])
def test_validate_category_valid(category):
    assert validate_category(category) is None


@pytest.mark.parametrize(
    "category",
    [
        "",
        " Documents ",
        "Docs/Images",
        "Docs\\Images",
        "Docs:Images",
        "Docs*Images",
        "Docs?Images",
        'Docs"Images',
        "Docs<Images",
        "Docs>Images",
        "Docs|Images",
    ],
)
def test_validate_category_invalid(category):
    with pytest.raises(ConfigError):
        validate_category(category)


def test_as_dict_is_copy():
    mapping = ExtensionMapping({".txt": "Documents", ".jpg": "Images"})
    everything = mapping.as_dict()
    assert everything[".txt"] == "Documents"
    assert everything[".jpg"] == "Images"
    everything[".test"] = "Test"
    assert mapping.get_mapping(".test") is None


def test_priority_order(tmp_path):
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"customMappings": {".txt": "ConfigDocuments"}}))
    mapping = ExtensionMapping({".txt": "DefaultDocuments"})
    mapping.load_config(config_path)
    assert mapping.get_mapping(".txt") == "ConfigDocuments"
    mapping.apply_cli_mappings([".txt=CLIDocuments"])
    assert mapping.get_mapping(".txt") == "CLIDocuments"


def test_print_summary_counts(tmp_path, capsys):
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"customMappings": {".md": "Notes"}}))
    mapping = ExtensionMapping({".txt": "Documents"})
    mapping.load_config(config_path)
    mapping.apply_cli_mappings([".log=Logs"])
    capsys.readouterr()
    mapping.print_summary()
    out = capsys.readouterr().out
    assert "Config file mappings: 1" in out
    assert "CLI overrides: 1" in out


def test_print_summary_silent_for_defaults(capsys):
    mapping = ExtensionMapping({".txt": "Documents"})
    mapping.print_summary()
    assert capsys.readouterr().out == ""