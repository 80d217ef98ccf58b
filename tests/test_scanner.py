import os

import pytest

from fileorganizer.config import ExtensionMapping
from fileorganizer.ignore import IgnoreManager
from fileorganizer.scanner import ScanError, default_extension_categories, scan_files


def _touch(directory, *names):
    for name in names:
        path = os.path.join(str(directory), name)
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "w"):
            pass


def test_default_extension_categories():
    categories = default_extension_categories()
    assert categories[".jpg"] == "Images"
    assert categories[".png"] == "Images"
    assert categories[".pdf"] == "Documents"
    assert categories[".go"] == "Code"
    assert categories[".mp3"] == "Audio"
    assert categories[".mp4"] == "Video"

    categories[".test"] = "TestCategory"
    assert ".test" not in default_extension_categories()


def test_scan_files(tmp_path):
    _touch(
        tmp_path,
        "document.pdf",
        "image.jpg",
        "script.py",
        "music.mp3",
        "unknown.xyz",
        "no-extension",
        "README.md",
    )
    root = str(tmp_path)
    categories = scan_files(root)

    assert categories["Documents"] == [os.path.join(root, "document.pdf")]
    assert categories["Images"] == [os.path.join(root, "image.jpg")]
    assert categories["Code"] == [os.path.join(root, "script.py")]
    assert categories["Audio"] == [os.path.join(root, "music.mp3")]
    assert categories["No Extension"] == [os.path.join(root, "no-extension")]
    assert sorted(categories["Unknown"]) == sorted(
        [os.path.join(root, "unknown.xyz"), os.path.join(root, "README.md")]
    )


def test_scan_files_with_config(tmp_path):
    _touch(tmp_path, "test.md", "backup.bak", "config.env")
    mapping = ExtensionMapping(default_extension_categories())
    mapping.apply_cli_mappings([".md=Notes", ".bak=Backups", ".env=Configuration"])
    root = str(tmp_path)

    categories = scan_files(root, mapping, None)

    assert os.path.join(root, "test.md") in categories["Notes"]
    assert os.path.join(root, "backup.bak") in categories["Backups"]
    assert os.path.join(root, "config.env") in categories["Configuration"]


def test_scan_files_with_ignore(tmp_path):
    _touch(tmp_path, "document.pdf", "image.jpg", "temp.tmp", ".hidden", "log.log")
    root = str(tmp_path)
    ignore_file = tmp_path / ".testignore"
    ignore_file.write_text("*.tmp\n.hidden\n*.log\n")
    manager = IgnoreManager(root)
    manager.load_ignore_file(str(ignore_file))

    categories = scan_files(root, None, manager)

    names = {os.path.basename(p) for paths in categories.values() for p in paths}
    assert "temp.tmp" not in names
    assert ".hidden" not in names
    assert "log.log" not in names
    assert os.path.join(root, "document.pdf") in categories["Documents"]
    assert os.path.join(root, "image.jpg") in categories["Images"]


def test_scan_files_nonexistent_directory(tmp_path):
    with pytest.raises(ScanError, match="directory does not exist"):
        scan_files(str(tmp_path / "nonexistent" / "directory"))


def test_scan_recurses_and_prunes_ignored_directories(tmp_path):
    _touch(tmp_path, "sub/deep/song.mp3", "build/out.exe", "top.txt")
    root = str(tmp_path)
    manager = IgnoreManager(root, ["build/"])

    categories = scan_files(root, None, manager)

    assert categories == {
        "Audio": [os.path.join(root, "sub", "deep", "song.mp3")],
        "Documents": [os.path.join(root, "top.txt")],
    }


def test_extension_lookup_is_case_insensitive(tmp_path):
    _touch(tmp_path, "PHOTO.JPG")
    categories = scan_files(str(tmp_path))
    assert categories == {"Images": [os.path.join(str(tmp_path), "PHOTO.JPG")]}


def test_leading_dot_name_counts_as_extension(tmp_path):
    _touch(tmp_path, ".bashrc")
    categories = scan_files(str(tmp_path))
    assert list(categories) == ["Unknown"]


def test_empty_directory_gives_no_categories(tmp_path):
    assert scan_files(str(tmp_path)) == {}