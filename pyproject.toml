[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fileorganizer"
version = "1.2.1"
description = "Sort the files of a directory into category folders by extension, once or continuously."
requires-python = ">=3.10"
keywords = ["files", "organizer", "extensions", "sort", "watch", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: File Managers",
    "Topic :: Utilities",
]
dependencies = [
    "tqdm",
    "watchdog",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
fileorganizer = "fileorganizer.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fileorganizer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
