# fileorganizer

Sorts the files in a directory into category folders (`Images`, `Documents`,
`Spreadsheets`, `Presentations`, `Code`, `Archives`, `Audio`, `Video`,
`Executables`) by their extension. It can preview the changes first, and it
can keep watching the directory to sort new files as they arrive.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```
fileorganizer --path ~/Downloads --dry-run
fileorganizer --path ~/Downloads
fileorganizer --path ~/Downloads --progress
fileorganizer --path ~/Downloads --watch
fileorganizer --path ~/Downloads --map .md=Notes --map .bak=Backups
fileorganizer --version
```

Options (each may also be written with a single dash, e.g. `-path`):

- `--path DIR`: the directory to organize. Without it, usage help is shown.
- `--dry-run`: show what would happen and move nothing.
- `--progress`: show a progress bar instead of one line per file.
- `--watch`: once the first pass is done, keep watching the directory and sort
  each file that is created, changed or moved into it. Stop with Ctrl+C or
  SIGTERM.
- `--map .ext=Category`: map an extension to a category. It can be given more
  than once, and it takes precedence over the config file and the defaults.
  A malformed mapping stops the program with exit status 1.
- `--version`: print `fileorganizer version v1.2.1`.
- `--help`, `-h`: show usage help.

The walk is recursive and does not follow symbolic links to directories.
Extensions are compared case-insensitively. Files with an unknown extension or
no extension stay where they are and are counted as skipped; so do files that
are already in their category folder. If a file with the same name is already
at the destination, the source file is left in place and the problem is
reported. At the end a summary shows how many files were scanned, moved (or
would be moved), how many category folders were used, and how many were
skipped.

## Custom mappings

If `config/config.json` exists in the working directory, its mappings are
added on top of the defaults:

```json
{
  "customMappings": {
    ".md": "Notes",
    ".log": "Logs"
  },
  "description": "My mappings"
}
```

Each extension must start with `.` and have something after it. A category may
not be empty, may not have leading or trailing spaces, and may not contain any
of `/ \ : * ? " < > |`. Entries that break these rules are skipped with a
warning. If the file cannot be read or parsed, a warning is printed and the
defaults are used.

## Ignore rules

If `.organizerignore` exists in the working directory, each line that is
neither empty nor a comment is read as one pattern:

```
# comments start with '#'
.DS_Store
*.tmp
test.*
node_modules/
/config.json
```

- A plain name such as `.DS_Store` matches that file name anywhere in the tree.
- A name ending in `/` matches a directory anywhere in the tree, together with
  everything under it; ignored directories are not entered.
- A pattern starting with `/` is matched against the path relative to the
  organized directory.
- A pattern with `*` is a wildcard, tried against both the relative path and
  the file name. A trailing `*` matches any ending, a leading `*` any
  beginning; other patterns use `*`, `?` and `[...]` shell-style, where `*`
  and `?` do not cross a `/`.
- Any other pattern containing `/` matches when it appears anywhere in the
  relative path.

## Log

Every run appends a timestamped record of its actions to `organizer.log` in
the working directory. If the log cannot be opened, the run continues without
it.

## Library use

The same steps are available from Python:

```python
from fileorganizer.config import ExtensionMapping
from fileorganizer.ignore import IgnoreManager
from fileorganizer.logger import OrganizerLogger
from fileorganizer.organizer import organize_files, print_summary
from fileorganizer.scanner import default_extension_categories, scan_files

mapping = ExtensionMapping(default_extension_categories())
mapping.apply_cli_mappings([".md=Notes"])
ignore = IgnoreManager("downloads", ["*.tmp"])

print(scan_files("downloads", mapping, ignore))

with OrganizerLogger("organizer.log") as logger:
    summary = organize_files("downloads", True, logger, mapping, ignore, False)
print_summary(summary, True)
```

Errors are raised as exceptions: `ConfigError` from `fileorganizer.config`,
`ScanError` from `fileorganizer.scanner` and `OrganizeError` from
`fileorganizer.organizer`. `start_watch_mode` in `fileorganizer.organizer`
runs the watch loop until interrupted.

## Limits

- Watch mode looks only at the top level of the directory, not at its
  subdirectories.
- There is no undo: moved files are not tracked beyond the log.