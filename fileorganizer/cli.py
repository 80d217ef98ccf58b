"""Command-line entry point: organize a directory's files into category folders."""

from __future__ import annotations

import argparse
import sys

from .config import ConfigError, ExtensionMapping
from .ignore import IgnoreManager
from .logger import OrganizerLogger
from .organizer import OrganizeError, organize_files, print_summary, start_watch_mode
from .scanner import default_extension_categories
from .version import get_version_info

CONFIG_PATH = "config/config.json"
IGNORE_FILE_PATH = ".organizerignore"
LOG_PATH = "organizer.log"

_USAGE = (
    "fileorganizer --path <directory> [--dry-run] [--progress] [--watch] "
    "[--map .ext=Category]"
)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fileorganizer", usage=_USAGE, add_help=False)
    parser.add_argument("--path", "-path", default="", help="Path to the folder to organize")
    parser.add_argument(
        "--dry-run", "-dry-run", dest="dry_run", action="store_true",
        help="Preview actions without moving files",
    )
    parser.add_argument(
        "--version", "-version", action="store_true", help="Show version information"
    )
    parser.add_argument(
        "--progress", "-progress", action="store_true",
        help="Show progress bar during organization",
    )
    parser.add_argument(
        "--watch", "-watch", action="store_true",
        help="Watch directory for new files and organize them automatically",
    )
    parser.add_argument("--help", "-help", "-h", action="store_true", help="Show usage")
    parser.add_argument(
        "--map", "-map", dest="mappings", action="append", default=[],
        metavar=".ext=Category",
        help="Override extension mappings (format: .ext=Category, can be used multiple times)",
    )
    return parser


def _open_logger() -> OrganizerLogger | None:
    try:
        return OrganizerLogger(LOG_PATH)
    except OSError as exc:
        print(f"Warning: Could not create log file: {exc}")
        print("Continuing without logging...")
        return None


def main(argv=None) -> int:
    """Run the organizer with command-line arguments; return the exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(get_version_info())
        return 0

    if args.help or not args.path:
        parser.print_help(sys.stdout)
        return 0

    print("Organizing path:", args.path)
    print("Dry run mode:", "true" if args.dry_run else "false")

    extension_mapping = ExtensionMapping(default_extension_categories())
    try:
        extension_mapping.load_config(CONFIG_PATH)
    except ConfigError as exc:
        print(f"Warning: Could not load config file: {exc}")
        print("Continuing with default mappings...")

    if args.mappings:
        try:
            extension_mapping.apply_cli_mappings(args.mappings)
        except ConfigError as exc:
            print(f"Error applying CLI mappings: {exc}")
            return 1

    ignore_manager = IgnoreManager(args.path)
    try:
        ignore_manager.load_ignore_file(IGNORE_FILE_PATH)
    except OSError as exc:
        print(f"Warning: Could not load ignore file: {exc}")
        print("Continuing without ignore rules...")

    if args.mappings:
        extension_mapping.print_summary()
        ignore_manager.print_summary()

    logger = _open_logger()
    try:
        if args.dry_run:
            print("\n🔮 DRY-RUN MODE: Simulating file organization...")
        else:
            print("\n🚀 ORGANIZING FILES...")

        try:
            summary = organize_files(
                args.path, args.dry_run, logger, extension_mapping, ignore_manager, args.progress
            )
        except OrganizeError as exc:
            print(f"Error organizing files: {exc}")
            return 1

        print_summary(summary, args.dry_run)

        if logger is not None:
            print(f"\n📝 Detailed log written to: {LOG_PATH}")

        if args.watch:
            print(f"\n👀 Starting watch mode for directory: {args.path}")
            print("Press Ctrl+C to stop watching...")
            try:
                start_watch_mode(
                    args.path, args.dry_run, logger, extension_mapping, ignore_manager,
                    args.progress,
                )
            except OrganizeError as exc:
                print(f"Error starting watch mode: {exc}")
                return 1
        return 0
    finally:
        if logger is not None:
            logger.close()


if __name__ == "__main__":
    raise SystemExit(main())