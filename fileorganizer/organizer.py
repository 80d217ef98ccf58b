"""Moving scanned files into per-category folders, once or continuously."""

from __future__ import annotations

import os
import queue
import signal
import threading
import time

from tqdm import tqdm
from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer

from .config import ExtensionMapping
from .ignore import IgnoreManager
from .logger import OrganizerLogger, Summary
from .scanner import NO_EXTENSION, UNKNOWN, ScanError, _extension, _lookup_category, scan_files

_SKIP_CATEGORIES = frozenset({UNKNOWN, NO_EXTENSION})
_DEBOUNCE_SECONDS = 0.5
_POLL_SECONDS = 0.5


class OrganizeError(Exception):
    """Raised when organizing, moving or watching fails."""


def should_skip_category(category: str) -> bool:
    """Tell whether files of this category stay where they are."""
    return category in _SKIP_CATEGORIES


def create_category_folder(folder_path, is_dry_run: bool, logger: OrganizerLogger | None = None) -> None:
    """Create the folder unless it exists; in a dry run only log the intent."""
    if os.path.exists(folder_path):
        return
    if is_dry_run:
        if logger is not None:
            logger.log_folder_creation(folder_path, True)
        return
    try:
        os.makedirs(folder_path, mode=0o755, exist_ok=True)
    except OSError as exc:
        raise OrganizeError(f"failed to create folder {folder_path}: {exc}") from exc
    if logger is not None:
        logger.log_folder_creation(folder_path, False)


def move_file(source, destination) -> None:
    """Move ``source`` to ``destination``, refusing to overwrite."""
    if os.path.exists(destination):
        raise OrganizeError(f"destination file already exists: {destination}")
    try:
        os.makedirs(os.path.dirname(destination) or ".", mode=0o755, exist_ok=True)
    except OSError as exc:
        raise OrganizeError(f"failed to create destination directory: {exc}") from exc
    try:
        os.rename(source, destination)
    except OSError as exc:
        raise OrganizeError(f"failed to move file: {exc}") from exc


def organize_files(
    root_path,
    is_dry_run: bool = False,
    logger: OrganizerLogger | None = None,
    extension_mapping: ExtensionMapping | None = None,
    ignore_manager: IgnoreManager | None = None,
    show_progress: bool = False,
) -> Summary:
    """Move every categorized file under ``root_path`` into ``root_path/<category>``."""
    root = os.fspath(root_path)
    summary = Summary()
    try:
        categories = scan_files(root, extension_mapping, ignore_manager)
    except ScanError as exc:
        raise OrganizeError(f"failed to scan files: {exc}") from exc

    summary.files_scanned = sum(len(files) for files in categories.values())

    bar = None
    if show_progress and summary.files_scanned > 0:
        bar = tqdm(
            total=summary.files_scanned,
            desc="Organizing files",
            ncols=80,
            colour="green",
        )

    def advance(count: int = 1) -> None:
        if bar is not None:
            bar.update(count)

    try:
        for category, files in categories.items():
            if should_skip_category(category):
                summary.files_skipped += len(files)
                advance(len(files))
                continue

            category_path = os.path.join(root, category)
            try:
                create_category_folder(category_path, is_dry_run, logger)
            except OrganizeError as exc:
                if logger is not None:
                    logger.log_error("Folder creation", category_path, exc)
                continue
            summary.folders_created += 1

            for file_path in files:
                dest_path = os.path.join(category_path, os.path.basename(file_path))

                if os.path.normpath(os.path.dirname(file_path)) == os.path.normpath(category_path):
                    advance()
                    continue

                if is_dry_run:
                    if logger is not None:
                        logger.log_dry_run(file_path, dest_path)
                    if not show_progress:
                        print(f"  [DRY-RUN] Would move: {file_path} -> {dest_path}")
                else:
                    try:
                        move_file(file_path, dest_path)
                    except OrganizeError as exc:
                        if logger is not None:
                            logger.log_error("Move", file_path, exc)
                        if not show_progress:
                            print(f"  [ERROR] Failed to move {file_path}: {exc}")
                        advance()
                        continue
                    if logger is not None:
                        logger.log_move(file_path, dest_path)
                    if not show_progress:
                        print(f"  [MOVED] {file_path} -> {dest_path}")
                summary.files_moved += 1
                advance()
    finally:
        if bar is not None:
            bar.close()
            print()

    if logger is not None:
        logger.log_summary(summary)
    return summary


def print_summary(summary: Summary, is_dry_run: bool) -> None:
    """Print the statistics of a run."""
    separator = "=" * 50
    print("\n" + separator)
    print("📋 DRY-RUN SUMMARY" if is_dry_run else "📋 ORGANIZATION SUMMARY")
    print(separator)
    print(f"✅  Total files scanned: {summary.files_scanned}")
    if is_dry_run:
        print(f"🔮  Files that would be moved: {summary.files_moved}")
        print(f"📁  Folders that would be created: {summary.folders_created}")
    else:
        print(f"🔀  Files moved: {summary.files_moved}")
        print(f"📁  Folders created: {summary.folders_created}")
    print(f"🚫  Skipped (unknown/no extension): {summary.files_skipped}")
    print(separator)


class _QueueingHandler(FileSystemEventHandler):
    """Forwards created, modified and moved-in paths to a queue."""

    def __init__(self, events: "queue.Queue[str]") -> None:
        super().__init__()
        self._events = events

    def on_created(self, event) -> None:
        self._events.put(os.fsdecode(event.src_path))

    def on_modified(self, event) -> None:
        self._events.put(os.fsdecode(event.src_path))

    def on_moved(self, event) -> None:
        self._events.put(os.fsdecode(event.dest_path))


def _handle_watch_event(
    path: str,
    root: str,
    is_dry_run: bool,
    logger: OrganizerLogger | None,
    extension_mapping: ExtensionMapping | None,
    ignore_manager: IgnoreManager | None,
) -> None:
    if not os.path.exists(path) or os.path.isdir(path):
        return

    if ignore_manager is not None and ignore_manager.should_ignore(path):
        if logger is not None:
            logger.log_move(path, "IGNORED: " + path)
        return

    ext = _extension(path)
    if ext == "":
        if logger is not None:
            logger.log_move(path, "SKIPPED: no extension")
        return

    category = _lookup_category(ext, extension_mapping)
    if category is None:
        if logger is not None:
            logger.log_move(path, "SKIPPED: unknown extension")
        return

    if should_skip_category(category):
        if logger is not None:
            logger.log_move(path, "SKIPPED: " + category)
        return

    filename = os.path.basename(path)
    target_dir = os.path.join(root, category)
    target_path = os.path.join(target_dir, filename)

    if is_dry_run:
        print(f"🔮 [WATCH] Would move: {path} → {category}/{filename}")
        if logger is not None:
            logger.log_dry_run(path, target_path)
        return

    try:
        create_category_folder(target_dir, False, logger)
    except OrganizeError as exc:
        print(f"❌ [WATCH] Error creating directory {target_dir}: {exc}")
        if logger is not None:
            logger.log_error("Folder creation", target_dir, exc)
        return

    try:
        move_file(path, target_path)
    except OrganizeError as exc:
        print(f"❌ [WATCH] Error moving file {path}: {exc}")
        if logger is not None:
            logger.log_error("File move", path, exc)
        return

    print(f"✅ [WATCH] Moved: {filename} → {category}/{filename}")
    if logger is not None:
        logger.log_move(path, target_path)


def _raise_interrupt(signum, frame) -> None:
    raise KeyboardInterrupt


def start_watch_mode(
    root_path,
    is_dry_run: bool = False,
    logger: OrganizerLogger | None = None,
    extension_mapping: ExtensionMapping | None = None,
    ignore_manager: IgnoreManager | None = None,
    show_progress: bool = False,
) -> None:
    """Organize files as they appear in ``root_path`` until interrupted."""
    root = os.fspath(root_path)
    if not os.path.exists(root):
        raise OrganizeError(f"failed to watch directory {root}: no such file or directory")

    events: "queue.Queue[str]" = queue.Queue()
    observer = Observer()
    try:
        observer.schedule(_QueueingHandler(events), root, recursive=False)
        observer.start()
    except OSError as exc:
        raise OrganizeError(f"failed to watch directory {root}: {exc}") from exc

    previous_sigterm = None
    in_main_thread = threading.current_thread() is threading.main_thread()
    if in_main_thread:
        previous_sigterm = signal.signal(signal.SIGTERM, _raise_interrupt)

    last_seen: dict[str, float] = {}
    try:
        while True:
            if not observer.is_alive():
                message = "observer stopped unexpectedly"
                print(f"⚠️  [WATCH] Watcher error: {message}")
                if logger is not None:
                    logger.log_error("Watcher", "filesystem", message)
                return
            try:
                path = events.get(timeout=_POLL_SECONDS)
            except queue.Empty:
                continue
            now = time.monotonic()
            previous = last_seen.get(path)
            if previous is not None and now - previous < _DEBOUNCE_SECONDS:
                continue
            last_seen[path] = now
            _handle_watch_event(path, root, is_dry_run, logger, extension_mapping, ignore_manager)
    except KeyboardInterrupt:
        print("\n🛑 Watch mode stopped by user")
    finally:
        if in_main_thread and previous_sigterm is not None:
            signal.signal(signal.SIGTERM, previous_sigterm)
        observer.stop()
        observer.join()