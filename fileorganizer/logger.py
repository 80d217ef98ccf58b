"""Session log written to a file in append mode."""

from __future__ import annotations

import os
import time
from dataclasses import dataclass
from typing import TextIO

_TIME_FORMAT = "%Y/%m/%d %H:%M:%S"


@dataclass
class Summary:
    """Statistics about one organization run."""

    files_scanned: int = 0
    files_moved: int = 0
    folders_created: int = 0
    files_skipped: int = 0


class OrganizerLogger:
    """Appends timestamped records of an organizer session to a log file.

    Opening the file may raise ``OSError``.
    """

    def __init__(self, log_path) -> None:
        self.log_path = os.fspath(log_path)
        self._file: TextIO | None = open(self.log_path, "a", encoding="utf-8")
        self._write("=== New Organizer Session Started ===")

    def _write(self, message: str) -> None:
        if self._file is None:
            return
        self._file.write(f"{time.strftime(_TIME_FORMAT)} {message}\n")
        self._file.flush()

    def log_dry_run(self, source, destination) -> None:
        """Record a move that a dry run would perform."""
        self._write(f"[DRY-RUN] Would move: {source} -> {destination}")

    def log_move(self, source, destination) -> None:
        """Record a file move."""
        self._write(f"[MOVE] Moved: {source} -> {destination}")

    def log_folder_creation(self, folder_path, is_dry_run: bool) -> None:
        """Record a folder creation, real or simulated."""
        if is_dry_run:
            self._write(f"[DRY-RUN] Would create folder: {folder_path}")
        else:
            self._write(f"[FOLDER] Created folder: {folder_path}")

    def log_error(self, operation: str, file_path, error) -> None:
        """Record a failed operation."""
        self._write(f"[ERROR] {operation} failed for {file_path}: {error}")

    def log_summary(self, summary: Summary) -> None:
        """Record the final statistics of a run."""
        self._write(
            f"[SUMMARY] Files scanned: {summary.files_scanned}, "
            f"moved: {summary.files_moved}, "
            f"folders created: {summary.folders_created}, "
            f"skipped: {summary.files_skipped}"
        )

    @property
    def closed(self) -> bool:
        return self._file is None

    def close(self) -> None:
        """Write the session end marker and close the file; safe to repeat."""
        if self._file is None:
            return
        self._write("=== Session Ended ===")
        try:
            self._file.close()
        finally:
            self._file = None

    def __enter__(self) -> "OrganizerLogger":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()