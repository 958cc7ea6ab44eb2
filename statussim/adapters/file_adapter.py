"""Append-only log file adapter."""

import os
import sys
from ..interfaces import ILogDestination


class FileAdapter:
    """Adapter for flat-file logging.

    The file is opened in append mode on construction (created if
    absent). Raises OSError if it cannot be opened.
    """

    def __init__(self, path: str):
        self.path = path
        self._file = open(path, "a", encoding="utf-8")

    @property
    def closed(self) -> bool:
        return self._file.closed

    def write(self, text: str) -> bool:
        """Append rendered log entry."""
        if self._file.closed:
            return False

        try:
            self._file.write(text)
            self._file.flush()
        except OSError as e:
            print(f"ERROR: log file write failed: {e}", file=sys.stderr)
            return False
        return True

    def close(self) -> None:
        """Sync and close the file."""
        if self._file.closed:
            return
        try:
            self._file.flush()
            os.fsync(self._file.fileno())
        finally:
            self._file.close()

    def __enter__(self) -> "FileAdapter":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
