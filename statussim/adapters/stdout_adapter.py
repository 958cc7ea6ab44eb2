"""Stdout logging adapter."""

import sys
from ..interfaces import ILogDestination


class StdoutAdapter:
    """Adapter for stdout logging."""

    def write(self, text: str) -> bool:
        """Write rendered log entry to stdout."""
        sys.stdout.write(text)
        sys.stdout.flush()
        return True
