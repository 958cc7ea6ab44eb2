"""Fan-out of log events to level-filtered destinations."""

import sys
from typing import Iterable, Sequence

from .interfaces import ILogDestination, Level, LogEvent

LEVELS_INFO = frozenset({Level.INFO, Level.WARNING})
LEVELS_SEVERE = frozenset({Level.ERROR, Level.PANIC, Level.FATAL})
LEVELS_ALL = LEVELS_INFO | LEVELS_SEVERE


class LogDispatcher:
    """Log sink forwarding each event to every matching destination.

    Destinations are registered once as (destination, levels) pairs and
    written in registration order on the caller's thread. A failed write
    is reported on stderr and never stops delivery to the rest.
    """

    def __init__(
        self,
        destinations: Iterable[tuple[ILogDestination, Iterable[Level]]] = ()
    ):
        self._destinations: list[tuple[ILogDestination, frozenset]] = [
            (dest, frozenset(Level.parse(lv) for lv in levels))
            for dest, levels in destinations
        ]

    @property
    def destinations(self) -> Sequence[tuple[ILogDestination, frozenset]]:
        return tuple(self._destinations)

    def emit(self, level: "str | Level", message: str) -> int:
        """Deliver event, return number of failed deliveries."""
        event = LogEvent(Level.parse(level), message)
        text = event.render()

        failures = 0
        for dest, levels in self._destinations:
            if event.level not in levels:
                continue
            if not self._deliver(dest, text):
                failures += 1
        return failures

    def _deliver(self, dest: ILogDestination, text: str) -> bool:
        name = type(dest).__name__
        try:
            ok = dest.write(text)
        except Exception as e:
            print(f"ERROR: log destination {name} failed: {e}", file=sys.stderr)
            return False

        if ok is False:
            print(
                f"ERROR: log destination {name} failed: write rejected",
                file=sys.stderr
            )
            return False
        return True

    def log(self, level: "str | Level", message: str) -> None:
        """Write log entry (ILogSink)."""
        self.emit(level, message)

    def info(self, message: str) -> int:
        return self.emit(Level.INFO, message)

    def warning(self, message: str) -> int:
        return self.emit(Level.WARNING, message)

    def error(self, message: str) -> int:
        return self.emit(Level.ERROR, message)

    def close(self) -> None:
        """Release destinations holding resources."""
        for dest, _ in self._destinations:
            close = getattr(dest, "close", None)
            if close is None:
                continue
            try:
                close()
            except Exception as e:
                print(
                    f"ERROR: closing {type(dest).__name__} failed: {e}",
                    file=sys.stderr
                )
