"""Log sink interface used by route handlers."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .i_log_destination import Level


class ILogSink(Protocol):
    """Interface for emitting log events."""

    def log(self, level: "str | Level", message: str) -> None:
        """Emit message at level.

        level is a Level or its name ("info", "warn"/"warning", "error",
        "panic", "fatal"); unknown names raise ValueError.
        """
        ...
