"""Log destination interface and event types."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import IntEnum
from typing import Protocol


class Level(IntEnum):
    """Ordered log severity."""
    INFO = 0
    WARNING = 1
    ERROR = 2
    PANIC = 3
    FATAL = 4

    @classmethod
    def parse(cls, value: "str | Level") -> "Level":
        """Resolve level from name ("warn" is accepted for WARNING)."""
        if isinstance(value, Level):
            return value

        name = str(value).strip().lower()
        if name == "warn":
            return cls.WARNING
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"unknown log level: {value!r}") from None

    @property
    def label(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class LogEvent:
    """Single log event, rendered once per emit."""
    level: Level
    message: str
    timestamp: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc)
    )

    def render(self) -> str:
        """Render as `time="..." level=... msg="..."` line."""
        ts = self.timestamp.isoformat(timespec="seconds")
        if ts.endswith("+00:00"):
            ts = ts[:-6] + "Z"
        msg = (
            self.message.replace("\\", "\\\\")
            .replace('"', '\\"')
            .replace("\n", "\\n")
            .replace("\r", "\\r")
        )
        return f'time="{ts}" level={self.level.label} msg="{msg}"\n'


class ILogDestination(Protocol):
    """Interface for a log sink accepting rendered text."""

    def write(self, text: str) -> bool:
        """Write text, return success."""
        ...
