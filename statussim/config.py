"""Configuration management."""

import os

from .errors import ConfigError


def parse_recipients(raw: str) -> tuple[str, ...]:
    """Split comma-separated recipient list."""
    return tuple(r.strip() for r in raw.split(",") if r.strip())


def parse_port(raw: str) -> int:
    """Validate listen port."""
    try:
        port = int(raw)
    except (TypeError, ValueError):
        raise ConfigError(f"invalid port: {raw!r}") from None

    if not 0 <= port <= 65535:
        raise ConfigError(f"port out of range: {port}")
    return port


# Server Configuration
SIMULATOR_HOST = os.getenv("SIMULATOR_HOST", "")
SIMULATOR_PORT = os.getenv("SIMULATOR_PORT", "8080")

# Log file
LOG_PATH = os.getenv("LOG_PATH", "mbservermon.log")

# Alert Configuration
ALERT_TRANSPORT = os.getenv("ALERT_TRANSPORT", "messagebird").strip().lower()
ALERT_RECIPIENTS = parse_recipients(os.getenv("ALERT_RECIPIENTS", ""))
ALERT_ORIGINATOR = os.getenv("ALERT_ORIGINATOR", "MBServerMon")
MESSAGEBIRD_API_KEY = os.getenv("MESSAGEBIRD_API_KEY", "")
TELEGRAM_TOKEN = os.getenv("TELEGRAM_TOKEN", "")
