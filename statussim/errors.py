"""Exceptions raised by statussim."""


class StatusSimError(Exception):
    """Base error."""


class ConfigError(StatusSimError):
    """Invalid configuration value."""


class MessagingError(StatusSimError):
    """Outbound message delivery failed."""
