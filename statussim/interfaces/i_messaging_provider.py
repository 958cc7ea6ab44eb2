"""Messaging provider interface (adapter pattern)."""

from typing import Protocol, Sequence


class IMessagingProvider(Protocol):
    """Interface for outbound short-message delivery."""

    def send_text(self, recipients: Sequence[str], body: str) -> None:
        """Send text to every recipient. Raises on failure."""
        ...
