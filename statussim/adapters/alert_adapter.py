"""Severe-event alert adapter (short message transport)."""

import sys
from typing import Sequence
from ..interfaces import IMessagingProvider

# Transport budget is 160 characters; longer payloads are cut to 159,
# matching the behaviour of earlier releases.
MAX_MESSAGE_LEN = 160
TRUNCATED_LEN = 159


def truncate_message(text: str) -> str:
    """Fit text into a single short message."""
    if len(text) > MAX_MESSAGE_LEN:
        return text[:TRUNCATED_LEN]
    return text


class AlertAdapter:
    """Adapter forwarding log text to a messaging provider."""

    def __init__(self, messaging: IMessagingProvider, recipients: Sequence[str]):
        self.messaging = messaging
        self.recipients = tuple(recipients)

    def write(self, text: str) -> bool:
        """Send text as alert, no retry."""
        body = truncate_message(text)
        try:
            self.messaging.send_text(self.recipients, body)
        except Exception as e:
            print(f"ERROR: alert send failed: {e}", file=sys.stderr)
            return False
        return True
