"""MessageBird SMS API adapter."""

import requests
from typing import Sequence
from ..errors import MessagingError
from ..interfaces import IMessagingProvider

MESSAGEBIRD_URL = "https://rest.messagebird.com/messages"


class MessageBirdAdapter:
    """Adapter for MessageBird REST messages endpoint."""

    def __init__(self, api_key: str, originator: str, base_url: str = MESSAGEBIRD_URL):
        self.api_key = api_key
        self.originator = originator
        self.base_url = base_url

    def _headers(self) -> dict:
        """Get auth headers."""
        return {
            "Authorization": f"AccessKey {self.api_key}",
            "Accept": "application/json",
        }

    def send_text(self, recipients: Sequence[str], body: str) -> None:
        """Send SMS to recipients."""
        # Validate input (early return)
        if not recipients:
            raise MessagingError("no recipients")

        try:
            resp = requests.post(
                self.base_url,
                headers=self._headers(),
                data={
                    "originator": self.originator,
                    "recipients": ",".join(recipients),
                    "body": body,
                },
                timeout=10
            )
        except requests.RequestException as e:
            raise MessagingError(f"request failed: {e}") from e

        if resp.status_code != 201:
            raise MessagingError(f"send failed: {resp.status_code}")

        try:
            message_id = resp.json().get("id", "")
        except ValueError:
            message_id = ""
        print(f"Message sent: {message_id}")
