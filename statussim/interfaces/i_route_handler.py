"""HTTP route handler interface."""

from dataclasses import dataclass
from typing import Protocol


@dataclass
class Response:
    """Simulated HTTP response."""
    status: int
    body: str


class IRouteHandler(Protocol):
    """Interface for path handlers."""

    def handle(self, method: str, path: str) -> Response:
        """Build response for request."""
        ...
