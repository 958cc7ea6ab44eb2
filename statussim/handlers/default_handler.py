"""Catch-all handler."""

from ..interfaces import ILogSink, Response

HELP_TEXT = (
    "Hello. "
    "Please enter a valid status code in the path to simulate a HTTP server status. "
    "E.g. www.example.com/simulate/404"
)


class DefaultHandler:
    """Handler for any unmatched path - static help, no logging."""

    def __init__(self, logger: ILogSink):
        self.logger = logger

    def handle(self, method: str, path: str) -> Response:
        """Return usage help."""
        return Response(200, HELP_TEXT + "\n")
