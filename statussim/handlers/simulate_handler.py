"""Handler for /simulate/<code>."""

from http import HTTPStatus
from ..interfaces import ILogSink, Response
from .default_handler import HELP_TEXT


def reason_phrase(code: int) -> str:
    """Standard reason phrase, empty for unknown codes."""
    try:
        return HTTPStatus(code).phrase
    except ValueError:
        return ""


class SimulateHandler:
    """Handler responding with the status code given in the path."""

    def __init__(self, logger: ILogSink):
        self.logger = logger

    def _parse_code(self, segment: str) -> int | None:
        """Accept exactly three ASCII digits."""
        if len(segment) != 3 or not segment.isascii() or not segment.isdigit():
            return None
        return int(segment)

    def handle(self, method: str, path: str) -> Response:
        """Handle simulate request."""
        parts = path.split("/")
        segment = parts[2] if len(parts) > 2 else ""

        code = self._parse_code(segment)
        # Early validation
        if code is None:
            output = f"Unknown status code used in path: {segment}"
            self.logger.log("warning", output)
            return Response(200, f"{output}\n{HELP_TEXT}\n")

        # Server Error class
        if 500 <= code < 600:
            output = f"Server error. [{method} {path}] {code} {reason_phrase(code)}"
            self.logger.log("error", output)
        else:
            output = (
                f"Everything's ok on our end.[{method} {path}] "
                f"{code} {reason_phrase(code)}"
            )
            self.logger.log("info", output)

        return Response(code, output + "\n")
