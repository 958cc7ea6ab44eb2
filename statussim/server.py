"""HTTP server routing requests to handlers."""

from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Mapping
from urllib.parse import unquote, urlsplit
from .interfaces import IRouteHandler, Response


def resolve(routes: Mapping[str, IRouteHandler], path: str) -> IRouteHandler:
    """Pick handler for path (longest matching prefix)."""
    for prefix in sorted(routes, key=len, reverse=True):
        if path.startswith(prefix):
            return routes[prefix]
    raise LookupError(f"no handler for {path}")


def make_request_handler(routes: Mapping[str, IRouteHandler]) -> type:
    """Build a BaseHTTPRequestHandler class bound to route table."""

    class SimulatorRequestHandler(BaseHTTPRequestHandler):
        def _dispatch(self, send_body: bool = True) -> None:
            path = unquote(urlsplit(self.path).path) or "/"
            response: Response = resolve(routes, path).handle(self.command, path)

            payload = response.body.encode("utf-8")
            self.send_response(response.status)
            self.send_header("Content-Type", "text/plain; charset=utf-8")
            self.send_header("Content-Length", str(len(payload)))
            self.end_headers()
            if send_body:
                self.wfile.write(payload)

        def send_response_only(self, code, message=None):
            # Status line always carries three digits, including 000-099
            if self.request_version == "HTTP/0.9":
                return
            if message is None:
                message = self.responses[code][0] if code in self.responses else ""
            if not hasattr(self, "_headers_buffer"):
                self._headers_buffer = []
            self._headers_buffer.append(
                f"{self.protocol_version} {code:03d} {message}\r\n".encode(
                    "latin-1", "strict"
                )
            )

        def do_GET(self):
            self._dispatch()

        def do_POST(self):
            self._dispatch()

        def do_PUT(self):
            self._dispatch()

        def do_DELETE(self):
            self._dispatch()

        def do_PATCH(self):
            self._dispatch()

        def do_HEAD(self):
            self._dispatch(send_body=False)

        def log_message(self, fmt, *args):
            # Requests are logged by handlers through the dispatcher
            pass

    return SimulatorRequestHandler


def make_server(
    host: str, port: int, routes: Mapping[str, IRouteHandler]
) -> ThreadingHTTPServer:
    """Bind threaded server. Raises OSError if bind fails."""
    return ThreadingHTTPServer((host, port), make_request_handler(routes))
