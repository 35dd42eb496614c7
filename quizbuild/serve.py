"""Serve the quiz website over HTTP on localhost."""

from __future__ import annotations

import logging
import sys
from functools import partial
from http import HTTPStatus
from http.server import SimpleHTTPRequestHandler, ThreadingHTTPServer
from os import PathLike
from urllib.parse import urlsplit

__all__ = ["PORT", "ROOT_REDIRECT", "QuizRequestHandler", "create_server", "main"]

PORT = 8000
ROOT_REDIRECT = "/rust-quiz/"

_log = logging.getLogger(__name__)


class QuizRequestHandler(SimpleHTTPRequestHandler):
    """Serve static files, redirecting the site root to the quiz."""

    def _is_root(self) -> bool:
        return urlsplit(self.path).path == "/"

    def _redirect_root(self) -> None:
        self.send_response(HTTPStatus.MOVED_PERMANENTLY)
        self.send_header("Location", ROOT_REDIRECT)
        self.send_header("Content-Length", "0")
        self.end_headers()

    def do_GET(self) -> None:
        if self._is_root():
            self._redirect_root()
        else:
            super().do_GET()

    def do_HEAD(self) -> None:
        if self._is_root():
            self._redirect_root()
        else:
            super().do_HEAD()

    def log_message(self, format: str, *args) -> None:
        """Send request logs to the module logger instead of stderr."""
        _log.debug("%s - %s", self.address_string(), format % args)


def create_server(
    address: tuple[str, int], directory: str | PathLike[str]
) -> ThreadingHTTPServer:
    """Bind a threaded HTTP server that serves files from ``directory``."""
    handler = partial(QuizRequestHandler, directory=str(directory))
    return ThreadingHTTPServer(address, handler)


def main() -> None:
    """Serve the current directory at localhost:8000 until interrupted."""
    with create_server(("127.0.0.1", PORT), ".") as server:
        print(f"Quiz server running on http://localhost:{PORT}/ ...", file=sys.stderr)
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass