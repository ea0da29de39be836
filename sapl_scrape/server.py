# -*- coding: utf-8 -*-
"""
Minimal local HTTP server for the display client.

    GET /api/indications   consolidated list (JSON array)
    GET /api/categories    category -> count

Every request re-scrapes; caching is left to whatever sits in front
(see the Cache-Control header on successful responses).
"""

import logging
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Optional, Sequence
from urllib.parse import urlparse

from .api import ApiResponse, categories_response, indications_response

logger = logging.getLogger(__name__)

ROUTES = {
    "/api/indications": indications_response,
    "/api/categories": categories_response,
}


def make_handler(urls: Optional[Sequence[str]] = None):
    class IndicationsHandler(BaseHTTPRequestHandler):
        """Routes GET requests to the JSON responders."""

        def do_GET(self):
            path = urlparse(self.path).path.rstrip("/") or "/"
            route = ROUTES.get(path)
            if route is None:
                self.send_json(ApiResponse(404, {"message": "Not found"}))
                return
            self.send_json(route(urls))

        def send_json(self, response: ApiResponse):
            payload = response.to_bytes()
            self.send_response(response.status)
            self.send_header("Content-Type", "application/json; charset=utf-8")
            self.send_header("Content-Length", str(len(payload)))
            for name, value in response.headers.items():
                self.send_header(name, value)
            self.end_headers()
            self.wfile.write(payload)

        def log_message(self, format, *args):
            logger.info(f"{self.address_string()} - {format % args}")

    return IndicationsHandler


def serve(host: str = "127.0.0.1", port: int = 8080, urls: Optional[Sequence[str]] = None):
    httpd = ThreadingHTTPServer((host, port), make_handler(urls))
    logger.info(f"Serving on http://{host}:{port}/api/indications")
    try:
        httpd.serve_forever()
    except KeyboardInterrupt:
        logger.info("Shutting down")
    finally:
        httpd.server_close()
