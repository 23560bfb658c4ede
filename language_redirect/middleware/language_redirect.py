"""
Language Redirect Middleware

Redirects GET requests for the bare homepage ("/") to the homepage of the
visitor's language, e.g. "/de". The language preset is chosen by
LanguagePresetResolver from:
  1. the frontend language cookie (when a cookie name is configured)
  2. the Accept-Language header (first value only)
  3. the default preset of the language dimension

Every other request is passed to the next handler untouched. A missing
default preset raises NoPresetAvailableError, which is left to the
application's exception handlers.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import RedirectResponse

if TYPE_CHECKING:
    from collections.abc import Callable

    from fastapi import Request
    from starlette.datastructures import URL
    from starlette.responses import Response
    from starlette.types import ASGIApp

    from language_redirect.presets import LanguagePreset
    from language_redirect.resolver import LanguagePresetResolver

logger = logging.getLogger(__name__)

# Characters trimmed from the path before checking for the site root
PATH_TRIM_CHARACTERS = " \t\n\r\0\x0b/"


def should_handle(method: str, path: str) -> bool:
    """Return True only for GET requests to the site root."""
    if method != "GET":
        return False
    return path.strip(PATH_TRIM_CHARACTERS) == ""


def encoded_path(request: Request) -> str:
    """The request path as sent by the client, without percent-decoding."""
    raw_path = request.scope.get("raw_path")
    if not raw_path:
        return request.url.path
    return raw_path.split(b"?", 1)[0].decode("latin-1")


def build_redirect(url: URL, preset: LanguagePreset) -> RedirectResponse:
    """Temporary redirect to ``url`` with its path replaced by the preset's segment.

    Scheme, host, port and query string of the original URL are kept.
    """
    location = url.replace(path="/" + preset.uri_segment)
    return RedirectResponse(url=str(location), status_code=307)


class LanguageRedirectMiddleware(BaseHTTPMiddleware):
    """Redirect root page requests to the best matching language homepage."""

    def __init__(
        self,
        app: ASGIApp,
        resolver: LanguagePresetResolver,
        fe_language_cookie_name: str = "",
    ):
        super().__init__(app)
        self.resolver = resolver
        self.fe_language_cookie_name = fe_language_cookie_name

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if not should_handle(request.method, encoded_path(request)):
            return await call_next(request)

        cookie_value = None
        if self.fe_language_cookie_name:
            cookie_value = request.cookies.get(self.fe_language_cookie_name)

        preset = self.resolver.resolve(cookie_value, request.headers.get("Accept-Language", ""))

        response = build_redirect(request.url, preset)
        logger.info(f"Redirecting {request.url.path} to language preset '{preset.identifier}'")
        return response
