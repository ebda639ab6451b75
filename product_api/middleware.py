"""
HTTP middleware for the product API.

Registered outermost first, a request passes through:
    RequestLoggingMiddleware -> ErrorHandlingMiddleware -> ApiKeyMiddleware -> routes
"""
import logging
from datetime import datetime, timezone

from fastapi import Request
from fastapi.responses import PlainTextResponse
from starlette.middleware.base import BaseHTTPMiddleware

from . import config

access_logger = logging.getLogger("product_api.access")
error_logger = logging.getLogger("product_api.errors")

MUTATING_METHODS = ("POST", "PUT", "DELETE")


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _original_url(request: Request) -> str:
    path = request.url.path
    if request.url.query:
        path += "?" + request.url.query
    return path


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        access_logger.info("[%s] %s %s", _timestamp(), request.method, _original_url(request))
        return await call_next(request)


class CredentialVerifier:
    """Decides whether a request carries acceptable credentials."""

    def verify(self, request: Request) -> bool:
        raise NotImplementedError


class StaticKeyVerifier(CredentialVerifier):
    """Accepts requests whose header exactly matches a pre-shared key."""

    def __init__(self, expected_key: str = config.API_KEY, header_name: str = config.API_KEY_HEADER):
        self.expected_key = expected_key
        self.header_name = header_name

    def verify(self, request: Request) -> bool:
        provided = request.headers.get(self.header_name)
        return bool(provided) and provided == self.expected_key


class ApiKeyMiddleware(BaseHTTPMiddleware):
    """Guards mutating requests under ``root``. Reads pass through."""

    def __init__(self, app, verifier: CredentialVerifier, root: str = config.PRODUCTS_ROOT):
        super().__init__(app)
        self.verifier = verifier
        self.root = root.rstrip("/")

    def _in_scope(self, path: str) -> bool:
        return path == self.root or path.startswith(self.root + "/")

    async def dispatch(self, request: Request, call_next):
        if (
            request.method in MUTATING_METHODS
            and self._in_scope(request.url.path)
            and not self.verifier.verify(request)
        ):
            return PlainTextResponse("Unauthorized: Invalid or missing API Key.", status_code=401)
        return await call_next(request)


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception:
            error_logger.exception("unhandled error on %s %s", request.method, _original_url(request))
            return PlainTextResponse("Something went wrong on the server!", status_code=500)
