"""
Security Headers Middleware

Adds security headers to all HTTP responses.
"""

import logging

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """
    Middleware that adds security headers to all responses.

    Headers added:
    - X-Content-Type-Options: nosniff
    - X-Frame-Options: DENY
    - Referrer-Policy: no-referrer
    - Cache-Control: no-store for API responses
    """

    def __init__(
        self,
        app,
        frame_options: str = "DENY",
        content_type_options: str = "nosniff",
        referrer_policy: str = "no-referrer",
        cache_control: str = "no-store",
        exempt_paths: list = None,
    ):
        super().__init__(app)
        self.frame_options = frame_options
        self.content_type_options = content_type_options
        self.referrer_policy = referrer_policy
        self.cache_control = cache_control
        self.exempt_paths = exempt_paths or ["/docs", "/openapi.json", "/redoc"]

    async def dispatch(self, request: Request, call_next):
        response: Response = await call_next(request)

        response.headers["X-Content-Type-Options"] = self.content_type_options
        response.headers["X-Frame-Options"] = self.frame_options
        response.headers["Referrer-Policy"] = self.referrer_policy

        path = request.url.path
        if not any(path.startswith(exempt) for exempt in self.exempt_paths):
            response.headers["Cache-Control"] = self.cache_control

        # Remove potentially leaky headers
        if "server" in response.headers:
            del response.headers["server"]
        if "x-powered-by" in response.headers:
            del response.headers["x-powered-by"]

        return response
