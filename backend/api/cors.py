"""
Cross-origin handling for the books API.

Preflight requests are answered here for any path, before routing. Every
other response (errors included) leaves with the permissive CORS headers.
"""
import logging

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from api.schemas import ErrorResponse
from settings import settings

logger = logging.getLogger(__name__)

ALLOWED_METHODS = "GET,HEAD,POST,OPTIONS"


def cors_headers() -> dict:
    return {
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Methods": ALLOWED_METHODS,
        "Access-Control-Max-Age": str(settings.CORS_MAX_AGE),
    }


def preflight_response(request: Request) -> Response:
    """Answer an OPTIONS request without touching any route."""
    headers = request.headers
    if (
        headers.get("origin") is not None
        and headers.get("access-control-request-method") is not None
        and headers.get("access-control-request-headers") is not None
    ):
        return Response(
            status_code=200,
            headers={
                **cors_headers(),
                "Access-Control-Allow-Headers": headers["access-control-request-headers"],
            },
        )
    # Plain OPTIONS request.
    return Response(status_code=200, headers={"Allow": "GET, HEAD, POST, OPTIONS"})


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """Handle preflight generically and decorate every response."""

    async def dispatch(self, request: Request, call_next):
        if request.method == "OPTIONS":
            response = preflight_response(request)
        else:
            try:
                response = await call_next(request)
            except Exception as e:
                logger.exception("Unhandled error for %s %s", request.method, request.url.path)
                response = JSONResponse(ErrorResponse(error=str(e)).model_dump(), status_code=500)
        for name, value in cors_headers().items():
            response.headers[name] = value
        return response
