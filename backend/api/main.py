"""
FastAPI application entry point.

Run with: uvicorn api.main:app --reload
"""
import logging
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Load environment variables from backend/.env (optional) before other imports that read env
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(env_path)

from api.cors import CORSHeadersMiddleware
from api.routes import books
from api.routes.books import resolve_owner
from api.schemas import ErrorResponse
from db import init_db
from domain.errors import BookshelfError, InvalidArgument, NotFound
from settings import settings

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

ROUTE_NOT_FOUND = "Route not found"


# Create app
app = FastAPI(
    title="Bookshelf API",
    description="Per-owner book shelves with a global catalog index",
    version="0.1.0",
)

# Preflight + CORS headers on every response, including 500s
app.add_middleware(CORSHeadersMiddleware)

# Include routers
app.include_router(books.router, prefix="/api", tags=["books"])


def _error_response(exc: BookshelfError) -> JSONResponse:
    return JSONResponse(ErrorResponse(error=exc.message).model_dump(), status_code=exc.status_code)


@app.exception_handler(BookshelfError)
async def bookshelf_error_handler(request: Request, exc: BookshelfError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return _error_response(exc)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    # Unknown paths and unsupported methods are both "no such route", but a
    # malformed owner under /api/ is reported first.
    if exc.status_code in (404, 405):
        segments = request.scope["path"].strip("/").split("/")
        if len(segments) >= 3 and segments[0] == "api":
            try:
                resolve_owner(segments[1])
            except InvalidArgument as invalid:
                return _error_response(invalid)
        return _error_response(NotFound(ROUTE_NOT_FOUND))
    return JSONResponse(
        ErrorResponse(error=str(exc.detail)).model_dump(), status_code=exc.status_code
    )


@app.on_event("startup")
def startup_event():
    """Initialize database tables on startup."""
    init_db()


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"success": True, "status": "ok", "service": "Bookshelf API"}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"success": True, "status": "healthy"}
