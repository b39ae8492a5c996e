"""
Favicon Service - FastAPI Application.

Serves the derived favicon set. Run with:
    uvicorn app.main:create_app --factory

Error bodies follow {"detail", "error": {"code", "message", "request_id"}}.
A 404 under the favicon base path also lists the paths that are served there.
"""

import logging
from typing import Optional
from uuid import uuid4

from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse
# Router-level 404s are raised as starlette's HTTPException, not FastAPI's subclass
from starlette.exceptions import HTTPException as StarletteHTTPException

from faviconkit import setup
from faviconkit.logging_config import init_default_logging

from .deps import Settings, get_settings, load_options, router_prefix

logger = logging.getLogger(__name__)


def _request_id(request: Request) -> str:
    request_id = getattr(request.state, "request_id", None)
    if not request_id:
        request_id = request.state.request_id = str(uuid4())
    return request_id


def _error_response(request: Request, status_code: int, code: str, message: str, detail, **extra) -> JSONResponse:
    request_id = _request_id(request)
    body = {"detail": detail, "error": {"code": code, "message": message, "request_id": request_id}}
    body.update(extra)
    return JSONResponse(status_code=status_code, content=body, headers={"X-Request-Id": request_id})


def _favicon_paths_for(request: Request) -> Optional[list]:
    """Served favicon paths when the request falls under the favicon base path."""
    prefix = getattr(request.app.state, "favicon_prefix", None)
    paths = getattr(request.app.state, "favicon_paths", None)
    if prefix is None or not paths:
        return None
    if prefix and not (request.url.path == prefix or request.url.path.startswith(prefix + "/")):
        return None
    return paths


async def attach_request_id(request: Request, call_next):
    request.state.request_id = request.headers.get("X-Request-Id") or str(uuid4())
    response = await call_next(request)
    response.headers["X-Request-Id"] = request.state.request_id
    return response


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    detail = exc.detail
    message = detail if isinstance(detail, str) else f"HTTP {exc.status_code}"
    extra = {}
    if exc.status_code == 404:
        favicon_paths = _favicon_paths_for(request)
        if favicon_paths is not None:
            extra["favicon_paths"] = favicon_paths
    return _error_response(request, exc.status_code, f"HTTP_{exc.status_code}", message, detail, **extra)


async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("[%s] Unhandled exception on %s %s", _request_id(request), request.method, request.url.path)
    return _error_response(request, 500, "INTERNAL_SERVER_ERROR", "Internal server error", "Internal server error")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the service and derive the favicon set.

    Raises if the source images cannot be read or decoded, so a broken icon
    stops the process at startup instead of failing per request.
    """
    init_default_logging()
    if settings is None:
        settings = get_settings()

    options = load_options(settings)
    prefix = router_prefix(settings.favicon_base_path)
    favicon_router = APIRouter(prefix=prefix, tags=["favicon"])
    assets = setup(
        favicon_router,
        options,
        base_path=settings.favicon_base_path,
        max_workers=settings.favicon_workers,
    )

    app = FastAPI(
        title="Favicon Service",
        description="Derived favicon set and web app metadata",
        version="0.1.0",
        debug=settings.debug,
    )
    app.middleware("http")(attach_request_id)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
    app.include_router(favicon_router)
    app.state.favicon_prefix = prefix
    app.state.favicon_paths = [prefix + asset.path for asset in assets]

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "app.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
