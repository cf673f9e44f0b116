"""
Stub Application Factory

create_app() builds a FastAPI app that answers like the Book Library service.

Key Concepts:
=============

1. Application Factory Pattern
   - Every test gets its own app, with its own store and signing key
   - No state leaks between scenarios

2. App State
   - app.state.settings: credentials the login route accepts
   - app.state.store: in-memory books
   - app.state.secret_key: JWT signing key

3. Exception Handlers
   - ServiceError -> {error, message}
   - Unknown route -> 404 with availableEndpoints
   - Known route, unsupported method -> 404 "Cannot <METHOD> <path>"
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from bookcheck.config import Settings
from bookcheck.stub.errors import ServiceError
from bookcheck.stub.routers import auth_router, books_router
from bookcheck.stub.security import generate_secret_key
from bookcheck.stub.store import BookStore

logger = logging.getLogger(__name__)

AVAILABLE_ENDPOINTS = [
    "POST /auth/login",
    "GET /books",
    "GET /books/:id",
    "POST /books",
    "PUT /books/:id",
    "DELETE /books/:id",
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    logger.info("Starting stub Book Library service...")
    yield
    logger.info("Shutting down stub Book Library service...")


def create_app(settings: Settings, secret_key: str | None = None) -> FastAPI:
    """
    Create a stand-in Book Library service.

    Args:
        settings: Supplies the admin credentials the login route accepts
        secret_key: JWT signing key; a random one is generated if omitted

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title="Book Library (stub)",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    app.state.settings = settings
    app.state.store = BookStore()
    app.state.secret_key = secret_key or generate_secret_key()

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------
    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content=exc.to_body())

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        """
        Render routing errors the way the real service does.

        The service has no 405: a method it does not route on a known path is
        a plain 404 naming the method and path.
        """
        method = request.method
        path = request.url.path

        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content={"error": "Not Found", "message": f"Cannot {method} {path}"},
            )

        if exc.status_code == status.HTTP_404_NOT_FOUND:
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content={
                    "error": "Not Found",
                    "message": f"Route {method} {path} not found",
                    "availableEndpoints": AVAILABLE_ENDPOINTS,
                },
            )

        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail), "message": str(exc.detail)},
        )

    # -------------------------------------------------------------------------
    # Register Routers
    # -------------------------------------------------------------------------
    app.include_router(auth_router)
    app.include_router(books_router)

    return app
