"""
FastAPI Application Entry Point

This module creates and configures the FastAPI application.

Key Concepts:
=============

1. Application Factory Pattern
   - create_app() function returns configured app
   - Each app owns its own LibraryStore (app.state.store)
   - Tests create a fresh app, and so a fresh dataset, per test

2. Lifespan Events
   - startup: Log configuration and the loaded dataset
   - shutdown: Log the final collection sizes

3. Exception Handlers
   - GraphQL errors are serialized by Strawberry into the response body
   - Anything escaping outside GraphQL is logged and turned into a 500
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from library_api import __version__
from library_api.config import get_settings
from library_api.graphql import create_graphql_router
from library_api.store import LibraryStore

# =============================================================================
# Logging Configuration
# =============================================================================
# Configure logging before creating the app
settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# =============================================================================
# Lifespan Events
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Code before yield: Runs on startup
    Code after yield: Runs on shutdown
    """
    # ----- STARTUP -----
    store: LibraryStore = app.state.store
    logger.info(f"Starting {settings.app_name}...")
    logger.info(f"Debug mode: {settings.debug}")
    logger.info(
        f"Seed dataset '{store.seed_dataset}': "
        f"{len(store.authors)} authors, {len(store.books)} books"
    )

    yield  # Application runs here

    # ----- SHUTDOWN -----
    logger.info(
        f"Shutting down {settings.app_name} "
        f"({len(store.authors)} authors, {len(store.books)} books in memory)"
    )


# =============================================================================
# Application Factory
# =============================================================================
def create_app(store: LibraryStore | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store: Store to serve; a new one loaded from the configured seed
               dataset is created when omitted

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.app_name,
        description="""
## Library GraphQL API

An in-memory GraphQL API over a small book/author dataset.

### Features
- **Queries**: books, authors, filters, search and cursor pagination
- **Mutations**: CRUD for books and authors with coded validation errors
- **Reset**: `resetData` restores the seed dataset

The API lives at `/graphql`.
        """,
        version=__version__,
        lifespan=lifespan,
    )

    app.state.store = store if store is not None else LibraryStore(settings.seed_dataset)

    # -------------------------------------------------------------------------
    # CORS Middleware
    # -------------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------
    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Catch-all exception handler.

        In production, hide internal errors from users.
        In debug mode, show more details.
        """
        logger.error(f"Unhandled error: {exc}", exc_info=True)

        if settings.debug:
            return JSONResponse(
                status_code=500,
                content={"detail": str(exc)},
            )

        return JSONResponse(
            status_code=500,
            content={"detail": "An internal error occurred."},
        )

    # -------------------------------------------------------------------------
    # GraphQL Endpoint
    # -------------------------------------------------------------------------
    graphql_router = create_graphql_router()
    app.include_router(graphql_router, prefix="/graphql", tags=["GraphQL"])

    # -------------------------------------------------------------------------
    # Health Check Endpoint
    # -------------------------------------------------------------------------
    @app.get(
        "/health",
        tags=["Health"],
        summary="Health check",
        description="Check if the API is running and report dataset sizes.",
    )
    async def health_check(request: Request) -> dict:
        """Health check endpoint with the current collection sizes."""
        current: LibraryStore = request.app.state.store
        return {
            "status": "healthy",
            "app": settings.app_name,
            "version": __version__,
            "environment": settings.environment,
            "store": {
                "seed_dataset": current.seed_dataset,
                "authors": len(current.authors),
                "books": len(current.books),
            },
            "graphql": {
                "endpoint": "/graphql",
                "ide": settings.graphql_ide,
            },
        }

    @app.get(
        "/",
        tags=["Root"],
        summary="API root",
        description="Welcome message and API information.",
    )
    async def root() -> dict:
        """Root endpoint with API information."""
        return {
            "message": f"Welcome to {settings.app_name}",
            "version": __version__,
            "graphql": "/graphql",
            "health": "/health",
        }

    return app


# =============================================================================
# Application Instance
# =============================================================================
# This is what uvicorn imports: uvicorn library_api.main:app

app = create_app()


# =============================================================================
# Development Server
# =============================================================================
# This allows running the app directly with: python -m library_api.main

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "library_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
