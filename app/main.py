# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Species Catalog.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   species-catalog            (binds settings.API_HOST:settings.API_PORT)
# =============================================================================

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.exceptions import (
    SpeciesCatalogException,
    species_catalog_exception_handler,
)
from app.routers import health, pages, species
from app.auth import routes as auth_routes

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Logs startup and shutdown; the Supabase client is created lazily.
    """
    logger.info(f"Starting Species Catalog in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")

    yield

    logger.info("Shutting down Species Catalog")


# Create FastAPI application
app = FastAPI(
    title="Species Catalog",
    description="""
## Species Catalog

Browse, add and remove species records stored in Supabase.

- **Pages**: `/` (home), `/species` (list), `/species/{id}` (details)
- **API**: `/api/v1/species` for JSON access
- **Auth**: sign in with Supabase Auth, then `POST /api/v1/auth/session`
  with the access token to start a browser session
""",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Auth",
            "description": "Browser sessions and token verification",
        },
        {
            "name": "Species",
            "description": "Create, read, update and delete species",
        },
        {
            "name": "Pages",
            "description": "Server-rendered HTML pages",
        },
        {
            "name": "Health",
            "description": "API health and readiness checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(SpeciesCatalogException)
async def handle_species_catalog_exception(request: Request, exc: SpeciesCatalogException):
    """Handle custom species catalog exceptions."""
    return await species_catalog_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

# Authentication endpoints
app.include_router(
    auth_routes.router,
    prefix="/api/v1/auth",
    tags=["Auth"]
)

# Health check endpoints
app.include_router(
    health.router,
    prefix="/api/v1",
    tags=["Health"]
)

# Species API
app.include_router(
    species.router,
    prefix="/api/v1/species",
    tags=["Species"]
)

# HTML pages (includes the root landing page)
app.include_router(
    pages.router,
    tags=["Pages"]
)


# =============================================================================
# Server Entry Point
# =============================================================================

def run() -> None:
    """Serve the app on the configured host and port."""
    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    run()
