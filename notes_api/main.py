"""
Notes API - Main Application
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings, settings
from .dependencies import init_dependencies, close_dependencies
from .routes import auth_router, notes_router

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)


async def json_http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render dict details as the response body itself."""
    if isinstance(exc.detail, dict):
        return JSONResponse(exc.detail, status_code=exc.status_code, headers=exc.headers)
    return await http_exception_handler(request, exc)


async def unhandled_exception_handler(request: Request, exc: Exception):
    """Log unexpected errors and hide their details from the client."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse({"error": "Internal server error"}, status_code=500)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Build the application. Settings default to the environment."""
    app_settings = app_settings or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan - startup and shutdown."""
        logger.info("Starting Notes API...")
        await init_dependencies(app_settings)
        logger.info("Application ready")
        yield
        logger.info("Shutting down...")
        await close_dependencies()

    app = FastAPI(
        title="Notes API",
        description="Notes with cookie-based session authentication",
        version="1.0.0",
        lifespan=lifespan
    )

    app.add_exception_handler(StarletteHTTPException, json_http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Include routers
    app.include_router(auth_router)
    app.include_router(notes_router)

    @app.get("/")
    async def root():
        return {"message": "Hello, App"}

    @app.get("/health")
    async def health():
        """Health check endpoint (no auth required)."""
        return {"status": "ok"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "notes_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=True
    )
