"""
AssetKeeper application factory
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from assetkeeper.core.config import settings
from assetkeeper.core.database import init_db


def create_app() -> FastAPI:
    """Create and configure the FastAPI application"""

    app = FastAPI(
        title=settings.APP_NAME,
        description="IT asset inventory, complaints and maintenance tracking",
        version=settings.APP_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json" if settings.DEBUG else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Import routers here to avoid circular imports
    from assetkeeper.api import api_router
    from assetkeeper.api.exception_handlers import setup_exception_handlers

    setup_exception_handlers(app)
    app.include_router(api_router, prefix="/api/v1")

    # Startup event
    @app.on_event("startup")
    async def startup_event():
        """Create tables that do not exist yet"""
        await init_db()

    # Health check endpoint
    @app.get("/health")
    async def health_check():
        return {"status": "healthy", "service": settings.APP_NAME}

    return app
