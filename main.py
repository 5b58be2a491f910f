#!/usr/bin/env python3
"""
AssetKeeper - IT asset inventory and maintenance tracking
Main application entry point
"""

import logging

import uvicorn
from assetkeeper import create_app
from assetkeeper.core.config import settings

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Create the FastAPI application
app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level="info" if settings.DEBUG else "warning"
    )
