"""
MediVault FastAPI Backend Application

Main application entry point for the medical document vault API.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from datetime import datetime

from medivault.core.config import settings
from medivault.core.errors import register_exception_handlers
from medivault.api import router
from medivault.schemas.document import HealthCheck
from medivault.utils.file_utils import ensure_upload_dir

# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    description="Upload, categorize and search personal medical documents and track symptoms",
    version=settings.app_version,
    debug=settings.debug,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

register_exception_handlers(app)

# Include API routes
app.include_router(router, prefix="/api")


@app.get("/", tags=["root"])
async def root():
    """Root endpoint with API information."""
    return {
        "message": settings.app_name,
        "version": settings.app_version,
        "status": "running",
        "docs": "/docs",
        "api": "/api",
    }


@app.get("/health", response_model=HealthCheck, tags=["health"])
async def health_check():
    """Health check endpoint."""
    return HealthCheck(
        status="healthy", version=settings.app_version, timestamp=datetime.now()
    )


# Startup event
@app.on_event("startup")
async def startup_event():
    """Actions to perform on application startup."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ensure_upload_dir(settings.upload_dir)

    print(f"\n{'='*60}")
    print(f"🏥 {settings.app_name} v{settings.app_version}")
    print(f"{'='*60}")
    print(f"📡 Server running on http://{settings.host}:{settings.port}")
    print(f"📚 API Documentation: http://{settings.host}:{settings.port}/docs")
    print(f"📁 Upload directory: {settings.upload_dir}")
    print(f"{'='*60}\n")


# Shutdown event
@app.on_event("shutdown")
async def shutdown_event():
    """Actions to perform on application shutdown."""
    print("\n👋 Shutting down MediVault Backend...\n")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "medivault.main:app", host=settings.host, port=settings.port, reload=settings.debug
    )
