"""
ReelForge Backend API
FastAPI application for generating short social videos: script, images, voice

This is the main entry point that wires together all routes and services.
"""

import os
import uuid
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import (
    API_TITLE,
    API_DESCRIPTION,
    API_VERSION,
    CORS_ORIGINS,
    get_image_settings,
    get_llm_settings,
    get_pipeline_settings,
    get_tts_settings,
    parse_bool_env,
)
from .config.constants import MSG_INTERNAL_ERROR, MSG_INVALID_REQUEST
from .core import (
    PipelineError,
    setup_logging,
    get_logger,
    set_request_id,
    clear_context,
)
from .routes import (
    script_router,
    images_router,
    voice_router,
)
from .services.llm import get_all_providers

# Initialize logging
log_level = os.getenv("LOG_LEVEL", "INFO")
log_file = os.getenv("LOG_FILE")
use_json_logs = parse_bool_env(os.getenv("JSON_LOGS"), default=False)

setup_logging(
    level=log_level,
    log_file=Path(log_file) if log_file else None,
    use_json=use_json_logs,
)

logger = get_logger(__name__, service="api")


@asynccontextmanager
async def lifespan(_app: FastAPI):
    llm_settings = get_llm_settings()
    logger.info("Starting ReelForge API", extra={
        "log_level": log_level,
        "json_logs": use_json_logs,
        "llm_provider": llm_settings.provider.value,
        "llm_configured": bool(llm_settings.api_key),
        "image_provider_configured": get_image_settings().is_configured,
        "max_concurrency": get_pipeline_settings().max_concurrency,
    })
    try:
        yield
    finally:
        logger.info("Shutting down ReelForge API")


# Create FastAPI app
app = FastAPI(
    title=API_TITLE,
    description=API_DESCRIPTION,
    version=API_VERSION,
    lifespan=lifespan,
)


@app.middleware("http")
async def add_request_correlation(request: Request, call_next):
    """Add correlation ID and log every request/response pair."""
    request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
    set_request_id(request_id)
    path = request.url.path

    logger.info(f"{request.method} {path}", extra={
        "method": request.method,
        "path": path,
        "client": request.client.host if request.client else "unknown",
    })

    try:
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id

        logger.info(f"Response: {response.status_code}", extra={
            "status_code": response.status_code,
            "method": request.method,
            "path": path,
        })
        return response
    finally:
        clear_context()


# CORS middleware for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error_envelope(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


@app.exception_handler(PipelineError)
async def pipeline_error_handler(request: Request, exc: PipelineError):
    log = logger.warning if exc.status_code < 500 else logger.error
    log(f"{type(exc).__name__}: {exc.public_message}", extra={
        "path": request.url.path,
        "status_code": exc.status_code,
        "detail": exc.detail,
    })
    return _error_envelope(exc.status_code, exc.public_message)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.warning("Invalid request body", extra={
        "path": request.url.path,
        "error": str(exc),
    })
    return _error_envelope(400, MSG_INVALID_REQUEST)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error("Unhandled error", extra={
        "path": request.url.path,
        "error": str(exc),
    }, exc_info=exc)
    return _error_envelope(500, MSG_INTERNAL_ERROR)


# Include routers
app.include_router(script_router)
app.include_router(images_router)
app.include_router(voice_router)


@app.get("/")
async def root():
    """Root endpoint - API info"""
    return {
        "message": "ReelForge API - Generate short social videos",
        "version": API_VERSION
    }


@app.get("/health")
async def health_check():
    """
    Health check endpoint.

    Reports which providers have credentials. Always 200: the image stage
    degrades to placeholders and the script stage answers with an error
    envelope, so a missing key never makes the service unusable.
    """
    llm_settings = get_llm_settings()
    image_settings = get_image_settings()

    return {
        "status": "healthy",
        "checks": {
            "llm": {
                "provider": llm_settings.provider.value,
                "model": llm_settings.model,
                "configured": bool(llm_settings.api_key),
                "providers": get_all_providers(llm_settings),
            },
            "images": {
                "configured": image_settings.is_configured,
                "mode": "provider" if image_settings.is_configured else "placeholder",
            },
            "tts": {
                "engine": "edge-tts",
                "default_voice": get_tts_settings().default_voice,
            },
        },
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "reelforge.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
