from datetime import datetime, timezone
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from signalpage.config import get_settings
from signalpage.routers import match
from signalpage.utils.logging_config import configure_for_environment, get_logger
from signalpage.middleware.error_handlers import (
    ExceptionHandlerMiddleware,
    RequestLoggingMiddleware,
    PerformanceMiddleware,
    validation_exception_handler,
)

settings = get_settings()

# Configure logging first
configure_for_environment(settings.environment, settings.log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan context manager"""
    logger.info(f"{settings.app_title} starting up (environment: {settings.environment})")
    yield
    logger.info(f"{settings.app_title} shutting down...")


app = FastAPI(title=settings.app_title, version=settings.app_version, lifespan=lifespan)
app.add_exception_handler(RequestValidationError, validation_exception_handler)

# Middleware runs LIFO: the exception handler must be outermost
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(PerformanceMiddleware, slow_request_threshold=settings.slow_request_threshold)
app.add_middleware(ExceptionHandlerMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
@app.head("/")
async def root():
    """Root endpoint - handles both GET and HEAD requests"""
    return {"message": f"Welcome to the {settings.app_title}", "version": settings.app_version, "status": "ok"}


@app.get("/health")
@app.head("/health")
async def health_check():
    """Health check endpoint - handles both GET and HEAD requests"""
    return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}


app.include_router(match.router, prefix="/api")

logger.info(f"{settings.app_title} initialized successfully")
