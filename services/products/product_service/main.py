"""
Product Catalog Microservice
Product CRUD, catalog filters and stock checks against the inventory service
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import subprocess
import os

from shared.core import (
    ServiceHealth,
    setup_logging,
    RequestLoggingMiddleware,
    get_logger,
    register_exception_handlers,
)
from product_service.core_settings import get_settings
from product_service.api.routes import router as products_router
from product_service.infrastructure.db import engine, init_models

SERVICE_NAME = "product-service"
SERVICE_DESCRIPTION = "Product catalog microservice"
SERVICE_ROOT = os.path.join(os.path.dirname(__file__), "..")

settings = get_settings()

setup_logging(
    service_name=SERVICE_NAME,
    level=settings.LOG_LEVEL,
    environment=settings.ENVIRONMENT,
    version=settings.SERVICE_VERSION,
)

logger = get_logger(__name__)

def run_migrations() -> None:
    logger.info("Running database migrations")
    result = subprocess.run(
        ["alembic", "upgrade", "head"],
        cwd=SERVICE_ROOT,
        capture_output=True,
        text=True,
        check=False
    )
    if result.returncode != 0:
        logger.warning(f"Migration output: {result.stderr}")
    else:
        logger.info("Database migrations completed")

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting {SERVICE_NAME} version {settings.SERVICE_VERSION}")

    if settings.RUN_MIGRATIONS:
        try:
            run_migrations()
        except OSError as e:
            logger.error(f"Migration error: {e}")

    try:
        init_models()
        logger.info("Database models initialized")
    except Exception as e:
        logger.error(f"Failed to initialize database models: {e}")
        raise

    logger.info(f"{SERVICE_NAME} started successfully")
    yield
    logger.info(f"Shutting down {SERVICE_NAME}")

app = FastAPI(
    title=SERVICE_NAME,
    description=SERVICE_DESCRIPTION,
    version=settings.SERVICE_VERSION,
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)

register_exception_handlers(app)

health_service = ServiceHealth(
    SERVICE_NAME,
    settings.SERVICE_VERSION,
    engine=engine,
    required_settings={
        "DATABASE": settings.database_url,
        "INVENTORY_SERVICE_URL": settings.INVENTORY_SERVICE_URL,
    },
)
app.include_router(health_service.create_health_router())

app.include_router(products_router)

@app.get("/")
async def root():
    return {
        "service": SERVICE_NAME,
        "version": settings.SERVICE_VERSION,
        "status": "running",
        "docs": "/api/docs"
    }

@app.get("/info")
async def info():
    """Service information endpoint"""
    return {
        "service": SERVICE_NAME,
        "version": settings.SERVICE_VERSION,
        "description": SERVICE_DESCRIPTION,
        "environment": settings.ENVIRONMENT,
        "endpoints": {
            "products": "/api/products",
            "health": "/health",
            "ready": "/health/ready",
            "live": "/health/live",
            "metrics": "/metrics",
            "docs": "/api/docs"
        }
    }
