"""
Order Management API
Customers, products and orders with role-based access
"""
import logging
import time
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables (AUTH_SECRET is read from the process environment)
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(env_path)

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from order_management.api import auth, customers, orders, products
from order_management.api.dependencies import get_user_service
from order_management.core.config import settings
from order_management.core.database import CONNECTION_TIMEOUT, get_db_connection_with_retry, init_db
from order_management.core.exceptions import (
    ApplicationError,
    AuthenticationError,
    DomainValidationError,
    MissingReferenceError,
    NotFoundError,
    RequestShapeError,
)
from order_management.core.logging import configure_logging

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


def seed_admin() -> None:
    """Create the configured Admin when the users table is empty"""
    created = get_user_service().seed_admin(
        settings.ADMIN_NAME, settings.ADMIN_EMAIL, settings.ADMIN_PASSWORD
    )
    if created is not None:
        logger.info(f"Seeded admin user {created.email}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.AUTO_CREATE_SCHEMA:
        logger.info("Creating database schema")
        init_db(settings.DATABASE_URL)
    if settings.ADMIN_EMAIL and settings.ADMIN_PASSWORD:
        seed_admin()
    yield


app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    description=settings.API_DESCRIPTION,
    debug=settings.API_DEBUG,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_allowed_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)


# =============================================================================
# Error responses
# =============================================================================

ERROR_STATUS = (
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (DomainValidationError, status.HTTP_400_BAD_REQUEST),
    (MissingReferenceError, status.HTTP_400_BAD_REQUEST),
    (RequestShapeError, status.HTTP_400_BAD_REQUEST),
)


def error_body(message: str, details: dict) -> dict:
    return {
        "status": "error",
        "title": "An error occurred.",
        "detail": message,
        "details": jsonable_encoder(details),
    }


@app.exception_handler(ApplicationError)
async def application_error_handler(request: Request, exc: ApplicationError):
    status_code = next(
        (code for error_type, code in ERROR_STATUS if isinstance(exc, error_type)),
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
    headers = {"WWW-Authenticate": "Bearer"} if status_code == status.HTTP_401_UNAUTHORIZED else None
    return JSONResponse(
        status_code=status_code,
        content=error_body(exc.message, exc.details),
        headers=headers,
    )


# Include API routers
app.include_router(auth.router, prefix="/api/v1", tags=["Auth"])
app.include_router(customers.router, prefix="/api/v1/customers", tags=["Customers"])
app.include_router(products.router, prefix="/api/v1/products", tags=["Products"])
app.include_router(orders.router, prefix="/api/v1/orders", tags=["Orders"])


@app.get("/")
async def root():
    """Root endpoint - API status"""
    return {
        "message": "Order Management API",
        "status": "online",
        "version": settings.API_VERSION,
        "description": settings.API_DESCRIPTION,
    }


@app.get("/health")
async def health():
    """Health check endpoint for monitoring - tests database connectivity"""
    start_time = time.time()

    db_status = "unknown"
    db_latency_ms = None
    db_error = None

    try:
        # Minimal retry keeps the check fast
        conn = get_db_connection_with_retry(max_retries=1, retry_delay=0.5)
        cursor = conn.cursor()

        db_start = time.time()
        cursor.execute("SELECT 1")
        cursor.fetchone()
        db_latency_ms = round((time.time() - db_start) * 1000, 2)

        cursor.close()
        conn.close()
        db_status = "connected"
    except Exception as e:
        db_status = "disconnected"
        db_error = str(e)

    total_latency_ms = round((time.time() - start_time) * 1000, 2)

    return {
        "status": "healthy" if db_status == "connected" else "degraded",
        "service": "order-management-api",
        "version": settings.API_VERSION,
        "database": {
            "status": db_status,
            "latency_ms": db_latency_ms,
            "error": db_error,
            "connection_timeout_s": CONNECTION_TIMEOUT,
        },
        "total_latency_ms": total_latency_ms,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("order_management.main:app", host=settings.API_HOST, port=settings.API_PORT)
