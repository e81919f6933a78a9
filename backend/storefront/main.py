"""
Storefront - Backend API
Customers, product catalog and order creation
"""
import time
import logging
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Load environment variables before settings are read
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(env_path)

from storefront.api import customers, orders, products
from storefront.core.config import settings
from storefront.core.database import get_db_connection_with_retry, CONNECTION_TIMEOUT
from storefront.core.logging_config import setup_logging

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    description=settings.API_DESCRIPTION,
    debug=settings.API_DEBUG,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_allowed_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
    allow_headers=["*"],
)

app.include_router(customers.router, prefix="/api/v1/customers", tags=["Customers"])
app.include_router(products.router, prefix="/api/v1/products", tags=["Products"])
app.include_router(orders.router, prefix="/api/v1/orders", tags=["Orders"])


@app.get("/")
async def root():
    """Root endpoint - API status banner"""
    return {
        "message": "Storefront API",
        "status": "online",
        "version": settings.API_VERSION,
    }


@app.get("/health")
async def health():
    """Health check endpoint - tests database connectivity"""
    start_time = time.time()

    db_status = "unknown"
    db_latency_ms = None
    db_error = None

    try:
        # Single attempt so the check stays fast
        conn = get_db_connection_with_retry(max_retries=1, retry_delay=0.5)
        try:
            cursor = conn.cursor()

            db_start = time.time()
            cursor.execute("SELECT 1")
            cursor.fetchone()
            db_latency_ms = round((time.time() - db_start) * 1000, 2)

            cursor.close()
        finally:
            conn.close()
        db_status = "connected"
    except Exception as e:
        logger.warning(f"Health check database error: {e}")
        db_status = "disconnected"
        db_error = str(e)

    total_latency_ms = round((time.time() - start_time) * 1000, 2)

    return {
        "status": "healthy" if db_status == "connected" else "degraded",
        "service": "storefront-api",
        "version": settings.API_VERSION,
        "database": {
            "status": db_status,
            "latency_ms": db_latency_ms,
            "error": db_error,
            "connection_timeout_s": CONNECTION_TIMEOUT
        },
        "total_latency_ms": total_latency_ms
    }


logger.info("Storefront API routers mounted")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("storefront.main:app", host=settings.API_HOST, port=settings.API_PORT)
