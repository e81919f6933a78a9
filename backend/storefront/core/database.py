"""
PostgreSQL database access

This module centralizes every way the application reaches the database:
- SQLAlchemy (table definitions and schema creation)
- psycopg2 directly (repositories and migrations run raw SQL)

Author: Storefront Team
Updated: 2026-10-19
"""
import time
import logging

import psycopg2
from psycopg2.extras import RealDictCursor
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base

from .config import settings

logger = logging.getLogger(__name__)

CONNECTION_TIMEOUT = settings.DB_CONNECT_TIMEOUT


# ============================================================================
# SQLAlchemy Configuration (for table definitions)
# ============================================================================

# Engine creation does not open a connection until first use
engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
    pool_size=10,
    max_overflow=20,
)

Base = declarative_base()


# ============================================================================
# psycopg2 Direct Connections (for raw SQL queries)
# ============================================================================

def _require_database_url() -> str:
    database_url = settings.DATABASE_URL
    if not database_url:
        raise RuntimeError("DATABASE_URL not configured")
    return database_url


def get_db_connection_dict():
    """
    Get a psycopg2 connection using RealDictCursor (rows come back as dicts)

    Repositories use this so rows can be unpacked straight into domain models.

    Example:
        conn = get_db_connection_dict()
        cursor = conn.cursor()
        cursor.execute("SELECT * FROM orders")
        results = cursor.fetchall()  # list of dicts
        cursor.close()
        conn.close()
    """
    return psycopg2.connect(
        _require_database_url(),
        cursor_factory=RealDictCursor,
        connect_timeout=CONNECTION_TIMEOUT,
    )


# ============================================================================
# Database Connection with Retry Logic
# ============================================================================

def get_db_connection_with_retry(max_retries=None, retry_delay=None):
    """
    Get a psycopg2 connection, retrying on OperationalError

    Retries use exponential backoff: retry_delay, 2 * retry_delay, ...
    Any other error fails immediately.

    Args:
        max_retries: Maximum number of connection attempts (default: settings)
        retry_delay: Initial delay between retries in seconds (default: settings)

    Returns:
        psycopg2 connection object

    Raises:
        psycopg2.OperationalError: If all retry attempts fail
    """
    database_url = _require_database_url()
    if max_retries is None:
        max_retries = settings.DB_CONNECT_MAX_RETRIES
    if retry_delay is None:
        retry_delay = settings.DB_CONNECT_RETRY_DELAY

    for attempt in range(1, max_retries + 1):
        try:
            logger.debug(f"Database connection attempt {attempt}/{max_retries}")
            conn = psycopg2.connect(database_url, connect_timeout=CONNECTION_TIMEOUT)

            cursor = conn.cursor()
            cursor.execute("SELECT 1")
            cursor.close()

            logger.debug(f"Database connection successful on attempt {attempt}")
            return conn

        except psycopg2.OperationalError as e:
            logger.warning(f"Connection error on attempt {attempt}/{max_retries}: {e}")

            if attempt >= max_retries:
                logger.error(f"All {max_retries} connection attempts failed")
                raise

            delay = retry_delay * (2 ** (attempt - 1))
            logger.info(f"Retrying in {delay:.2f} seconds...")
            time.sleep(delay)
