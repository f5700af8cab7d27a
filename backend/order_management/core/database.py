"""
PostgreSQL database access

This module centralizes every way the application reaches the database:
- SQLAlchemy metadata (schema definition and creation)
- psycopg2 direct connections (raw SQL in the repositories)

Author: TM3
Updated: 2025-10-17
"""
import logging
import time

import psycopg2
from psycopg2.extras import RealDictCursor, register_uuid
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base

from .config import settings

logger = logging.getLogger(__name__)

# Seconds before a connection attempt is abandoned
CONNECTION_TIMEOUT = 5

# Let psycopg2 adapt uuid.UUID parameters and return UUID columns as uuid.UUID
register_uuid()


# ============================================================================
# SQLAlchemy Configuration (schema only)
# ============================================================================

# Declarative base for the models
Base = declarative_base()


def init_db(database_url: str = None) -> None:
    """
    Create all tables declared in order_management.models

    Safe to run repeatedly; existing tables are left untouched.
    """
    # Registers the model classes on Base.metadata
    from order_management import models  # noqa: F401

    engine = create_engine(database_url or settings.DATABASE_URL, pool_pre_ping=True)
    try:
        Base.metadata.create_all(bind=engine)
        logger.info("Database schema is up to date")
    finally:
        engine.dispose()


# ============================================================================
# psycopg2 Direct Connections (for raw SQL queries)
# ============================================================================

def get_db_connection_dict():
    """
    Get a database connection with RealDictCursor (returns dictionaries)

    Returns:
        psycopg2 connection with RealDictCursor

    Example:
        conn = get_db_connection_dict()
        cursor = conn.cursor()
        cursor.execute("SELECT * FROM orders")
        results = cursor.fetchall()  # Returns list of dicts
        cursor.close()
        conn.close()
    """
    database_url = settings.DATABASE_URL
    if not database_url:
        raise Exception("DATABASE_URL not configured")

    return psycopg2.connect(
        database_url,
        cursor_factory=RealDictCursor,
        connect_timeout=CONNECTION_TIMEOUT,
    )


def get_db_connection_with_retry(max_retries=3, retry_delay=1.0):
    """
    Get a psycopg2 connection with automatic retry on connection failures

    Args:
        max_retries: Maximum number of connection attempts (default: 3)
        retry_delay: Initial delay between retries in seconds (default: 1.0)

    Returns:
        psycopg2 connection object

    Raises:
        psycopg2.OperationalError: If all retry attempts fail
    """
    database_url = settings.DATABASE_URL
    if not database_url:
        raise Exception("DATABASE_URL not configured")

    last_error = None

    for attempt in range(1, max_retries + 1):
        try:
            logger.debug(f"Database connection attempt {attempt}/{max_retries}")
            conn = psycopg2.connect(database_url, connect_timeout=CONNECTION_TIMEOUT)

            # Test connection with a simple query
            cursor = conn.cursor()
            cursor.execute("SELECT 1")
            cursor.close()

            logger.debug(f"Database connection successful on attempt {attempt}")
            return conn

        except psycopg2.OperationalError as e:
            last_error = e
            logger.warning(f"Connection error on attempt {attempt}/{max_retries}: {e}")

            if attempt < max_retries:
                # Exponential backoff
                delay = retry_delay * (2 ** (attempt - 1))
                logger.info(f"Retrying in {delay:.2f} seconds...")
                time.sleep(delay)

    logger.error(f"All {max_retries} connection attempts failed")
    raise last_error
