import time
import logging
from typing import Callable

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker, declarative_base

from config.settings import settings
from constants import DatabaseConfig
from exceptions import DatabaseConnectionError

logger = logging.getLogger(__name__)


def _set_sqlite_pragma(dbapi_conn, connection_record):
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.execute("PRAGMA busy_timeout=5000")  # Wait up to 5s for locks instead of failing immediately
    cursor.close()


def make_engine(url: str, **kwargs) -> Engine:
    """
    Create an engine for the given URL.

    PostgreSQL gets a larger pool; SQLite (used by tests and local runs)
    gets foreign key enforcement, which it leaves off by default.
    """
    if url.startswith('sqlite'):
        kwargs.setdefault('connect_args', {'check_same_thread': False})
        engine = create_engine(url, echo=False, **kwargs)
        event.listen(engine, "connect", _set_sqlite_pragma)
        return engine

    kwargs.setdefault('pool_size', DatabaseConfig.POOL_SIZE)
    kwargs.setdefault('max_overflow', DatabaseConfig.MAX_OVERFLOW)
    return create_engine(
        url,
        echo=False,
        pool_pre_ping=True,  # Verify connections are alive before using
        pool_recycle=DatabaseConfig.POOL_RECYCLE_SECONDS,
        **kwargs
    )


def make_sessionmaker(bind: Engine) -> sessionmaker:
    return sessionmaker(bind=bind, autoflush=False, expire_on_commit=False)


engine = make_engine(settings.database_url)
SessionLocal = make_sessionmaker(engine)
Base = declarative_base()


def get_db():
    """Dependency for FastAPI routes"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def wait_for_database(
    target: Engine,
    max_retries: int = DatabaseConfig.MAX_RETRIES,
    delay: float = DatabaseConfig.RETRY_DELAY_SECONDS,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """
    Block until the database answers a trivial query.

    Args:
        target: Engine to probe
        max_retries: Number of attempts before giving up
        delay: Seconds to wait between attempts
        sleep: Sleep function (injectable for tests)

    Returns:
        The attempt number that succeeded (1-based)

    Raises:
        DatabaseConnectionError: If every attempt fails
    """
    last_error: Exception | None = None

    for attempt in range(1, max_retries + 1):
        try:
            with target.connect() as conn:
                conn.execute(text("SELECT 1"))
            logger.info(f"✅ Database connection established (attempt {attempt}/{max_retries})")
            return attempt
        except SQLAlchemyError as e:
            last_error = e
            logger.warning(f"Attempt {attempt}/{max_retries}: database connection failed: {e}")
            if attempt < max_retries:
                sleep(delay)

    logger.critical(f"❌ Could not connect to the database after {max_retries} attempts")
    raise DatabaseConnectionError(
        max_retries,
        f"Could not connect to the database after {max_retries} attempts: {last_error}"
    )
