from sqlalchemy import inspect, text
from sqlalchemy.engine import Engine
import logging

from database import engine as default_engine, Base
import models  # noqa: F401  registers the tables on Base.metadata

logger = logging.getLogger(__name__)


def _check_column_exists(inspector, table: str, column: str) -> bool:
    """Check if a column exists in a table"""
    try:
        columns = [col['name'] for col in inspector.get_columns(table)]
        return column in columns
    except Exception:
        return False


def _add_column_if_missing(target: Engine, inspector, table: str, column: str, column_def: str) -> bool:
    """Add a column to a table if it doesn't exist"""
    if not _check_column_exists(inspector, table, column):
        logger.info(f"Running migration: Adding '{column}' column to {table} table...")
        with target.begin() as conn:
            conn.execute(text(f"ALTER TABLE {table} ADD COLUMN {column} {column_def}"))
        logger.info(f"✅ Migration complete: '{column}' column added to {table}")
        return True
    return False


def _run_essential_migrations(target: Engine) -> int:
    """
    Run essential schema migrations that are required for the app to function.
    These migrations are safe to run automatically on startup.

    create_all() never alters existing tables, so databases created before
    soft delete and area descriptions existed are upgraded here.
    """
    inspector = inspect(target)
    tables = inspector.get_table_names()
    migrations_run = 0

    # ============================================================
    # Areas table migrations
    # ============================================================
    if 'areas' in tables:
        if _add_column_if_missing(target, inspector, 'areas', 'descripcion', "TEXT NOT NULL DEFAULT ''"):
            migrations_run += 1
        if _add_column_if_missing(target, inspector, 'areas', 'deleted_at', "TIMESTAMP"):
            migrations_run += 1

    # ============================================================
    # Personas table migrations
    # ============================================================
    if 'personas' in tables:
        if _add_column_if_missing(target, inspector, 'personas', 'deleted_at', "TIMESTAMP"):
            migrations_run += 1

    if migrations_run > 0:
        logger.info(f"✅ Database schema updated: {migrations_run} migration(s) applied")
    else:
        logger.debug("Database schema is up to date")

    return migrations_run


def init_database(target: Engine | None = None) -> int:
    """
    Create all tables and apply essential column migrations.

    Returns:
        Number of column migrations applied
    """
    target = target or default_engine
    Base.metadata.create_all(bind=target)

    migrations_run = 0
    try:
        migrations_run = _run_essential_migrations(target)
    except Exception as e:
        logger.warning(f"Migration warning (non-fatal): {e}")

    logger.info("✅ Database initialized successfully")
    return migrations_run


if __name__ == "__main__":
    init_database()
