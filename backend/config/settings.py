"""
Runtime Configuration

Reads the process environment once and exposes typed settings for the
database connection, the HTTP server and logging.

Includes:
- Database URL assembly from DB_* variables (or a full DATABASE_URL)
- Startup retry policy for database connectivity
- Bind host/port and log settings
"""
import os
import logging
from dataclasses import dataclass
from typing import Optional

from constants import DatabaseConfig, EnvKeys, ServerConfig
from exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def get_env(key: str, default: str) -> str:
    """
    Get an environment variable, falling back to a default when unset or empty.

    Args:
        key: Environment variable name
        default: Value used when the variable is missing or blank

    Returns:
        The variable's value or the default
    """
    value = os.environ.get(key, '')
    return value if value else default


def get_int_env(key: str, default: int) -> int:
    """
    Get an integer environment variable.

    Raises:
        ConfigurationError: If the variable is set but is not an integer
    """
    raw = get_env(key, str(default))
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{key} must be an integer, got '{raw}'", missing_keys=[key])


@dataclass(frozen=True)
class Settings:
    """Immutable snapshot of the environment-driven configuration."""

    database_url: str
    db_host: str
    db_port: int
    db_max_retries: int
    db_retry_delay: float
    host: str
    port: int
    log_level: str
    log_dir: Optional[str]


def build_database_url(host: str, port: int, user: str, password: str, name: str) -> str:
    """Assemble a PostgreSQL SQLAlchemy URL from its parts."""
    return f"{DatabaseConfig.DRIVER}://{user}:{password}@{host}:{port}/{name}"


def load_settings() -> Settings:
    """
    Load settings from the current environment.

    DATABASE_URL, when present, wins over the individual DB_* parts.

    Returns:
        Settings instance

    Raises:
        ConfigurationError: If a numeric variable is malformed or out of range
    """
    db_host = get_env(EnvKeys.DB_HOST, DatabaseConfig.HOST)
    db_port = get_int_env(EnvKeys.DB_PORT, DatabaseConfig.PORT)

    database_url = os.environ.get(EnvKeys.DATABASE_URL) or build_database_url(
        db_host,
        db_port,
        get_env(EnvKeys.DB_USER, DatabaseConfig.USER),
        get_env(EnvKeys.DB_PASSWORD, DatabaseConfig.PASSWORD),
        get_env(EnvKeys.DB_NAME, DatabaseConfig.NAME),
    )

    max_retries = get_int_env(EnvKeys.DB_CONNECT_MAX_RETRIES, DatabaseConfig.MAX_RETRIES)
    if max_retries < 1:
        raise ConfigurationError(
            f"{EnvKeys.DB_CONNECT_MAX_RETRIES} must be at least 1",
            missing_keys=[EnvKeys.DB_CONNECT_MAX_RETRIES],
        )

    retry_delay = get_int_env(EnvKeys.DB_CONNECT_RETRY_DELAY, DatabaseConfig.RETRY_DELAY_SECONDS)
    if retry_delay < 0:
        raise ConfigurationError(
            f"{EnvKeys.DB_CONNECT_RETRY_DELAY} cannot be negative",
            missing_keys=[EnvKeys.DB_CONNECT_RETRY_DELAY],
        )

    return Settings(
        database_url=database_url,
        db_host=db_host,
        db_port=db_port,
        db_max_retries=max_retries,
        db_retry_delay=float(retry_delay),
        host=get_env(EnvKeys.HOST, ServerConfig.HOST),
        port=get_int_env(EnvKeys.PORT, ServerConfig.PORT),
        log_level=get_env(EnvKeys.LOG_LEVEL, 'INFO').upper(),
        log_dir=os.environ.get(EnvKeys.LOG_DIR) or None,
    )


# Global settings, read once at import
settings = load_settings()
