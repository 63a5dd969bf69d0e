"""
Application-wide constants and configuration keys.

This module centralizes all magic strings and numbers used throughout the application
to improve maintainability and reduce duplication.
"""


class ServerConfig:
    """Server configuration constants"""

    HOST = "0.0.0.0"  # Listen on all interfaces by default
    PORT = 8080
    SERVICE_NAME = "backend-monolito"
    VERSION = "1.0.0"
    API_PREFIX = "/api/v1"


class DatabaseConfig:
    """Database connection defaults (overridable through the environment)"""

    HOST = "localhost"
    PORT = 5432
    USER = "postgres"
    PASSWORD = "postgres"
    NAME = "app_db"
    DRIVER = "postgresql+psycopg"

    # Startup connectivity
    MAX_RETRIES = 10
    RETRY_DELAY_SECONDS = 3

    # Connection pool
    POOL_SIZE = 20
    MAX_OVERFLOW = 30
    POOL_RECYCLE_SECONDS = 3600


class FieldLimits:
    """Column lengths shared by the ORM models and the request DTOs"""

    AREA_NAME_MAX = 100
    PERSON_NAME_MAX = 200
    EMAIL_MAX = 200
    # Path ids are parsed as unsigned 32-bit integers
    ID_MAX = 2 ** 32 - 1


class EnvKeys:
    """Environment variable names"""

    DATABASE_URL = "DATABASE_URL"
    DB_HOST = "DB_HOST"
    DB_PORT = "DB_PORT"
    DB_USER = "DB_USER"
    DB_PASSWORD = "DB_PASSWORD"
    DB_NAME = "DB_NAME"
    DB_CONNECT_MAX_RETRIES = "DB_CONNECT_MAX_RETRIES"
    DB_CONNECT_RETRY_DELAY = "DB_CONNECT_RETRY_DELAY"
    HOST = "HOST"
    PORT = "PORT"
    LOG_LEVEL = "LOG_LEVEL"
    LOG_DIR = "LOG_DIR"


class Messages:
    """User-facing response messages"""

    INVALID_ID = "ID inválido"
    INVALID_DATA = "Datos inválidos"

    # Areas
    AREA_CREATED = "Área creada exitosamente"
    AREA_UPDATED = "Área actualizada exitosamente"
    AREA_DELETED = "Área eliminada exitosamente"
    AREA_NOT_FOUND = "Área no encontrada"
    AREA_CREATE_FAILED = "Error al crear el área"
    AREA_LIST_FAILED = "Error al obtener las áreas"
    AREA_UPDATE_FAILED = "Error al actualizar el área"
    AREA_DELETE_FAILED = "Error al eliminar el área"
    AREA_COUNT_FAILED = "Error al obtener las áreas con conteo"
    AREA_GET_FAILED = "Error al obtener el área"

    # Personas
    PERSON_CREATED = "Persona registrada exitosamente"
    PERSON_UPDATED = "Persona actualizada exitosamente"
    PERSON_DELETED = "Persona eliminada exitosamente"
    PERSON_NOT_FOUND = "Persona no encontrada"
    PERSON_CREATE_FAILED = "Error al registrar la persona"
    PERSON_LIST_FAILED = "Error al obtener las personas"
    PERSON_UPDATE_FAILED = "Error al actualizar la persona"
    PERSON_DELETE_FAILED = "Error al eliminar la persona"
    PERSON_GET_FAILED = "Error al obtener la persona"

    # Domain errors (lower-case, used as error details)
    AREA_NOT_FOUND_DETAIL = "área no encontrada"
    PERSON_NOT_FOUND_DETAIL = "persona no encontrada"
    EMAIL_TAKEN_DETAIL = "el correo electrónico ya está registrado"
    AREA_NAME_TAKEN_DETAIL = "ya existe un área con ese nombre"
    REFERENCED_AREA_DETAIL = "el área indicada no existe"
    AREA_IN_USE_DETAIL = "el área tiene personas asociadas"
    STORAGE_FAILURE_DETAIL = "error interno de base de datos"


class HTTPStatus:
    """HTTP status codes used throughout the application"""

    # Success
    CREATED = 201

    # Client Errors
    BAD_REQUEST = 400
    NOT_FOUND = 404
    CONFLICT = 409

    # Server Errors
    INTERNAL_SERVER_ERROR = 500
