"""
Custom exception classes for the application.

This module defines domain-specific exceptions that provide better error handling
and clearer error messages throughout the application.

Layers raise different families:
- repositories raise RecordNotFoundError and DatabaseError subclasses
- services translate those into ValidationError / NotFoundError / ConflictError
- the API layer maps every family to a status code (see utils.error_handlers)
"""

from constants import Messages


class ApplicationError(Exception):
    """Base exception for all application errors"""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(ApplicationError):
    """Raised when there's a configuration issue"""

    def __init__(self, message: str, missing_keys: list[str] | None = None):
        details = {"missing_keys": missing_keys} if missing_keys else {}
        super().__init__(message, details)


# ----------------------------------------------------------------------------
# Client / domain validation (400)
# ----------------------------------------------------------------------------

class ValidationError(ApplicationError):
    """Raised when validation fails"""

    def __init__(self, message: str, invalid_fields: dict | None = None):
        details = {"invalid_fields": invalid_fields} if invalid_fields else {}
        super().__init__(message, details)


class InvalidIdentifierError(ValidationError):
    """Raised when a path identifier is not an unsigned integer"""

    def __init__(self, raw_value: str):
        super().__init__(
            f"'{raw_value}' is not a valid identifier",
            invalid_fields={"id": raw_value},
        )


class EmailAlreadyRegisteredError(ValidationError):
    """Raised when an email is already used by another active persona"""

    def __init__(self, email: str):
        super().__init__(Messages.EMAIL_TAKEN_DETAIL, invalid_fields={"email": email})
        self.email = email


class AreaNameTakenError(ValidationError):
    """Raised when an area name is already used by another active area"""

    def __init__(self, name: str):
        super().__init__(Messages.AREA_NAME_TAKEN_DETAIL, invalid_fields={"nombre": name})
        self.name = name


class ReferencedAreaNotFoundError(ValidationError):
    """Raised when a persona references an area that does not exist"""

    def __init__(self, area_id: int):
        super().__init__(Messages.REFERENCED_AREA_DETAIL, invalid_fields={"area_id": area_id})
        self.area_id = area_id


# ----------------------------------------------------------------------------
# Domain not found (404, 400 on update paths)
# ----------------------------------------------------------------------------

class NotFoundError(ApplicationError):
    """Raised when a domain record does not exist"""


class AreaNotFoundError(NotFoundError):
    def __init__(self, area_id: int):
        super().__init__(Messages.AREA_NOT_FOUND_DETAIL, {"area_id": area_id})
        self.area_id = area_id


class PersonNotFoundError(NotFoundError):
    def __init__(self, key: int | str):
        super().__init__(Messages.PERSON_NOT_FOUND_DETAIL, {"key": key})
        self.key = key


# ----------------------------------------------------------------------------
# Conflicts (409)
# ----------------------------------------------------------------------------

class ConflictError(ApplicationError):
    """Raised when an operation conflicts with the current state of the data"""


class AreaInUseError(ConflictError):
    """Raised when deleting an area that active personas still reference"""

    def __init__(self, area_id: int, person_count: int):
        super().__init__(
            Messages.AREA_IN_USE_DETAIL,
            {"area_id": area_id, "personas": person_count},
        )
        self.area_id = area_id
        self.person_count = person_count


# ----------------------------------------------------------------------------
# Persistence layer
# ----------------------------------------------------------------------------

class RecordNotFoundError(ApplicationError):
    """Raised by repositories when no active row matches the lookup"""

    def __init__(self, entity: str, key: int | str):
        super().__init__(f"{entity} not found: {key}", {"entity": entity, "key": key})
        self.entity = entity
        self.key = key


class DatabaseError(ApplicationError):
    """Raised when database operations fail"""

    def __init__(self, operation: str, message: str):
        details = {"operation": operation}
        super().__init__(message, details)
        self.operation = operation


class IntegrityViolationError(DatabaseError):
    """Raised when the store rejects a write because of a constraint"""

    UNIQUE = "unique"
    FOREIGN_KEY = "foreign_key"

    def __init__(self, operation: str, message: str, constraint: str | None = None):
        super().__init__(operation, message)
        self.constraint = constraint
        self.details["constraint"] = constraint


class DatabaseConnectionError(DatabaseError):
    """Raised when the database cannot be reached at startup"""

    def __init__(self, attempts: int, message: str):
        super().__init__("connect", message)
        self.attempts = attempts
        self.details["attempts"] = attempts
