"""
Utility functions and decorators.
"""

from .error_handlers import ApiError, handle_api_errors, parse_id

__all__ = ["ApiError", "handle_api_errors", "parse_id"]
