"""Base exceptions for edusync-tenancy.

All exceptions inherit from EduSyncError and carry an error code and a
details mapping for API responses.
"""

from typing import Any, Dict, Optional


class EduSyncError(Exception):
    """Base exception for all edusync-tenancy errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


def create_error_response(exception: EduSyncError) -> Dict[str, Any]:
    """Create standardized error response from exception.

    Args:
        exception: The edusync-tenancy exception

    Returns:
        Error response dictionary
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }
