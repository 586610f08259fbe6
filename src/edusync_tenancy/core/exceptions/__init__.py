"""Exception hierarchy for edusync-tenancy."""

from .base import EduSyncError, create_error_response
from .domain import (
    ConfigurationError,
    DatabaseError,
    TenantError,
    TenantNotFoundError,
    NotificationError,
    CredentialsNotConfiguredError,
    InvalidRecipientError,
)

__all__ = [
    "EduSyncError",
    "create_error_response",
    "ConfigurationError",
    "DatabaseError",
    "TenantError",
    "TenantNotFoundError",
    "NotificationError",
    "CredentialsNotConfiguredError",
    "InvalidRecipientError",
]
