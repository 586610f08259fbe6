"""Domain exceptions for tenancy, data access and notifications."""

from .base import EduSyncError


# Configuration Errors

class ConfigurationError(EduSyncError):
    """Raised when there's a configuration issue."""
    pass


# Database Errors

class DatabaseError(EduSyncError):
    """Base class for database-related errors."""
    pass


# Tenant Errors

class TenantError(EduSyncError):
    """Base class for tenant-related errors."""
    pass


class TenantNotFoundError(TenantError):
    """Raised when tenant is not found."""
    pass


# Notification Errors

class NotificationError(EduSyncError):
    """Base class for outbound notification errors."""
    pass


class CredentialsNotConfiguredError(NotificationError):
    """Raised by a caller that requires a provider credential which resolved to absent."""
    pass


class InvalidRecipientError(NotificationError):
    """Raised when a notification recipient is malformed."""
    pass
