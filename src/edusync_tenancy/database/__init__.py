"""Database access for edusync-tenancy."""

from .connection import DatabaseManager

__all__ = ["DatabaseManager"]
