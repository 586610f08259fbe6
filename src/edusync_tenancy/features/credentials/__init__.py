"""Provider credential resolution (transactional email and SMS)."""

from .entities import CredentialSource, CredentialField, SmsCredentials, ResolvedCredentialSet
from .services import CredentialResolver

__all__ = [
    "CredentialSource",
    "CredentialField",
    "SmsCredentials",
    "ResolvedCredentialSet",
    "CredentialResolver",
]
