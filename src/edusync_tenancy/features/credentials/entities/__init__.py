from .credential_set import (
    CredentialSource,
    CredentialField,
    SmsCredentials,
    ResolvedCredentialSet,
)

__all__ = [
    "CredentialSource",
    "CredentialField",
    "SmsCredentials",
    "ResolvedCredentialSet",
]
