from .credential_resolver import CredentialResolver

__all__ = ["CredentialResolver"]
