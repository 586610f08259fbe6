"""Resolved provider credentials.

Each field records where its value came from so callers can tell a tenant
override from an environment default.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class CredentialSource(str, Enum):
    """Origin of a resolved credential value."""
    TENANT = "tenant"
    DEFAULT = "default"
    ABSENT = "absent"


@dataclass(frozen=True)
class CredentialField:
    """A single resolved credential value."""

    value: Optional[str] = None
    source: CredentialSource = CredentialSource.ABSENT

    @classmethod
    def from_tenant(cls, value: str) -> "CredentialField":
        return cls(value, CredentialSource.TENANT)

    @classmethod
    def from_default(cls, value: str) -> "CredentialField":
        return cls(value, CredentialSource.DEFAULT)

    @classmethod
    def absent(cls) -> "CredentialField":
        return cls()

    @property
    def is_present(self) -> bool:
        return self.source is not CredentialSource.ABSENT

    def __bool__(self) -> bool:
        return self.is_present


@dataclass(frozen=True)
class SmsCredentials:
    """SMS gateway credentials."""

    api_key: CredentialField = field(default_factory=CredentialField.absent)
    sender_id: CredentialField = field(default_factory=CredentialField.absent)


@dataclass(frozen=True)
class ResolvedCredentialSet:
    """Effective provider credentials for one (possibly unknown) tenant."""

    email_api_key: CredentialField = field(default_factory=CredentialField.absent)
    sms: SmsCredentials = field(default_factory=SmsCredentials)
    school_name: CredentialField = field(default_factory=CredentialField.absent)
    contact_email: CredentialField = field(default_factory=CredentialField.absent)
    from_email: CredentialField = field(default_factory=CredentialField.absent)

    def as_dict(self) -> Dict[str, Any]:
        """Plain values, absent fields as None."""
        return {
            "email_api_key": self.email_api_key.value,
            "sms": {
                "api_key": self.sms.api_key.value,
                "sender_id": self.sms.sender_id.value,
            },
            "school_name": self.school_name.value,
            "contact_email": self.contact_email.value,
            "from_email": self.from_email.value,
        }
