"""Value objects for identifiers."""

from dataclasses import dataclass
from typing import Any, Optional, Union


@dataclass(frozen=True)
class TenantId:
    """Tenant (school) identifier value object.

    Schools are keyed by numeric primary keys in the deployed schema, but
    string keys are accepted as well.
    """
    value: Union[int, str]

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, (int, str)):
            raise ValueError("Tenant ID must be an integer or a string")
        if isinstance(self.value, str) and not self.value.strip():
            raise ValueError("Tenant ID must be a non-empty string")

    @classmethod
    def coerce(cls, value: Any) -> Optional["TenantId"]:
        """Build a TenantId from a raw value, treating falsy values as no tenant."""
        if isinstance(value, TenantId):
            return value
        if value is None or value == 0 or (isinstance(value, str) and not value.strip()):
            return None
        return cls(value)

    def __str__(self) -> str:
        return str(self.value)
