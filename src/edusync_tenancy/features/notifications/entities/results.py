"""Outcome records for outbound notifications."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class SmsAttempt:
    """Diagnostics for one provider call. Never holds the API key."""

    to: str
    method: str
    ok: bool
    status: Optional[int] = None
    body_preview: str = ""
    url: Optional[str] = None


@dataclass
class SmsDispatchResult:
    """Aggregate result of sending one message to many recipients."""

    success_count: int = 0
    error_count: int = 0
    first_error_message: Optional[str] = None
    attempts: List[SmsAttempt] = field(default_factory=list)

    def record_error(self, message: str) -> None:
        self.error_count += 1
        if self.first_error_message is None:
            self.first_error_message = message

    def as_dict(self) -> Dict[str, Any]:
        return {
            "success_count": self.success_count,
            "error_count": self.error_count,
            "first_error_message": self.first_error_message,
            "attempts": [attempt.__dict__.copy() for attempt in self.attempts],
        }


@dataclass
class EmailDispatchResult:
    """Result of a transactional email send."""

    success: bool
    status_code: Optional[int] = None
    message_id: Optional[str] = None
    error_message: Optional[str] = None
