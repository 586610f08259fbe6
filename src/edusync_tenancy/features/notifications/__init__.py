"""Outbound SMS and email using resolved tenant credentials."""

from .entities import SmsAttempt, SmsDispatchResult, EmailDispatchResult
from .services import ArkeselSmsService, ResendEmailService
from .utils import format_phone_number_e164

__all__ = [
    "SmsAttempt",
    "SmsDispatchResult",
    "EmailDispatchResult",
    "ArkeselSmsService",
    "ResendEmailService",
    "format_phone_number_e164",
]
