from .sms_service import ArkeselSmsService
from .email_service import ResendEmailService

__all__ = ["ArkeselSmsService", "ResendEmailService"]
