from .results import SmsAttempt, SmsDispatchResult, EmailDispatchResult

__all__ = ["SmsAttempt", "SmsDispatchResult", "EmailDispatchResult"]
