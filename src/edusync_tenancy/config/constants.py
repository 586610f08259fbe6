"""Platform-wide constants for tenant routing and provider integrations."""

from typing import Tuple


# Internal application routes that must never be captured by tenant rewriting
APP_ROUTES: Tuple[str, ...] = ("/admin", "/student", "/teacher", "/auth", "/portals")

# Substring identifying ephemeral preview deployments
PREVIEW_HOST_MARKER = "vercel.app"

# SMS gateway (Arkesel)
ARKESEL_SEND_URL = "https://sms.arkesel.com/api/v2/sms/send"
ARKESEL_QUERY_URL = "https://sms.arkesel.com/sms/api"
DEFAULT_SMS_SENDER_ID = "EduSync"
SMS_MAX_LENGTH = 1600
DEFAULT_COUNTRY_CODE = "233"

# Transactional email (Resend)
RESEND_EMAILS_URL = "https://api.resend.com/emails"

# Redaction placeholder used in provider diagnostics
REDACTED = "<REDACTED>"
