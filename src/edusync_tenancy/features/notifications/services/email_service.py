"""Transactional email through Resend using per-tenant credentials."""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, List, Optional, Sequence, Union

import httpx

from ....config.constants import RESEND_EMAILS_URL
from ....core.exceptions import CredentialsNotConfiguredError, InvalidRecipientError
from ...credentials.services import CredentialResolver
from ..entities.results import EmailDispatchResult


logger = logging.getLogger(__name__)


class ResendEmailService:
    """Send email with the tenant's Resend key and sender address."""

    def __init__(
        self,
        credential_resolver: CredentialResolver,
        http_client: Optional[httpx.AsyncClient] = None,
        api_timeout: float = 30,
    ):
        self._credentials = credential_resolver
        self._http_client = http_client
        self._api_timeout = api_timeout

    @asynccontextmanager
    async def _client(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._http_client is not None:
            yield self._http_client
        else:
            async with httpx.AsyncClient(timeout=self._api_timeout) as client:
                yield client

    async def send_email(
        self,
        tenant_id: Any,
        to: Union[str, Sequence[str]],
        subject: str,
        html: str,
        reply_to: Optional[str] = None,
    ) -> EmailDispatchResult:
        """Send one email.

        Raises:
            InvalidRecipientError: No recipient given
            CredentialsNotConfiguredError: API key or from-address missing
        """
        recipients: List[str] = [to] if isinstance(to, str) else list(to or [])
        recipients = [r for r in recipients if r and r.strip()]
        if not recipients:
            raise InvalidRecipientError("At least one recipient is required")

        credentials = await self._credentials.resolve(tenant_id)
        api_key = credentials.email_api_key.value
        from_email = credentials.from_email.value
        if not api_key:
            raise CredentialsNotConfiguredError("Email API key not configured.")
        if not from_email:
            raise CredentialsNotConfiguredError(
                "From email not configured for this school. Please contact your administrator."
            )

        payload = {"from": from_email, "to": recipients, "subject": subject, "html": html}
        if reply_to:
            payload["reply_to"] = reply_to

        try:
            async with self._client() as client:
                response = await client.post(
                    RESEND_EMAILS_URL,
                    headers={"Authorization": f"Bearer {api_key}", "Content-Type": "application/json"},
                    json=payload,
                )
        except httpx.HTTPError as e:
            logger.error(f"Email delivery failed: {e}")
            return EmailDispatchResult(success=False, error_message=str(e))

        if response.is_success:
            message_id = _json_field(response, "id")
            logger.info(f"Email sent to {len(recipients)} recipient(s), id={message_id}")
            return EmailDispatchResult(success=True, status_code=response.status_code, message_id=message_id)

        error_message = _json_field(response, "message") or f"HTTP {response.status_code}: {response.text[:200]}"

        logger.error(f"Mailer responded with {response.status_code}: {error_message}")
        return EmailDispatchResult(success=False, status_code=response.status_code, error_message=error_message)


def _json_field(response: httpx.Response, name: str) -> Optional[Any]:
    try:
        data = response.json()
    except ValueError:
        return None
    return data.get(name) if isinstance(data, dict) else None
