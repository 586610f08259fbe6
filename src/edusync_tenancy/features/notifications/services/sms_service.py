"""Arkesel SMS delivery using per-tenant credentials.

Credentials are resolved at call time so tenant-stored keys take
precedence over the deployment defaults.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Iterable, Optional
from urllib.parse import quote, urlencode

import httpx

from ....config.constants import (
    ARKESEL_QUERY_URL,
    ARKESEL_SEND_URL,
    DEFAULT_SMS_SENDER_ID,
    REDACTED,
    SMS_MAX_LENGTH,
)
from ....core.exceptions import CredentialsNotConfiguredError
from ...credentials.services import CredentialResolver
from ..entities.results import SmsAttempt, SmsDispatchResult
from ..utils.phone import format_phone_number_e164


logger = logging.getLogger(__name__)


class ArkeselSmsService:
    """Send SMS through the Arkesel gateway."""

    def __init__(
        self,
        credential_resolver: CredentialResolver,
        http_client: Optional[httpx.AsyncClient] = None,
        api_timeout: float = 30,
    ):
        """Initialize SMS service.

        Args:
            credential_resolver: Resolver for per-tenant SMS credentials
            http_client: Shared client; a short-lived one is created per call otherwise
            api_timeout: Timeout in seconds for short-lived clients
        """
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

    async def send_sms(self, tenant_id: Any, message: str, recipients: Iterable[str]) -> SmsDispatchResult:
        """Send message to every recipient, counting per-recipient failures.

        Raises:
            CredentialsNotConfiguredError: No SMS API key resolves for the tenant
        """
        credentials = await self._credentials.resolve(tenant_id)
        api_key = credentials.sms.api_key.value
        if not api_key:
            raise CredentialsNotConfiguredError(
                "Arkesel API key not configured.",
                details={"tenant_id": str(tenant_id) if tenant_id is not None else None},
            )
        sender_id = credentials.sms.sender_id.value or DEFAULT_SMS_SENDER_ID

        result = SmsDispatchResult()
        recipients = list(recipients or [])
        if not recipients:
            return result

        body = (message or "")[:SMS_MAX_LENGTH]
        logger.info(f"Sending SMS to {len(recipients)} recipient(s) as {sender_id} "
                    f"(key source: {credentials.sms.api_key.source.value})")

        async with self._client() as client:
            for raw_number in recipients:
                formatted = format_phone_number_e164(raw_number)
                if not formatted:
                    result.record_error(f"Invalid phone number: {raw_number}")
                    continue

                try:
                    await self._send_one(client, result, api_key, sender_id, formatted, body)
                except httpx.HTTPError as e:
                    result.attempts.append(SmsAttempt(to=formatted, method="header", ok=False, body_preview=str(e)))
                    result.record_error(f"Network error: {e}")

        if result.error_count:
            logger.warning(f"SMS dispatch finished with {result.error_count} error(s): {result.first_error_message}")
        return result

    async def _send_one(
        self,
        client: httpx.AsyncClient,
        result: SmsDispatchResult,
        api_key: str,
        sender_id: str,
        to: str,
        body: str,
    ) -> None:
        response = await client.post(
            ARKESEL_SEND_URL,
            headers={"Content-Type": "application/json", "api-key": api_key},
            json={"sender": sender_id, "message": body, "recipients": [to]},
        )
        preview = response.text[:1000]
        result.attempts.append(
            SmsAttempt(to=to, method="header", ok=response.is_success, status=response.status_code, body_preview=preview)
        )

        if response.is_success and self._is_success_payload(response):
            result.success_count += 1
            return

        logger.warning(f"Arkesel non-success response {response.status_code}; retrying with query-string endpoint")
        await self._send_one_via_query(client, result, api_key, sender_id, to, body)

    async def _send_one_via_query(
        self,
        client: httpx.AsyncClient,
        result: SmsDispatchResult,
        api_key: str,
        sender_id: str,
        to: str,
        body: str,
    ) -> None:
        url = build_query_url(api_key, to, sender_id, body)
        sanitized_url = url.replace(f"api_key={quote(api_key, safe='')}", f"api_key={REDACTED}", 1)

        try:
            response = await client.get(url)
        except httpx.HTTPError as e:
            result.attempts.append(SmsAttempt(to=to, method="query", ok=False, body_preview=str(e), url=sanitized_url))
            result.record_error(f"Fallback error: {e}")
            return

        preview = response.text[:1000]
        result.attempts.append(
            SmsAttempt(
                to=to,
                method="query",
                ok=response.is_success,
                status=response.status_code,
                body_preview=preview,
                url=sanitized_url,
            )
        )
        if response.is_success:
            result.success_count += 1
        else:
            result.record_error(f"Arkesel {response.status_code}: {preview[:200]}")

    @staticmethod
    def _is_success_payload(response: httpx.Response) -> bool:
        try:
            data = response.json()
        except ValueError:
            return False
        return isinstance(data, dict) and (data.get("status") == "success" or data.get("success") is True)


def build_query_url(api_key: str, to: str, sender_id: str, message: str) -> str:
    """Build the query-string style send URL."""
    params = {
        "action": "send-sms",
        "api_key": api_key,
        "to": to,
        "from": sender_id,
        "sms": message,
    }
    return f"{ARKESEL_QUERY_URL}?{urlencode(params, quote_via=quote, safe='')}"
