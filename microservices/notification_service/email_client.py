"""
E-mail delivery through the Resend HTTP API
"""

import logging
from typing import Optional

import httpx

from core.config.email_config import EmailConfig
from core.errors import ConfigurationError

from .models import EmailMessage
from .protocols import EmailDeliveryError

logger = logging.getLogger(__name__)


class ResendEmailClient:
    """Async Resend client; one ``POST /emails`` per message"""

    def __init__(
        self,
        api_key: str,
        sender: str,
        base_url: str = "https://api.resend.com",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.sender = sender
        self.client = httpx.AsyncClient(
            base_url=base_url,
            headers={
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json",
            },
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_config(
        cls, config: EmailConfig, transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> "ResendEmailClient":
        if not config.resend_api_key:
            raise ConfigurationError("RESEND_API_KEY is required to deliver e-mail through Resend")
        return cls(
            api_key=config.resend_api_key,
            sender=config.sender,
            base_url=config.resend_base_url,
            transport=transport,
        )

    async def send(self, message: EmailMessage) -> str:
        email_data = {
            "from": self.sender,
            "to": [message.to],
            "subject": message.subject,
            "html": message.html,
        }
        if message.text:
            email_data["text"] = message.text

        try:
            response = await self.client.post("/emails", json=email_data)
        except httpx.HTTPError as e:
            raise EmailDeliveryError(f"Email API unreachable: {e}")

        if response.status_code >= 400:
            raise EmailDeliveryError(f"Email API error: {response.status_code} - {response.text}")

        message_id = response.json().get("id", "")
        logger.debug(f"Email sent to {message.to} ({message_id})")
        return message_id

    async def close(self):
        await self.client.aclose()


class LogOnlyEmailClient:
    """Used when no API key is configured: logs instead of sending"""

    async def send(self, message: EmailMessage) -> str:
        logger.warning(f"Resend API key not configured, email to {message.to} not sent: {message.subject}")
        return ""

    async def close(self):
        return None
