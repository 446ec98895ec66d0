import asyncio
from typing import Any, Dict

import resend
from loguru import logger

from hlvideo.providers.base import EmailProvider
from hlvideo.utils.error_handler import ConfigurationException, ErrorHandler


class ResendEmailProvider(EmailProvider):
    """Resend email provider implementation."""

    def __init__(self, config: Dict[str, Any]):
        self.config = config
        self.timeout = config.get("timeout")
        self.client = self._initialize_client()

    def _initialize_client(self):
        """Configure the Resend SDK with the API key."""
        api_key = self.config.get("api_key")
        if not api_key:
            raise ConfigurationException("Resend API key is required (RESEND_API_KEY)")
        # the SDK keeps the key module-wide
        resend.api_key = api_key
        return resend.Emails

    async def send_email(self, sender: str, to: str, subject: str, html: str, **kwargs) -> Dict[str, Any]:
        """Send an HTML email through Resend. Not retried on failure."""
        params = {
            "from": sender,
            "to": [to],
            "subject": subject,
            "html": html,
        }
        try:
            call = asyncio.to_thread(self.client.send, params)
            if self.timeout:
                response = await asyncio.wait_for(call, timeout=self.timeout)
            else:
                response = await call
        except Exception as e:
            raise ErrorHandler.handle_provider_error(e, "resend") from e

        email_id = response.get("id") if isinstance(response, dict) else getattr(response, "id", None)
        logger.info(f"Resend accepted email {email_id} for {to}")
        return {"id": email_id, "provider": "resend"}

    async def close(self):
        """Resend's SDK holds no open connections."""
        pass
