import json
from dataclasses import dataclass
from typing import Any, Dict, Optional

from loguru import logger

from ..config.settings import MailConfig
from ..exceptions import HLVException, ValidationException
from ..providers.base import EmailProvider
from ..utils.error_handler import ErrorHandler
from .models import REQUIRED_FIELDS_ERROR, BriefPayload, parse_brief
from .template import render_notification, render_subject


@dataclass
class BriefResult:
    """Outcome of one brief submission, with its HTTP-equivalent status."""

    ok: bool
    status_code: int = 200
    error: Optional[str] = None

    def to_body(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"ok": self.ok}
        if self.error:
            body["error"] = self.error
        return body


class BriefRelay:
    """Validates a brief, renders the notification and forwards it by email.

    Stateless: one instance can serve any number of concurrent requests.
    """

    def __init__(self, config: MailConfig, provider: EmailProvider):
        self.config = config
        self.provider = provider

    async def submit(self, body: Any) -> BriefResult:
        """Relay a brief.

        ``body`` is either the raw request body (bytes/str, JSON-decoded here)
        or an already decoded object. Never raises.
        """
        try:
            raw = json.loads(body) if isinstance(body, (bytes, bytearray, str)) else body
            payload = parse_brief(raw)
        except ValidationException as e:
            logger.info(f"Brief rejected, missing fields: {e.details.get('fields')}")
            return BriefResult(ok=False, status_code=400, error=REQUIRED_FIELDS_ERROR)
        except Exception as e:
            logger.opt(exception=True).error(f"Could not parse brief payload: {e}")
            return BriefResult(ok=False, status_code=500)

        try:
            await self.dispatch(payload)
        except Exception as e:
            logger.opt(exception=True).error(f"Brief delivery failed: {e}")
            return BriefResult(ok=False, status_code=500)

        return BriefResult(ok=True)

    async def dispatch(self, payload: BriefPayload) -> Dict[str, Any]:
        """Send the rendered notification once. Provider errors surface as DeliveryException."""
        subject = render_subject(payload)
        html = render_notification(payload)
        try:
            result = await self.provider.send_email(
                sender=self.config.mail_from,
                to=self.config.mail_to,
                subject=subject,
                html=html,
            )
        except HLVException:
            raise
        except Exception as e:
            raise ErrorHandler.handle_provider_error(e, type(self.provider).__name__) from e

        logger.info(f"Brief relayed to {self.config.mail_to}")
        return result
