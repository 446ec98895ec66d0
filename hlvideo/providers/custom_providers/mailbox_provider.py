import json
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict

import aiofiles
from loguru import logger

from hlvideo.providers.base import EmailProvider
from hlvideo.utils.error_handler import DeliveryException, convert_exceptions


class LocalMailboxProvider(EmailProvider):
    """Filesystem mailbox for development: each email becomes an .html file plus a .json envelope."""

    def __init__(self, config: Dict[str, Any]):
        """
        Initialize Local Mailbox Provider.

        Args:
            config: {
                        "mailbox_path": str -> Directory receiving the emails (default: ./local_mailbox)
                    }
        """
        self.config = config
        self.base_path = Path(config.get("mailbox_path") or "./local_mailbox").resolve()
        self.base_path.mkdir(parents=True, exist_ok=True)
        logger.info(f"LocalMailboxProvider initialized at {self.base_path}")

    @convert_exceptions({Exception: DeliveryException})
    async def send_email(self, sender: str, to: str, subject: str, html: str, **kwargs) -> Dict[str, Any]:
        """Write the email body and its envelope to the mailbox directory."""
        email_id = uuid.uuid4().hex
        stamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S")
        stem = f"{stamp}_{email_id}"

        envelope = {
            "id": email_id,
            "from": sender,
            "to": to,
            "subject": subject,
            "created_at": datetime.now(timezone.utc).isoformat(),
        }
        body_path = self.base_path / f"{stem}.html"
        async with aiofiles.open(body_path, "w", encoding="utf-8") as f:
            await f.write(html)
        async with aiofiles.open(self.base_path / f"{stem}.json", "w", encoding="utf-8") as f:
            await f.write(json.dumps(envelope, ensure_ascii=False, indent=2))

        logger.info(f"Email {email_id} written to {body_path}")
        return {"id": email_id, "provider": "local", "path": str(body_path)}

    async def close(self):
        pass
