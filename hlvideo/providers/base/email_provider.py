from abc import ABC, abstractmethod
from typing import Any, Dict


class EmailProvider(ABC):
    """Abstract base class for outbound email providers."""

    @abstractmethod
    async def send_email(self, sender: str, to: str, subject: str, html: str, **kwargs) -> Dict[str, Any]:
        """Send one HTML email and return provider metadata (at least an ``id``)."""
        pass

    @abstractmethod
    async def close(self):
        """Close the underlying client and cleanup."""
        pass
