from typing import Dict, Optional, Type
from loguru import logger

from .base import EmailProvider
from .resend_providers import ResendEmailProvider
from .custom_providers import LocalMailboxProvider
from ..utils.error_handler import ConfigurationException
from ..config.settings import HLVConfig, MailConfig


class ProviderFactory:
    """Factory class for creating provider instances."""

    _email_providers: Dict[str, Type[EmailProvider]] = {
        'resend': ResendEmailProvider,
        'local': LocalMailboxProvider,
    }

    @classmethod
    def create_email_provider(cls, provider_name: str = None, config: Optional[MailConfig] = None) -> EmailProvider:
        """
        Create email provider instance.

        Args:
            provider_name: Name of the provider (optional, defaults to config)
            config: Mail configuration (optional, defaults to the environment)

        Returns:
            EmailProvider instance

        Raises:
            ConfigurationException: If provider is not supported
        """
        if config is None:
            config = HLVConfig().mail
        if provider_name is None:
            provider_name = config.provider

        if provider_name not in cls._email_providers:
            raise ConfigurationException(
                f"Unknown email provider: {provider_name}. "
                f"Supported providers: {list(cls._email_providers.keys())}"
            )

        provider_class = cls._email_providers[provider_name]
        logger.info(f"Creating email provider: {provider_name}")
        return provider_class(config.model_dump())

    @classmethod
    def get_supported_providers(cls) -> Dict[str, list]:
        """Get list of supported providers by type."""
        return {
            "email": list(cls._email_providers.keys()),
        }

    @classmethod
    def register_email_provider(cls, name: str, provider_class: Type[EmailProvider]):
        """Register a new email provider."""
        cls._email_providers[name] = provider_class
        logger.info(f"Registered email provider: {name}")


# Global provider factory instance
provider_factory = ProviderFactory()
