from .base import EmailProvider
from .factory import ProviderFactory, provider_factory
from .resend_providers import ResendEmailProvider
from .custom_providers import LocalMailboxProvider

__all__ = [
    'EmailProvider',
    'ProviderFactory',
    'provider_factory',
    'ResendEmailProvider',
    'LocalMailboxProvider',
]
