from .email_provider import EmailProvider

__all__ = [
    'EmailProvider',
]
