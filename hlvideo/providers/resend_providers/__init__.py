from .email_provider import ResendEmailProvider

__all__ = [
    # Resend providers
    'ResendEmailProvider',
]
