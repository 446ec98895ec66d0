from typing import Dict


class HLVException(Exception):
    """Base exception for the High Level Video backend."""

    def __init__(self, message: str, error_code: str = None, details: Dict = None):
        super().__init__(message)
        self.error_code = error_code
        self.details = details or {}


class ProviderException(HLVException):
    """Raised when external provider fails."""
    pass


class DeliveryException(ProviderException):
    """Raised when the outbound email provider fails to deliver a brief."""
    pass


class ConfigurationException(HLVException):
    """Raised when configuration is invalid."""
    pass


class ValidationException(HLVException):
    """Raised when input validation fails."""
    pass


class PlaybackPolicyException(HLVException):
    """Raised by a video element when the platform rejects a play attempt."""
    pass


class CaptureException(HLVException):
    """Raised when a poster frame cannot be decoded, seeked or encoded."""
    pass
