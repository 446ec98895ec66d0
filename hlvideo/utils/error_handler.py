import asyncio
import functools
from typing import TypeVar, Callable
from loguru import logger
from ..exceptions import HLVException, ProviderException, DeliveryException, ConfigurationException, ValidationException

T = TypeVar('T')

__all__ = [
    "convert_exceptions",
    "ErrorHandler",
    "HLVException",
    "ProviderException",
    "DeliveryException",
    "ConfigurationException",
    "ValidationException",
]


def convert_exceptions(exception_map: dict):
    """
    Decorator to convert exceptions to HLV exceptions.

    Exceptions that already are HLVException pass through untouched.

    Args:
        exception_map: Dictionary mapping exception types to HLV exception types
    """
    def _convert(e: Exception):
        if isinstance(e, HLVException):
            return None
        for source_exc, target_exc in exception_map.items():
            if isinstance(e, source_exc):
                return target_exc(str(e), details={"original_exception": type(e).__name__})
        return None

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        async def async_wrapper(*args, **kwargs) -> T:
            try:
                return await func(*args, **kwargs)
            except Exception as e:
                converted = _convert(e)
                if converted is not None:
                    raise converted from e
                raise

        @functools.wraps(func)
        def sync_wrapper(*args, **kwargs) -> T:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                converted = _convert(e)
                if converted is not None:
                    raise converted from e
                raise

        # Return appropriate wrapper based on function type
        if asyncio.iscoroutinefunction(func):
            return async_wrapper
        else:
            return sync_wrapper

    return decorator


class ErrorHandler:
    """Centralized error handling utilities."""

    @staticmethod
    def handle_provider_error(e: Exception, provider_name: str) -> DeliveryException:
        """Convert provider-specific exceptions to DeliveryException."""
        error_details = {
            "provider": provider_name,
            "original_exception": type(e).__name__,
            "message": str(e)
        }

        logger.error(f"Provider {provider_name} error: {e}")
        return DeliveryException(
            f"Provider {provider_name} failed: {e}",
            error_code="DELIVERY_ERROR",
            details=error_details
        )

