from .error_handler import ErrorHandler, convert_exceptions
from .logging_config import LoggerManager, log_manager

__all__ = [
    "ErrorHandler",
    "convert_exceptions",
    "LoggerManager",
    "log_manager",
]
