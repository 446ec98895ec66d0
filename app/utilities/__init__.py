"""
Utilities package for the High Level Video application.

This package contains utility modules for the API services.
"""

from .execution_timer import ExecutionTimer

__all__ = ["ExecutionTimer"]
