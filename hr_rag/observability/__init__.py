"""
Observability module.

Provides structured logging, correlation ID tracking, and request logging
middleware.
"""

from hr_rag.observability.correlation import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from hr_rag.observability.logger import configure_logging

__all__ = [
    "configure_logging",
    "set_correlation_id",
    "get_correlation_id",
    "clear_correlation_id",
]
