"""
Observability components.

Provides structured logging with correlation IDs and collection context.
"""

from .logging import (
    ContextualLoggerAdapter,
    clear_collection_context,
    clear_correlation_id,
    get_correlation_id,
    get_logger,
    get_logging_context,
    log_operation,
    set_collection_context,
    set_correlation_id,
)

__all__ = [
    "get_correlation_id",
    "set_correlation_id",
    "clear_correlation_id",
    "set_collection_context",
    "clear_collection_context",
    "get_logging_context",
    "ContextualLoggerAdapter",
    "get_logger",
    "log_operation",
]
