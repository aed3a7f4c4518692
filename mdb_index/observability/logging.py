"""
Enhanced logging utilities for MDB_INDEX.

Provides structured logging with correlation IDs and collection context.
"""

import contextvars
import logging
import uuid
from datetime import datetime
from typing import Any

# Context variable for correlation ID
_correlation_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "correlation_id", default=None
)

# Context variable for the collection being indexed
_collection_context: contextvars.ContextVar[dict[str, Any] | None] = contextvars.ContextVar(
    "collection_context", default=None
)


def get_correlation_id() -> str | None:
    """Get the current correlation ID from context."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> str:
    """
    Set a correlation ID in the current context.

    Args:
        correlation_id: Optional correlation ID (generates new one if None)

    Returns:
        The correlation ID that was set
    """
    if correlation_id is None:
        correlation_id = str(uuid.uuid4())
    _correlation_id.set(correlation_id)
    return correlation_id


def clear_correlation_id() -> None:
    """Clear the correlation ID from context."""
    _correlation_id.set(None)


def set_collection_context(
    collection_name: str | None = None, **kwargs: Any
) -> contextvars.Token[dict[str, Any] | None]:
    """
    Set collection context for logging.

    Args:
        collection_name: Collection the current operations target
        **kwargs: Additional context (index_name, database_name, etc.)

    Returns:
        Token restoring the previous context when passed to
        clear_collection_context
    """
    context = {"collection_name": collection_name, **kwargs}
    return _collection_context.set({k: v for k, v in context.items() if v is not None})


def clear_collection_context(token: contextvars.Token[dict[str, Any] | None] | None = None) -> None:
    """
    Clear collection context.

    Args:
        token: Token from set_collection_context. When given, the context that
            was active before that call is restored instead of being cleared.
    """
    if token is not None:
        _collection_context.reset(token)
    else:
        _collection_context.set(None)


def get_logging_context() -> dict[str, Any]:
    """
    Get current logging context (correlation ID and collection context).

    Returns:
        Dictionary with context information
    """
    context: dict[str, Any] = {
        "timestamp": datetime.now().isoformat(),
    }

    correlation_id = get_correlation_id()
    if correlation_id:
        context["correlation_id"] = correlation_id

    collection_context = _collection_context.get()
    if collection_context:
        context.update(collection_context)

    return context


class ContextualLoggerAdapter(logging.LoggerAdapter):
    """
    Logger adapter that automatically adds context to log records.

    Messages logged while a collection context is set are prefixed with
    the collection name, e.g. "[users] Creating index ...".
    """

    def process(self, msg: str, kwargs: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        """Add context to log records."""
        context = get_logging_context()

        extra = kwargs.get("extra", {})
        if extra:
            context.update(extra)

        kwargs["extra"] = context
        collection_name = context.get("collection_name")
        if collection_name:
            msg = f"[{collection_name}] {msg}"
        return msg, kwargs


def get_logger(name: str) -> ContextualLoggerAdapter:
    """
    Get a contextual logger that automatically adds correlation ID and context.

    Args:
        name: Logger name (typically __name__)

    Returns:
        ContextualLoggerAdapter instance
    """
    return ContextualLoggerAdapter(logging.getLogger(name), {})


def log_operation(
    logger: logging.Logger | logging.LoggerAdapter,
    operation: str,
    level: int = logging.INFO,
    success: bool = True,
    duration_ms: float | None = None,
    **context: Any,
) -> None:
    """
    Log an operation with structured context.

    Args:
        logger: Logger instance
        operation: Operation name
        level: Log level
        success: Whether operation succeeded
        duration_ms: Operation duration in milliseconds
        **context: Additional context
    """
    log_context = get_logging_context()
    log_context.update(
        {
            "operation": operation,
            "success": success,
        }
    )

    if duration_ms is not None:
        log_context["duration_ms"] = round(duration_ms, 2)

    if context:
        log_context.update(context)

    message = f"Operation: {operation}"
    if not success:
        message = f"Operation failed: {operation}"
    if duration_ms is not None:
        message += f" (duration: {duration_ms:.2f}ms)"

    logger.log(level, message, extra=log_context)
