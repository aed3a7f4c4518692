"""
Custom exceptions for MDB_INDEX.

These exceptions provide more specific error types while maintaining
backward compatibility with RuntimeError.
"""

from typing import Any, Dict, Optional


class MongoDBIndexError(RuntimeError):
    """
    Base exception for MDB_INDEX errors.

    Attributes:
        message: Error message
        context: Optional dictionary with additional context (collection_name,
                 index_name, etc.)
    """

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            context: Optional dictionary with additional context information
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        """Return formatted error message with context if available."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} (context: {context_str})"
        return self.message


class InvalidArgumentError(MongoDBIndexError, ValueError):
    """
    Raised when an argument cannot be accepted by an index definition.

    Also a ValueError, so callers treating bad input generically still
    catch it.

    Attributes:
        message: Error message
        argument: Name of the offending argument (if available)
        value: The rejected value (if available)
        context: Additional context information
    """

    def __init__(
        self,
        message: str,
        argument: Optional[str] = None,
        value: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        context = context or {}
        if argument:
            context["argument"] = argument
        if value is not None:
            context["value"] = value
        super().__init__(message, context=context)
        self.argument = argument
        self.value = value


class IndexCreationError(MongoDBIndexError):
    """
    Raised when the driver fails to create an index.

    Attributes:
        message: Error message
        index_name: Name of the index being created (if available)
        collection_name: Target collection (if available)
        context: Additional context information
    """

    def __init__(
        self,
        message: str,
        index_name: Optional[str] = None,
        collection_name: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Initialize the index creation error.

        Args:
            message: Error message
            index_name: Name of the index being created (if available)
            collection_name: Target collection (if available)
            context: Additional context information
        """
        context = context or {}
        if index_name:
            context["index_name"] = index_name
        if collection_name:
            context["collection_name"] = collection_name
        super().__init__(message, context=context)
        self.index_name = index_name
        self.collection_name = collection_name


class ConfigurationError(MongoDBIndexError):
    """
    Raised when configuration is invalid or missing.

    Attributes:
        message: Error message
        config_key: Configuration key that caused the error (if available)
        config_value: Configuration value that caused the error (if available)
        context: Additional context information
    """

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        config_value: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        context = context or {}
        if config_key:
            context["config_key"] = config_key
        if config_value is not None:
            context["config_value"] = config_value
        super().__init__(message, context=context)
        self.config_key = config_key
        self.config_value = config_value
