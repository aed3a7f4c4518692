"""
Constants for MDB_INDEX.

This module contains all shared constants used across the codebase to avoid
magic numbers and improve maintainability.
"""

from typing import Final

# ============================================================================
# KEY PATTERN CONSTANTS
# ============================================================================

ASCENDING_VALUE: Final[int] = 1
"""Key pattern value for an ascending field."""

DESCENDING_VALUE: Final[int] = -1
"""Key pattern value for a descending field."""

ID_FIELD: Final[str] = "_id"
"""Field MongoDB indexes automatically on every collection."""

ID_INDEX_NAME: Final[str] = "_id_"
"""Name of the automatic _id index."""

# ============================================================================
# OPTIONS DOCUMENT KEYS
# ============================================================================

OPTION_NAME: Final[str] = "name"
OPTION_UNIQUE: Final[str] = "unique"
OPTION_DROP_DUPS: Final[str] = "dropDups"
OPTION_SPARSE: Final[str] = "sparse"
OPTION_BACKGROUND: Final[str] = "background"
OPTION_EXPIRE_AFTER_SECONDS: Final[str] = "expireAfterSeconds"
OPTION_PARTIAL_FILTER_EXPRESSION: Final[str] = "partialFilterExpression"

# ============================================================================
# TTL CONSTANTS
# ============================================================================

MIN_TTL_SECONDS: Final[int] = 0
"""Smallest expireAfterSeconds value that is rendered."""

# ============================================================================
# CONFIGURATION DEFAULTS
# ============================================================================

DEFAULT_INCLUDE_DROP_DUPS: Final[bool] = True
"""Render the legacy dropDups option when it was requested."""

DEFAULT_BACKGROUND: Final[bool] = False
"""Whether every rendered index is built in the background."""
