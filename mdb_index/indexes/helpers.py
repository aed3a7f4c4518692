"""
Helper functions for index key patterns.

This module contains shared utility functions used when handing rendered
index definitions to a driver.
"""

from collections.abc import Mapping
from typing import Any

from ..constants import ID_FIELD


def normalize_keys(
    keys: Mapping[str, Any] | list[tuple[str, Any]],
) -> list[tuple[str, Any]]:
    """
    Normalize index keys to a consistent format.

    Args:
        keys: Index keys as a mapping (e.g. a rendered key pattern) or list of tuples

    Returns:
        List of (field_name, direction) tuples
    """
    if isinstance(keys, Mapping):
        return [(k, v) for k, v in keys.items()]
    return list(keys)


def is_id_index(keys: Mapping[str, Any] | list[tuple[str, Any]]) -> bool:
    """
    Check if index keys target the _id field (which MongoDB creates automatically).

    Args:
        keys: Index keys to check

    Returns:
        True if this is an _id index
    """
    normalized = normalize_keys(keys)
    return len(normalized) == 1 and normalized[0][0] == ID_FIELD


def generate_index_name(keys: Mapping[str, Any] | list[tuple[str, Any]]) -> str:
    """
    Generate the name MongoDB gives an index created without one.

    Format: field1_1_field2_-1 (1 for ascending, -1 for descending).

    Args:
        keys: Index keys

    Returns:
        Default index name
    """
    return "_".join(f"{field}_{direction}" for field, direction in normalize_keys(keys))
