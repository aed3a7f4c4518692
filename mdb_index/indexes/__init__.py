"""
Index Definition Module

Builds MongoDB index definitions and renders them into key pattern and
options documents.

This module is part of MDB_INDEX.
"""

from .definition import Direction, Duplicates, IndexDefinition
from .filters import IndexFilter, PartialIndexFilter
from .helpers import generate_index_name, is_id_index, normalize_keys
from .manager import create_index_from_definition
from .time_units import TimeUnit

__all__ = [
    # Definitions
    "Direction",
    "Duplicates",
    "IndexDefinition",
    "TimeUnit",
    # Filters
    "IndexFilter",
    "PartialIndexFilter",
    # Helpers
    "generate_index_name",
    "is_id_index",
    "normalize_keys",
    # Creation
    "create_index_from_definition",
]
