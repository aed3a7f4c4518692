"""
MDB_INDEX - MongoDB index definitions

Fluent index definitions rendered into the key pattern and options
documents consumed by pymongo and motor.
"""

from .config import IndexConfig
from .exceptions import (
    ConfigurationError,
    IndexCreationError,
    InvalidArgumentError,
    MongoDBIndexError,
)
from .indexes import (
    Direction,
    Duplicates,
    IndexDefinition,
    IndexFilter,
    PartialIndexFilter,
    TimeUnit,
    create_index_from_definition,
)

__version__ = "0.1.0"

__all__ = [
    # Definitions
    "IndexDefinition",
    "Direction",
    "Duplicates",
    "TimeUnit",
    "IndexFilter",
    "PartialIndexFilter",
    # Creation
    "create_index_from_definition",
    # Configuration
    "IndexConfig",
    # Exceptions
    "MongoDBIndexError",
    "InvalidArgumentError",
    "IndexCreationError",
    "ConfigurationError",
]
