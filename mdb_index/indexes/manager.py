"""
Index creation hand-off.

Renders an IndexDefinition and passes both documents to an async driver
collection. Listing and dropping indexes are left to the driver.

This module is part of MDB_INDEX.
"""

import logging
import time
from typing import Any, Optional

from pymongo.errors import ConnectionFailure, OperationFailure, ServerSelectionTimeoutError

from ..config import IndexConfig
from ..constants import ID_INDEX_NAME, OPTION_NAME
from ..exceptions import IndexCreationError, InvalidArgumentError
from ..observability.logging import (
    clear_collection_context,
    get_logger,
    log_operation,
    set_collection_context,
)
from .definition import IndexDefinition
from .helpers import generate_index_name, is_id_index, normalize_keys

logger = get_logger(__name__)


async def create_index_from_definition(
    collection: Any,
    definition: IndexDefinition,
    config: Optional[IndexConfig] = None,
) -> str:
    """
    Create the index described by definition on collection.

    Args:
        collection: Async collection (e.g. AsyncIOMotorCollection) exposing
            create_index(keys, **options)
        definition: Index to create
        config: Optional rendering configuration

    Returns:
        Name of the created index, as reported by the driver

    Raises:
        InvalidArgumentError: If the definition has no fields
        IndexCreationError: If the driver fails to create the index
    """
    key_pattern = definition.render_key_pattern()
    options = definition.render_options(config)
    collection_name = getattr(collection, "name", None)

    if not key_pattern:
        raise InvalidArgumentError(
            "Cannot create an index without fields",
            argument="definition",
            context={"collection_name": collection_name} if collection_name else None,
        )

    keys = normalize_keys(key_pattern)
    index_name = options.get(OPTION_NAME) or generate_index_name(keys)

    token = set_collection_context(collection_name, index_name=index_name)
    try:
        if is_id_index(keys):
            logger.info(
                f"Skipping '_id' index '{index_name}'. "
                f"MongoDB automatically creates '_id' indexes on all collections."
            )
            return ID_INDEX_NAME

        logger.info(f"Creating index '{index_name}': {definition.describe()}")
        start = time.perf_counter()
        try:
            created_name = await collection.create_index(keys, **options)
        except (OperationFailure, ConnectionFailure, ServerSelectionTimeoutError) as e:
            log_operation(
                logger,
                "create_index",
                level=logging.ERROR,
                success=False,
                duration_ms=(time.perf_counter() - start) * 1000,
                error=str(e),
            )
            logger.error(f"❌ Failed to create index '{index_name}': {e}", exc_info=True)
            raise IndexCreationError(
                f"Failed to create index '{index_name}': {e}",
                index_name=index_name,
                collection_name=collection_name,
            ) from e

        log_operation(
            logger,
            "create_index",
            duration_ms=(time.perf_counter() - start) * 1000,
            created_index_name=created_name,
        )
        logger.info(f"✔️ Created index '{created_name}'.")
        return created_name
    finally:
        clear_collection_context(token)
