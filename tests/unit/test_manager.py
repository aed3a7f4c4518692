"""
Unit tests for index creation from definitions.

Tests the hand-off of rendered documents to the driver and error handling.
"""

import logging
from unittest.mock import AsyncMock

import pytest
from pymongo.errors import ConnectionFailure, OperationFailure

from mdb_index.config import IndexConfig
from mdb_index.exceptions import IndexCreationError, InvalidArgumentError
from mdb_index.indexes.definition import Direction, Duplicates, IndexDefinition
from mdb_index.indexes.manager import create_index_from_definition
from mdb_index.indexes.time_units import TimeUnit
from mdb_index.observability.logging import (
    clear_collection_context,
    get_logging_context,
    set_collection_context,
)


class TestCreateIndexFromDefinition:
    """Test create_index_from_definition."""

    @pytest.mark.asyncio
    async def test_passes_rendered_documents(self, mock_mongo_collection):
        """Test that keys and options reach create_index unchanged and in order."""
        definition = (
            IndexDefinition("email", Direction.ASCENDING)
            .add_field("createdAt", Direction.DESCENDING)
            .with_name("email_created")
            .mark_unique()
        )

        name = await create_index_from_definition(mock_mongo_collection, definition)

        assert name == "test_index"
        mock_mongo_collection.create_index.assert_awaited_once()
        args, kwargs = mock_mongo_collection.create_index.call_args
        assert args == ([("email", 1), ("createdAt", -1)],)
        assert kwargs == {"name": "email_created", "unique": True}

    @pytest.mark.asyncio
    async def test_ttl_index(self, mock_mongo_collection):
        """Test that a TTL index passes expireAfterSeconds."""
        definition = IndexDefinition("createdAt").expire_after(1, TimeUnit.DAYS)

        await create_index_from_definition(mock_mongo_collection, definition)

        _, kwargs = mock_mongo_collection.create_index.call_args
        assert kwargs == {"expireAfterSeconds": 86400}

    @pytest.mark.asyncio
    async def test_config_applied(self, mock_mongo_collection):
        """Test that the rendering configuration is honoured."""
        definition = IndexDefinition("sku").mark_unique(Duplicates.DROP)
        config = IndexConfig(include_drop_dups=False, default_background=True)

        await create_index_from_definition(mock_mongo_collection, definition, config)

        _, kwargs = mock_mongo_collection.create_index.call_args
        assert kwargs == {"unique": True, "background": True}

    @pytest.mark.asyncio
    async def test_empty_definition_rejected(self, mock_mongo_collection):
        """Test that a definition without fields never reaches the driver."""
        with pytest.raises(InvalidArgumentError):
            await create_index_from_definition(mock_mongo_collection, IndexDefinition())

        mock_mongo_collection.create_index.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_id_index_skipped(self, mock_mongo_collection):
        """Test that an _id index is not created."""
        name = await create_index_from_definition(mock_mongo_collection, IndexDefinition("_id"))

        assert name == "_id_"
        mock_mongo_collection.create_index.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [OperationFailure("Index build failed"), ConnectionFailure("Connection lost")],
    )
    async def test_driver_error_wrapped(self, mock_mongo_collection, error):
        """Test that driver errors are wrapped in IndexCreationError."""
        mock_mongo_collection.create_index = AsyncMock(side_effect=error)

        with pytest.raises(IndexCreationError) as exc_info:
            await create_index_from_definition(mock_mongo_collection, IndexDefinition("a"))

        assert exc_info.value.index_name == "a_1"
        assert exc_info.value.collection_name == "test_collection"
        assert exc_info.value.__cause__ is error

    @pytest.mark.asyncio
    async def test_unexpected_error_propagates(self, mock_mongo_collection):
        """Test that non-driver errors are not wrapped."""
        mock_mongo_collection.create_index = AsyncMock(side_effect=TypeError("bad option"))

        with pytest.raises(TypeError):
            await create_index_from_definition(mock_mongo_collection, IndexDefinition("a"))


class TestCollectionLoggingContext:
    """Test that index creation logs carry the collection context."""

    @pytest.mark.asyncio
    async def test_records_carry_collection_and_index(self, mock_mongo_collection, caplog):
        """Test that records name the collection and index and are prefixed."""
        definition = IndexDefinition("email").with_name("email_unique").mark_unique()

        with caplog.at_level(logging.INFO, logger="mdb_index.indexes.manager"):
            await create_index_from_definition(mock_mongo_collection, definition)

        records = [r for r in caplog.records if r.name == "mdb_index.indexes.manager"]
        assert records
        for record in records:
            assert record.collection_name == "test_collection"
            assert record.index_name == "email_unique"
            assert record.getMessage().startswith("[test_collection] ")
        assert get_logging_context().get("collection_name") is None

    @pytest.mark.asyncio
    async def test_context_restored_after_failure(self, mock_mongo_collection):
        """Test that an outer collection context survives a failed creation."""
        mock_mongo_collection.create_index = AsyncMock(side_effect=OperationFailure("boom"))
        token = set_collection_context("outer")
        try:
            with pytest.raises(IndexCreationError):
                await create_index_from_definition(mock_mongo_collection, IndexDefinition("a"))

            assert get_logging_context()["collection_name"] == "outer"
            assert "index_name" not in get_logging_context()
        finally:
            clear_collection_context(token)
