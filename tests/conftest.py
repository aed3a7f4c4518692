"""
Pytest configuration and shared fixtures for MDB_INDEX tests.

This module provides:
- Mock MongoDB collection fixtures
- Environment isolation for configuration
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from motor.motor_asyncio import AsyncIOMotorCollection

# ============================================================================
# ENVIRONMENT FIXTURES
# ============================================================================


@pytest.fixture(autouse=True)
def clean_index_env(monkeypatch):
    """Keep MDB_INDEX_* variables from the host environment out of tests."""
    monkeypatch.delenv("MDB_INDEX_INCLUDE_DROP_DUPS", raising=False)
    monkeypatch.delenv("MDB_INDEX_DEFAULT_BACKGROUND", raising=False)


# ============================================================================
# MOCK MONGODB FIXTURES
# ============================================================================


@pytest.fixture
def mock_mongo_collection() -> MagicMock:
    """Create a mock MongoDB collection."""
    collection = MagicMock(spec=AsyncIOMotorCollection)
    collection.name = "test_collection"
    collection.create_index = AsyncMock(return_value="test_index")
    return collection
