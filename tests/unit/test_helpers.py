"""
Unit tests for index key helpers.
"""

from bson.son import SON

from mdb_index.indexes.helpers import generate_index_name, is_id_index, normalize_keys


class TestNormalizeKeys:
    """Test key normalization."""

    def test_mapping_to_list(self):
        """Test that a rendered key pattern becomes a list of tuples in order."""
        assert normalize_keys(SON([("b", 1), ("a", -1)])) == [("b", 1), ("a", -1)]

    def test_list_passes_through(self):
        """Test that a list of tuples is returned unchanged."""
        assert normalize_keys([("a", 1)]) == [("a", 1)]


class TestIsIdIndex:
    """Test _id index detection."""

    def test_id_only(self):
        """Test that a single _id key is detected in both key formats."""
        assert is_id_index({"_id": 1}) is True
        assert is_id_index([("_id", -1)]) is True

    def test_compound_with_id(self):
        """Test that a compound index starting with _id is not an _id index."""
        assert is_id_index([("_id", 1), ("a", 1)]) is False

    def test_other_field(self):
        """Test that a single non-_id field is not an _id index."""
        assert is_id_index({"email": 1}) is False


class TestGenerateIndexName:
    """Test default index naming."""

    def test_compound_name(self):
        """Test the driver's default naming format."""
        assert generate_index_name(SON([("email", 1), ("createdAt", -1)])) == "email_1_createdAt_-1"
