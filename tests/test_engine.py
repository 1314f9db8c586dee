"""Tests for storage backends and configuration."""

import pytest

from fitness_tracker.db.engine import (
    DB_FILENAME,
    MemoryBackend,
    SQLiteBackend,
    StorageError,
    StorageQuotaExceededError,
    get_data_dir,
    get_db_path,
    init_db,
)


class TestMemoryBackend:
    """Tests for the in-memory backend."""

    def test_set_overwrites(self):
        """Test that set replaces the whole value."""
        backend = MemoryBackend()
        backend.set("k", "one")
        backend.set("k", "two")

        assert backend.get("k") == "two"
        assert backend.keys() == ["k"]

    def test_remove_missing_key(self):
        """Test that removing an absent key is a no-op."""
        backend = MemoryBackend()
        backend.remove("missing")
        assert backend.get("missing") is None

    def test_quota_counts_replaced_value_once(self):
        """Test that overwriting a key only counts the new value."""
        backend = MemoryBackend(quota=10)
        backend.set("k", "123456789")
        backend.set("k", "987654321")

        assert backend.get("k") == "987654321"

    def test_quota_exceeded(self):
        """Test that an oversized write is rejected and nothing changes."""
        backend = MemoryBackend(quota=10)
        backend.set("a", "1234")

        with pytest.raises(StorageQuotaExceededError) as exc_info:
            backend.set("b", "123456789")

        assert isinstance(exc_info.value, StorageError)
        assert backend.get("b") is None
        assert backend.get("a") == "1234"


class TestConfiguration:
    """Tests for data directory resolution."""

    def test_env_override(self, tmp_path, monkeypatch):
        """Test FITNESS_TRACKER_DATA_DIR moves the data directory."""
        monkeypatch.setenv("FITNESS_TRACKER_DATA_DIR", str(tmp_path / "custom"))

        assert get_data_dir() == tmp_path / "custom"
        assert get_db_path() == tmp_path / "custom" / DB_FILENAME
        assert (tmp_path / "custom").is_dir()

    def test_init_db_idempotent(self, temp_db_path):
        """Test that initializing twice keeps stored data."""
        init_db(temp_db_path)
        SQLiteBackend(temp_db_path).set("k", "v")
        init_db(temp_db_path)

        assert SQLiteBackend(temp_db_path).get("k") == "v"
