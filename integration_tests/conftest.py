"""Pytest configuration for integration tests."""

import pytest


def pytest_collection_modifyitems(items):
    """Mark everything under integration_tests/ as an integration test."""
    for item in items:
        if "integration_tests" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def db_path(tmp_path):
    """An initialized SQLite store in a temporary directory."""
    from fitness_tracker.db import init_db

    path = tmp_path / "fitness_tracker.db"
    init_db(path)
    return path
