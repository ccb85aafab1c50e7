"""Pytest configuration for integration tests."""

import pytest


def pytest_collection_modifyitems(items):
    """Mark everything under integration_tests so it can be deselected."""
    for item in items:
        if "integration_tests" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    """Isolated data directory shared by the CLI and the web app."""
    monkeypatch.setenv("FITSPEC_DATA_DIR", str(tmp_path))
    return tmp_path
