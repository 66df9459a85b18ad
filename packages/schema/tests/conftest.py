"""Pytest configuration and fixtures for schema tests."""

import pytest


@pytest.fixture
def sample_lock_data():
    """Lock payload with a locked, an unlocked and an extra-field entry."""
    return {
        "com.example:foo": {"locked": "1.0.0", "requested": "1.+"},
        "com.example:internal": {"project": True},
        "com.example:bar": {"locked": "2.1.0", "transitive": ["com.example:foo"]},
    }


@pytest.fixture
def minimal_settings():
    return {"lock_file": "dependencies.lock"}
