"""Shared fixtures for the product catalog tests."""

import pytest

from tests.fakes import FakeCatalogStore


@pytest.fixture
def fake_store() -> FakeCatalogStore:
    """Empty in-memory catalog store."""
    return FakeCatalogStore()


@pytest.fixture
def widget() -> dict:
    return {"name": "Widget", "price": 9.99, "quantity": 5, "tags": ["new"]}
