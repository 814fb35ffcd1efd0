"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

import tempfile
from pathlib import Path
from typing import Any

import pytest

from frugeasy.core import config as config_module
from frugeasy.core.models import Transaction, TransactionCategory, TransactionType


def make_transaction(**overrides: Any) -> Transaction:
    """Build a Transaction with sensible defaults for any field not given."""
    return Transaction(
        id=overrides.get("id", "1"),
        amount=overrides.get("amount", 0.0),
        type=overrides.get("type", TransactionType.EXPENSE),
        category=overrides.get("category", TransactionCategory.OTHER),
        date=overrides.get("date", "2026-02-01T00:00:00.000Z"),
        created_at=overrides.get("created_at", "2026-02-01T00:00:00.000Z"),
    )


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_path:
        yield Path(temp_path)


@pytest.fixture
def tx():
    """Factory fixture for building transactions."""
    return make_transaction


@pytest.fixture
def february_records() -> list[Transaction]:
    """Three February 2026 records: two on the 1st, one on the 3rd."""
    return [
        make_transaction(
            id="food-1",
            type=TransactionType.EXPENSE,
            category=TransactionCategory.FOOD,
            amount=20,
            date="2026-02-01T00:00:00.000Z",
        ),
        make_transaction(
            id="salary-1",
            type=TransactionType.INCOME,
            category=TransactionCategory.SALARY,
            amount=100,
            date="2026-02-01T00:00:00.000Z",
        ),
        make_transaction(
            id="transport-1",
            type=TransactionType.EXPENSE,
            category=TransactionCategory.TRANSPORT,
            amount=10,
            date="2026-02-03T00:00:00.000Z",
        ),
    ]


@pytest.fixture
def sample_store_record() -> dict[str, Any]:
    """Sample record as the store hands it over."""
    return {
        "id": "1760000000000-123456",
        "amount": 45.99,
        "type": "expense",
        "category": "Groceries",
        "date": "2026-02-14T18:30:00.000Z",
        "createdAt": "2026-02-14T18:31:02.000Z",
    }


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, tmp_path):
    """Set up test environment variables and a fresh configuration."""
    # Ensure tests don't use real data
    monkeypatch.setenv("FRUGEASY_ENV", "test")
    monkeypatch.setenv("FRUGEASY_DATA_DIR", str(tmp_path / "frugeasy_data"))
    monkeypatch.setenv("FRUGEASY_CURRENCY", "USD")
    monkeypatch.delenv("FRUGEASY_LARGEST_LIMIT", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    monkeypatch.setattr(config_module, "_config", None)
    yield
    config_module._config = None


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests for complete workflows")
    config.addinivalue_line("markers", "e2e: End-to-end CLI tests")
    config.addinivalue_line("markers", "currency: Tests for amount parsing and formatting")
