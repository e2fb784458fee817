"""
FILE: tests/conftest.py
Shared fixtures for payment instruction tests.
"""

from datetime import date
from pathlib import Path

import pytest

from tests.factories import account

BUSINESS_DATE = date(2026, 1, 15)


def _has_marker(item: pytest.Item, name: str) -> bool:
    return item.get_closest_marker(name) is not None


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        if (
            _has_marker(item, "unit")
            or _has_marker(item, "integration")
            or _has_marker(item, "e2e")
        ):
            continue

        path = Path(str(item.fspath)).as_posix().lower()
        if "/tests/integration/" in path or "_integration.py" in path:
            item.add_marker(pytest.mark.integration)
            continue
        if "/tests/e2e/" in path or "/tests/shared/demo/" in path:
            item.add_marker(pytest.mark.e2e)
            continue
        item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def clean_runtime_env(monkeypatch: pytest.MonkeyPatch):
    """Keep every test independent of operator environment settings."""
    for name in (
        "APP_RUNTIME_PROFILE",
        "PAYMENT_BUSINESS_DATE_OVERRIDE",
        "PAYMENT_INSTRUCTIONS_ENABLED",
        "PAYMENT_METRICS_ENABLED",
        "SERVICE_NAME",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def business_date():
    return BUSINESS_DATE


@pytest.fixture
def usd_accounts():
    return [account("ACC1", "1000", "USD"), account("ACC2", "0", "USD")]
