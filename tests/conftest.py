"""Pytest configuration and fixtures."""

import datetime
from zoneinfo import ZoneInfo

import pytest
from fastapi.testclient import TestClient

from main import app

TOKYO = ZoneInfo("Asia/Tokyo")


@pytest.fixture
def client():
    """Test client with fresh in-memory ledgers (startup runs per test)."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def fixed_clock():
    """Clock frozen at 2024-01-05 09:03:07 Tokyo time."""
    moment = datetime.datetime(2024, 1, 5, 9, 3, 7, tzinfo=TOKYO)
    return lambda: moment
