"""pytest configuration and shared fixtures."""

import datetime

import pytest

from value_filters.filters import temporal


@pytest.fixture
def form_data():
    """Raw values as they arrive from a submitted form."""
    return {
        "name": "Alice",
        "age": "30",
        "ratio": "0,75",
        "newsletter": "on",
        "born": "1994-03-12",
        "empty": "",
    }


@pytest.fixture
def frozen_now(monkeypatch):
    """Pin the clock used by relative date-time keywords."""
    now = datetime.datetime(2024, 5, 17, 13, 45, 30)
    monkeypatch.setattr(temporal, "_now", lambda: now)
    return now
