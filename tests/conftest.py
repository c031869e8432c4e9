"""Shared fixtures for the registration form tests."""

from datetime import date

import pytest
from fastapi.testclient import TestClient

from regform.main import app, get_today

TODAY = date(2025, 10, 1)


@pytest.fixture
def client():
    app.dependency_overrides[get_today] = lambda: TODAY
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def valid_submission():
    return {
        "firstname": "Ana",
        "birthday": "2000-05-20",
        "gender": "Female",
        "motto": "Carpe diem",
    }
