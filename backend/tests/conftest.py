"""
Common fixtures for the storefront test suite.

Provides:
- Flask app built through create_app() in testing mode
- Flask test client
- A fixed "now" for relative-time checks
"""

from datetime import datetime

import pytest

from storefront import create_app


@pytest.fixture
def app():
    """Fresh app per test so routes can be added before the first request."""
    return create_app({"TESTING": True, "DEFAULT_PAGE_LIMIT": 20, "MAX_PAGE_LIMIT": 100})


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def fixed_now():
    return datetime(2026, 10, 19, 12, 0, 0)
