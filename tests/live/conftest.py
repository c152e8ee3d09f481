"""
Live API fixtures.

These tests hit a REAL FitONEX server to check that response shapes still
decode into the SDK records. They need an account.

Provide credentials via environment variables:
  FITONEX_API_URL   = server base URL (default http://localhost:8080)
  FITONEX_EMAIL     = account email
  FITONEX_PASSWORD  = account password

Run: pytest tests/live/ -v
"""

import os

import pytest

from fitonex_mcp.api import FitonexApi
from fitonex_mcp.sdk.client import FitonexClient


@pytest.fixture(autouse=True)
def mock_get_client():
    """Live tests use a real client; disable the tool-level mock."""
    yield None


@pytest.fixture(scope="session")
def live_api():
    """
    Logged-in FitonexApi against FITONEX_API_URL.
    Skips all live tests if no credentials are available.
    """
    email = os.environ.get("FITONEX_EMAIL")
    password = os.environ.get("FITONEX_PASSWORD")
    if not (email and password):
        pytest.skip("No FitONEX credentials: set FITONEX_EMAIL and FITONEX_PASSWORD")

    api = FitonexApi(FitonexClient())
    outcome = api.auth.login(email, password)
    if not outcome.success:
        pytest.skip(f"Live login failed: {outcome.error}")
    return api
