"""Shared fixtures for integration tests."""

import os

import pytest

# Skip all integration tests unless RUN_OKTASYNC_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_OKTASYNC_NETWORK_TESTS") != "1",
    reason="Requires network access. Set RUN_OKTASYNC_NETWORK_TESTS=1 to run",
)


@pytest.fixture
def okta_credentials() -> tuple[str, str]:
    """Okta org address and API token from OKTA_ADDRESS / OKTA_TOKEN."""
    address = os.environ.get("OKTA_ADDRESS")
    token = os.environ.get("OKTA_TOKEN")
    if not address or not token:
        pytest.skip("OKTA_ADDRESS and OKTA_TOKEN must be set")
    return address, token
