"""Test configuration and fixtures for swift-tools."""

import pytest
import respx

from swift_tools.objectstorage.clients import ServiceClient

STORAGE_URL = "https://swift.example.com/v1/AUTH_test"
ACCOUNT_PATH = "/v1/AUTH_test/"
AUTH_TOKEN = "tk-123"


def container_path(name: str) -> str:
    return ACCOUNT_PATH + name


@pytest.fixture
def service_client():
    """A service client for the mocked test account."""
    return ServiceClient(endpoint=STORAGE_URL, auth_token=AUTH_TOKEN)


@pytest.fixture
def swift_api():
    """Mock the Swift HTTP API; every request must match a route."""
    with respx.mock(assert_all_called=False) as router:
        yield router
