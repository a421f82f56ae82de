"""
Pytest configuration and fixtures for integration tests.

Integration tests call a live notification service and require credentials
and template ids in the environment (see notify_client.config).
All tests in this directory should be marked with @pytest.mark.integration
"""

import random
import string

import pytest

from notify_client import NotifyClient
from notify_client.config import get_live_test_settings


def make_random_id(length: int = 5) -> str:
    """Random alphanumeric id, used to make letter content unique per run."""
    return "".join(random.choice(string.ascii_letters + string.digits) for _ in range(length))


@pytest.fixture(scope="session")
def live_settings():
    """Live service settings; skips when no API key is configured."""
    settings = get_live_test_settings()
    if not settings["api_key"]:
        pytest.skip("API_KEY is not set")
    return settings


@pytest.fixture(scope="session")
def notify_client(live_settings):
    return NotifyClient(api_key=live_settings["api_key"], base_url=live_settings["api_url"])


@pytest.fixture(scope="session")
def sending_client(live_settings):
    """Client using a key allowed to send to the service's guest list."""
    if not live_settings["sending_api_key"]:
        pytest.skip("API_SENDING_KEY is not set")
    return NotifyClient(api_key=live_settings["sending_api_key"], base_url=live_settings["api_url"])


@pytest.fixture(scope="session")
def received_text_client(live_settings):
    if not live_settings["inbound_sms_api_key"]:
        pytest.skip("INBOUND_SMS_QUERY_KEY is not set")
    return NotifyClient(
        api_key=live_settings["inbound_sms_api_key"], base_url=live_settings["api_url"]
    )


@pytest.fixture(scope="session")
def letter_contact():
    return {
        "address_line_1": make_random_id(),
        "address_line_2": "Foo",
        "postcode": "Bar",
    }


@pytest.fixture(scope="module")
def sent_notifications():
    """Ids of notifications sent earlier in the module, keyed by type."""
    return {}
