"""
Pytest configuration and fixtures for unit tests.

Unit tests never touch the network: the client's requests session is patched
and answers with canned responses.
"""

import json
from unittest.mock import patch

import pytest
import requests

from notify_client import NotifyClient

SERVICE_ID = "26785a09-ab16-4eb0-8407-a37497a57506"
SECRET = "3d844edf-8d35-48ac-975b-e847b4f122b0"
API_KEY = f"test_key-{SERVICE_ID}-{SECRET}"
BASE_URL = "https://notify.test"


def build_response(status_code: int = 200, body=None, text: str | None = None) -> requests.Response:
    """Build a real requests.Response with a JSON (or raw text) body."""
    response = requests.Response()
    response.status_code = status_code
    response.encoding = "utf-8"
    if text is not None:
        response._content = text.encode("utf-8")
    else:
        response._content = json.dumps(body if body is not None else {}).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    return response


@pytest.fixture
def make_response():
    return build_response


@pytest.fixture
def client():
    """NotifyClient pointed at a test base URL."""
    return NotifyClient(api_key=API_KEY, base_url=BASE_URL)


@pytest.fixture
def mock_request(client):
    """Patch the client's session; tests set return_value / side_effect."""
    with patch.object(client.session, "request") as m:
        m.return_value = build_response(200, {})
        yield m


@pytest.fixture
def sample_notification():
    return {
        "id": "740e5834-3a29-46b4-9a6f-16142fde36a6",
        "reference": "client-ref",
        "email_address": "someone@example.com",
        "phone_number": None,
        "line_1": None,
        "line_2": None,
        "line_3": None,
        "line_4": None,
        "line_5": None,
        "line_6": None,
        "postcode": None,
        "type": "email",
        "status": "delivered",
        "template": {
            "id": "f33517ff-2a88-4f6e-b855-c550268ce08a",
            "version": 1,
            "uri": "https://notify.test/v2/template/f33517ff-2a88-4f6e-b855-c550268ce08a",
        },
        "body": "Hello Foo",
        "subject": "Functional Tests are good",
        "created_at": "2026-10-01T10:00:00.000000Z",
        "created_by_name": None,
        "sent_at": "2026-10-01T10:00:01.000000Z",
        "completed_at": "2026-10-01T10:00:05.000000Z",
    }


@pytest.fixture
def sample_template():
    return {
        "id": "f33517ff-2a88-4f6e-b855-c550268ce08a",
        "name": "Functional test email",
        "type": "email",
        "created_at": "2026-09-01T09:00:00.000000Z",
        "updated_at": None,
        "created_by": "someone@example.com",
        "version": 1,
        "body": "Hello ((name))",
        "subject": "Functional Tests are good",
    }


@pytest.fixture
def sample_received_text():
    return {
        "id": "3d7f2a7c-0b5e-4d9e-9a3b-8d8c0e9c7f11",
        "created_at": "2026-10-02T08:30:00.000000Z",
        "service_id": SERVICE_ID,
        "notify_number": "07700900000",
        "user_number": "447700900111",
        "content": "Hello back",
    }


@pytest.fixture
def service_id():
    return SERVICE_ID


@pytest.fixture
def secret():
    return SECRET


@pytest.fixture
def api_key():
    return API_KEY
