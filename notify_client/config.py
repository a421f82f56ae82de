import os
from pathlib import Path

from dotenv import load_dotenv

repo_root = Path(__file__).resolve().parents[1]


def load_environment(root: Path = repo_root) -> None:
    """
    Load ``.env.<ENVIRONMENT>`` (or ``.env``) from ``root``, then a ``.env`` found
    from the working directory. Variables already exported in the process win.
    """
    environment = os.getenv("ENVIRONMENT", "development")
    env_file = root / f".env.{environment}"
    if env_file.exists():
        load_dotenv(env_file)
    else:
        env_path = root / ".env"
        if env_path.exists():
            load_dotenv(env_path)
    load_dotenv()


# Load environment variables
load_environment()


class Config:
    DEFAULT_API_URL = "https://api.notifications.service.gov.uk"

    NOTIFY_API_URL = (os.getenv("NOTIFY_API_URL") or DEFAULT_API_URL).rstrip("/")
    REQUEST_TIMEOUT = float(os.getenv("NOTIFY_REQUEST_TIMEOUT", "30"))
    USER_AGENT = "NOTIFY-API-PYTHON-CLIENT/0.1.0"

    # Seconds a signed token stays valid on the service side
    TOKEN_MAX_AGE = 30

    # Upload limit for send-a-file-by-email
    MAX_UPLOAD_BYTES = 2 * 1024 * 1024

    ALLOWED_POSTAGE = {"first", "second", "economy"}


def get_live_test_settings() -> dict[str, str | None]:
    """Return credentials and fixture ids used when running against a live service."""
    return {
        "api_url": Config.NOTIFY_API_URL,
        "api_key": os.getenv("API_KEY"),
        "sending_api_key": os.getenv("API_SENDING_KEY"),
        "inbound_sms_api_key": os.getenv("INBOUND_SMS_QUERY_KEY"),
        "email_address": os.getenv("FUNCTIONAL_TEST_EMAIL"),
        "phone_number": os.getenv("FUNCTIONAL_TEST_NUMBER"),
        "email_template_id": os.getenv("EMAIL_TEMPLATE_ID"),
        "sms_template_id": os.getenv("SMS_TEMPLATE_ID"),
        "letter_template_id": os.getenv("LETTER_TEMPLATE_ID"),
        "email_reply_to_id": os.getenv("EMAIL_REPLY_TO_ID") or None,
        "sms_sender_id": os.getenv("SMS_SENDER_ID") or None,
    }
