"""Send one test notification using current config (API_KEY etc. from .env).

Run from project root:
  python scripts/verify_notify_api.py
  python scripts/verify_notify_api.py sms
  python scripts/verify_notify_api.py email someone@example.com

Then check the recipient inbox or phone. The response is checked against the
bundled schema before reporting success.
"""

import logging
import sys

from notify_client import APIError, NotifyClient
from notify_client.config import get_live_test_settings
from notify_client.schemas import iter_errors
from notify_client.shared.structured_logging import STRUCTURED_FORMAT

logging.basicConfig(level=logging.INFO, format=STRUCTURED_FORMAT)


def main() -> int:
    channel = sys.argv[1].strip().lower() if len(sys.argv) > 1 else "email"
    if channel not in ("email", "sms"):
        print(f"ERROR: unknown channel {channel!r}. Use 'email' or 'sms'.")
        return 1

    settings = get_live_test_settings()
    if not settings["api_key"]:
        print("ERROR: API_KEY not set. Configure it in .env and try again.")
        return 1

    recipient = (
        sys.argv[2].strip()
        if len(sys.argv) > 2
        else settings["email_address" if channel == "email" else "phone_number"]
    )
    template_id = settings[f"{channel}_template_id"]

    print(f"Sending test {channel}...")
    print(f"  NOTIFY_API_URL: {settings['api_url']}")
    print(f"  Template: {template_id}")
    print(f"  To: {recipient}")
    print()

    if not recipient or not template_id:
        print("ERROR: recipient or template id missing. Check FUNCTIONAL_TEST_* and *_TEMPLATE_ID.")
        return 1

    client = NotifyClient(api_key=settings["api_key"], base_url=settings["api_url"])
    try:
        if channel == "email":
            response = client.send_email(template_id, recipient, personalisation={"name": "Test"})
        else:
            response = client.send_sms(template_id, recipient, personalisation={"name": "Test"})
    except APIError as e:
        print(f"FAILED: {e}")
        return 1

    errors = iter_errors(response, f"POST_notification_{channel}_response.json")
    if errors:
        print("FAILED: response did not match schema:")
        for error in errors:
            print(f"  {error}")
        return 1

    print(f"SUCCESS: notification {response['id']} created.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
