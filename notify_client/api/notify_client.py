"""
Notify API Client

Client for the notification service v2 REST API: sending notifications,
reading their status, and working with templates and received texts.
"""

from __future__ import annotations

import base64
from collections.abc import Iterator
from typing import IO, Any

from ..auth.token import create_jwt_token, extract_service_id_and_api_key
from ..config import Config
from .base_client import BaseAPIClient


class NotifyClient(BaseAPIClient):
    """
    Client for the notification service API.

    Every method is one signed HTTP request and returns the parsed JSON body.
    Non-2xx responses raise APIError with the service's body attached.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str | None = None,
        timeout: float = Config.REQUEST_TIMEOUT,
    ):
        """
        Initialize Notify API client.

        Args:
            api_key: API key issued by the service
            base_url: API base URL. If None, uses NOTIFY_API_URL or the public service URL.
            timeout: Request timeout in seconds
        """
        self.service_id, self.api_key = extract_service_id_and_api_key(api_key)
        super().__init__(
            base_url=base_url or Config.NOTIFY_API_URL,
            timeout=timeout,
            service_id=self.service_id,
        )

    def _get_auth_header(self) -> str:
        token = create_jwt_token(secret=self.api_key, client_id=self.service_id)
        return f"Bearer {token}"

    # Notifications

    def send_email(
        self,
        template_id: str,
        email_address: str,
        personalisation: dict[str, Any] | None = None,
        reference: str | None = None,
        email_reply_to_id: str | None = None,
    ) -> dict[str, Any]:
        """
        Send an email notification.

        Args:
            template_id: Email template id
            email_address: Recipient address
            personalisation: Values for the template's placeholders
            reference: Client reference stored with the notification
            email_reply_to_id: Reply-to address id configured on the service

        Returns:
            Created notification (id, reference, content, uri, template)
        """
        data = _compact(
            template_id=template_id,
            email_address=email_address,
            personalisation=personalisation,
            reference=reference,
            email_reply_to_id=email_reply_to_id,
        )
        return self._make_request("/v2/notifications/email", method="POST", data=data)

    def send_sms(
        self,
        template_id: str,
        phone_number: str,
        personalisation: dict[str, Any] | None = None,
        reference: str | None = None,
        sms_sender_id: str | None = None,
    ) -> dict[str, Any]:
        """
        Send a text message notification.

        Args:
            template_id: SMS template id
            phone_number: Recipient phone number
            personalisation: Values for the template's placeholders
            reference: Client reference stored with the notification
            sms_sender_id: Sender id configured on the service

        Returns:
            Created notification (id, reference, content, uri, template)
        """
        data = _compact(
            template_id=template_id,
            phone_number=phone_number,
            personalisation=personalisation,
            reference=reference,
            sms_sender_id=sms_sender_id,
        )
        return self._make_request("/v2/notifications/sms", method="POST", data=data)

    def send_letter(
        self,
        template_id: str,
        personalisation: dict[str, Any],
        reference: str | None = None,
    ) -> dict[str, Any]:
        """
        Send a letter notification.

        Args:
            template_id: Letter template id
            personalisation: Address lines (address_line_1, ..., postcode) and placeholder values
            reference: Client reference stored with the notification

        Returns:
            Created notification (id, reference, content, uri, template)
        """
        data = _compact(
            template_id=template_id,
            personalisation=personalisation,
            reference=reference,
        )
        return self._make_request("/v2/notifications/letter", method="POST", data=data)

    def send_precompiled_letter(
        self,
        reference: str,
        pdf_file: bytes | IO[bytes],
        postage: str | None = None,
    ) -> dict[str, Any]:
        """
        Send a letter from a ready-made PDF.

        Args:
            reference: Client reference (required for precompiled letters)
            pdf_file: PDF contents or a binary file object
            postage: "first", "second" or "economy"; service default when None

        Returns:
            Created notification (id, reference, postage)
        """
        if postage is not None and postage not in Config.ALLOWED_POSTAGE:
            raise ValueError(f"Invalid postage: {postage}")

        contents = pdf_file if isinstance(pdf_file, (bytes, bytearray)) else pdf_file.read()
        data = _compact(
            reference=reference,
            content=base64.b64encode(contents).decode("ascii"),
            postage=postage,
        )
        return self._make_request("/v2/notifications/letter", method="POST", data=data)

    def get_notification_by_id(self, notification_id: str) -> dict[str, Any]:
        return self._make_request(f"/v2/notifications/{notification_id}")

    def get_notifications(
        self,
        template_type: str | None = None,
        status: str | None = None,
        reference: str | None = None,
        older_than: str | None = None,
    ) -> dict[str, Any]:
        """
        List notifications, newest first, one page at a time.

        Args:
            template_type: "email", "sms" or "letter"
            status: Delivery status filter (e.g. "delivered")
            reference: Client reference filter
            older_than: Only return notifications older than this notification id

        Returns:
            Page with "notifications" and "links" (current, next)
        """
        params = _compact(
            template_type=template_type,
            status=status,
            reference=reference,
            older_than=older_than,
        )
        return self._make_request("/v2/notifications", params=params or None)

    def iter_notifications(
        self,
        template_type: str | None = None,
        status: str | None = None,
        reference: str | None = None,
        older_than: str | None = None,
    ) -> Iterator[dict[str, Any]]:
        """Yield notifications across pages, following the "next" link until exhausted."""
        while True:
            page = self.get_notifications(
                template_type=template_type,
                status=status,
                reference=reference,
                older_than=older_than,
            )
            notifications = page.get("notifications") or []
            yield from notifications

            if not notifications or not page.get("links", {}).get("next"):
                return
            older_than = notifications[-1]["id"]

    # Templates

    def get_template_by_id(self, template_id: str) -> dict[str, Any]:
        return self._make_request(f"/v2/template/{template_id}")

    def get_template_by_id_and_version(self, template_id: str, version: int) -> dict[str, Any]:
        return self._make_request(f"/v2/template/{template_id}/version/{version}")

    def get_all_templates(self, template_type: str | None = None) -> dict[str, Any]:
        """
        List the latest version of every template.

        Args:
            template_type: Restrict to "email", "sms" or "letter"
        """
        params = {"type": template_type} if template_type else None
        return self._make_request("/v2/templates", params=params)

    def preview_template_by_id(
        self, template_id: str, personalisation: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """
        Render a template with personalisation without sending anything.

        Returns:
            Preview (id, type, version, body, subject)
        """
        data = {"personalisation": personalisation} if personalisation else {}
        return self._make_request(f"/v2/template/{template_id}/preview", method="POST", data=data)

    # Received texts

    def get_received_texts(self, older_than: str | None = None) -> dict[str, Any]:
        """
        List inbound text messages, newest first.

        Args:
            older_than: Only return messages older than this received text id

        Returns:
            Page with "received_text_messages" and "links"
        """
        params = {"older_than": older_than} if older_than else None
        return self._make_request("/v2/received-text-messages", params=params)


def _compact(**fields: Any) -> dict[str, Any]:
    """Drop fields that were not supplied."""
    return {key: value for key, value in fields.items() if value is not None}
