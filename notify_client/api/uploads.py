"""
File preparation for send-a-file-by-email.

The prepared value is passed as a personalisation field; the service stores
the file and replaces the placeholder with a download link.
"""

from __future__ import annotations

import base64
import logging
from typing import IO, Any

from ..config import Config

logger = logging.getLogger(__name__)


def prepare_upload(f: bytes | IO[bytes], is_csv: bool = False) -> dict[str, Any]:
    """
    Encode a file for use as a personalisation value.

    Args:
        f: File contents, or a binary file object to read
        is_csv: Whether the service should serve the file as CSV

    Returns:
        Dictionary with the base64 encoded file and the CSV flag

    Raises:
        ValueError: If the file is larger than 2MB
    """
    contents = f if isinstance(f, (bytes, bytearray)) else f.read()

    if len(contents) > Config.MAX_UPLOAD_BYTES:
        raise ValueError("File is larger than 2MB")

    logger.debug(f"Prepared upload of {len(contents)} bytes (is_csv={is_csv})")
    return {
        "file": base64.b64encode(contents).decode("ascii"),
        "is_csv": is_csv,
    }
