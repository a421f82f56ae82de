"""
Request signing for the notification service API.
"""

from .token import (
    TokenDecodeError,
    TokenError,
    TokenExpiredError,
    TokenIssuerError,
    create_jwt_token,
    decode_jwt_token,
    extract_service_id_and_api_key,
    get_token_issuer,
)

__all__ = [
    "TokenError",
    "TokenDecodeError",
    "TokenExpiredError",
    "TokenIssuerError",
    "create_jwt_token",
    "decode_jwt_token",
    "extract_service_id_and_api_key",
    "get_token_issuer",
]
