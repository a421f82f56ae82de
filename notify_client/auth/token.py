"""
API key handling and JWT bearer tokens.

An API key looks like ``<key name>-<service id>-<secret>`` where both the
service id and the secret are 36 character UUIDs. Requests are signed with a
short-lived HS256 token whose issuer is the service id.
"""

from __future__ import annotations

import time

import jwt

from ..config import Config
from ..shared.errors import InvalidAPIKeyError

ALGORITHM = "HS256"
TOKEN_TYPE = "JWT"
UUID_LENGTH = 36

# Allowance for clocks running ahead of ours
CLOCK_SKEW_SECONDS = 30


class TokenError(Exception):
    def __init__(self, message: str, token: str | None = None):
        super().__init__(message)
        self.message = message
        self.token = token


class TokenDecodeError(TokenError):
    pass


class TokenExpiredError(TokenError):
    pass


class TokenIssuerError(TokenError):
    pass


def extract_service_id_and_api_key(api_key: str) -> tuple[str, str]:
    """
    Split an API key into its service id and secret.

    Args:
        api_key: Full API key as issued by the service

    Returns:
        Tuple of (service_id, secret)

    Raises:
        InvalidAPIKeyError: If the key is too short to contain both parts
    """
    if not api_key or len(api_key) < 2 * UUID_LENGTH + 2:
        raise InvalidAPIKeyError("API key is not in the expected format")

    service_id = api_key[-(2 * UUID_LENGTH + 1) : -(UUID_LENGTH + 1)]
    secret = api_key[-UUID_LENGTH:]
    return service_id, secret


def create_jwt_token(secret: str, client_id: str, issued_at: int | None = None) -> str:
    """
    Create a signed bearer token.

    Args:
        secret: Signing secret (the last part of the API key)
        client_id: Token issuer (the service id)
        issued_at: Unix timestamp for the ``iat`` claim; defaults to now

    Returns:
        Encoded JWT
    """
    if not secret:
        raise TokenError("Missing secret key")
    if not client_id:
        raise TokenError("Missing client id")

    headers = {"typ": TOKEN_TYPE, "alg": ALGORITHM}
    claims = {
        "iss": client_id,
        "iat": int(time.time()) if issued_at is None else issued_at,
    }
    return jwt.encode(claims, secret, algorithm=ALGORITHM, headers=headers)


def get_token_issuer(token: str) -> str:
    """Read the ``iss`` claim without verifying the signature."""
    try:
        unverified = jwt.decode(token, options={"verify_signature": False})
    except jwt.DecodeError as e:
        raise TokenDecodeError("Invalid token", token) from e

    issuer = unverified.get("iss")
    if not issuer:
        raise TokenIssuerError("Token has no issuer", token)
    return issuer


def decode_jwt_token(token: str, secret: str, max_age: int = Config.TOKEN_MAX_AGE) -> bool:
    """
    Verify a token's signature and freshness.

    A token is fresh when its ``iat`` is no more than ``max_age`` seconds in
    the past and no more than ``CLOCK_SKEW_SECONDS`` in the future.

    Raises:
        TokenDecodeError: Bad signature or malformed token
        TokenExpiredError: ``iat`` outside the accepted window
    """
    try:
        decoded = jwt.decode(
            token,
            key=secret,
            algorithms=[ALGORITHM],
            options={"verify_iat": False, "require": ["iss", "iat"]},
        )
    except jwt.InvalidSignatureError as e:
        raise TokenDecodeError("Invalid token: signature", token) from e
    except jwt.MissingRequiredClaimError as e:
        raise TokenDecodeError(f"Invalid token: missing {e.claim}", token) from e
    except jwt.PyJWTError as e:
        raise TokenDecodeError("Invalid token", token) from e

    issued_at = decoded["iat"]
    if not isinstance(issued_at, int) or isinstance(issued_at, bool):
        raise TokenDecodeError("Invalid token: iat", token)

    now = int(time.time())
    if issued_at < now - max_age:
        raise TokenExpiredError("Token has expired", token)
    if issued_at > now + CLOCK_SKEW_SECONDS:
        raise TokenExpiredError("Token can not be in the future", token)
    return True
