"""
Security helpers for password hashing and bearer-token authentication.

This module implements a lightweight JSON Web Token (JWT) mechanism
using HMAC-SHA256 signatures and base64url encoding.  Tokens embed the
user's ``id`` and ``username`` plus issue (``iat``) and expiry (``exp``)
timestamps.  The secret key comes from the application settings.
Passwords are hashed with PBKDF2-HMAC-SHA256 and a random per-password
salt.

``get_current_user`` is the token gate: a FastAPI dependency that
protected routes declare to obtain the caller's identity.
"""

import base64
import hashlib
import hmac
import json
import logging
import os
import time
from typing import Any, Dict, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import ValidationError as PydanticValidationError

from .config import Settings, settings as default_settings
from .errors import InvalidTokenError, MissingTokenError
from ..schemas.user import TokenIdentity


logger = logging.getLogger(__name__)


def _b64_url_encode(data: bytes) -> str:
    """Base64-url encode bytes without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")


def _b64_url_decode(data: str) -> bytes:
    """Decode base64-url encoded string, adding padding if necessary."""
    padding = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _sign(message: bytes, secret: str) -> bytes:
    """Compute HMAC-SHA256 signature of a message using the given secret."""
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).digest()


def create_access_token(
    data: Dict[str, Any],
    expires_delta: Optional[int] = None,
    secret_key: Optional[str] = None,
    now: Optional[int] = None,
) -> str:
    """Create a signed JWT token with the given payload.

    The payload is extended with ``iat`` and ``exp`` fields holding UNIX
    timestamps.  The token is a string of the form
    ``header.payload.signature``, where each part is base64url encoded.
    Clients send it back in the ``Authorization`` header as
    ``Bearer <token>``.

    Parameters
    ----------
    data : dict
        Claims to embed in the token (e.g. ``{"id": 1, "username": "john"}``).
    expires_delta : Optional[int]
        Lifetime of the token in seconds.  Defaults to
        ``settings.access_token_expire_minutes * 60`` when ``None``; ``0``
        gives a token that is already expired.
    secret_key : Optional[str]
        Signing secret.  Defaults to ``settings.secret_key``.
    now : Optional[int]
        Issue time as a UNIX timestamp; the current time if omitted.

    Returns
    -------
    str
        A signed JWT token.
    """
    to_encode = data.copy()
    issued_at = int(time.time()) if now is None else now
    if expires_delta is None:
        expires_delta = default_settings.access_token_expire_minutes * 60
    to_encode["iat"] = issued_at
    to_encode["exp"] = issued_at + expires_delta
    header = {"alg": "HS256", "typ": "JWT"}
    header_b64 = _b64_url_encode(json.dumps(header, separators=(",", ":")).encode("utf-8"))
    payload_b64 = _b64_url_encode(json.dumps(to_encode, separators=(",", ":")).encode("utf-8"))
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    signature = _sign(signing_input, secret_key or default_settings.secret_key)
    return f"{header_b64}.{payload_b64}.{_b64_url_encode(signature)}"


def decode_access_token(
    token: str,
    secret_key: Optional[str] = None,
    now: Optional[int] = None,
) -> Optional[Dict[str, Any]]:
    """Verify and decode a JWT token.

    Splits the token into header, payload and signature, verifies the
    HMAC signature and checks the ``exp`` field.  If validation
    succeeds, returns the payload dictionary; otherwise returns
    ``None``.
    """
    try:
        parts = token.split(".")
        if len(parts) != 3:
            return None
        header_b64, payload_b64, signature_b64 = parts
        signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
        expected_sig = _sign(signing_input, secret_key or default_settings.secret_key)
        actual_sig = _b64_url_decode(signature_b64)
        # Constant-time comparison to prevent timing attacks
        if not hmac.compare_digest(expected_sig, actual_sig):
            return None
        data = json.loads(_b64_url_decode(payload_b64).decode("utf-8"))
        current = int(time.time()) if now is None else now
        if data.get("exp") is None or int(data["exp"]) <= current:
            return None
        return data
    except (ValueError, TypeError, AttributeError):
        # binascii.Error and json.JSONDecodeError are both ValueError
        return None


def issue_user_token(user_id: int, username: str, config: Settings) -> str:
    """Sign a session token for the given account."""
    return create_access_token(
        {"id": user_id, "username": username},
        expires_delta=config.access_token_expire_minutes * 60,
        secret_key=config.secret_key,
    )


security = HTTPBearer(auto_error=False)


def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> TokenIdentity:
    """Dependency that returns the identity carried by the bearer token.

    No ``Authorization: Bearer`` header raises ``MissingTokenError``
    (401).  A token with a bad signature, malformed claims or a past
    expiry raises ``InvalidTokenError`` (403).  The account store is not
    consulted, so a valid token is accepted even if its user is gone.
    """
    if credentials is None or not credentials.credentials:
        raise MissingTokenError()
    config: Settings = request.app.state.settings
    payload = decode_access_token(credentials.credentials, secret_key=config.secret_key)
    identity = None
    if payload:
        try:
            identity = TokenIdentity(id=payload.get("id"), username=payload.get("username"))
        except PydanticValidationError:
            identity = None
    if identity is None:
        logger.debug("Rejected bearer token on %s %s", request.method, request.url.path)
        raise InvalidTokenError()
    return identity


def hash_password(password: str, iterations: Optional[int] = None) -> str:
    """Hash a password using PBKDF2-HMAC with SHA-256.

    A 16-byte random salt is generated for each password.  The
    resulting string contains the salt and hash separated by a
    ``$`` (salt in hex, then hash in hex).

    Parameters
    ----------
    password : str
        The plain text password to hash.
    iterations : Optional[int]
        PBKDF2 work factor.  Defaults to ``settings.password_hash_iterations``.

    Returns
    -------
    str
        Salt and hash concatenated with ``$``.
    """
    salt = os.urandom(16)
    rounds = iterations or default_settings.password_hash_iterations
    dk = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, rounds)
    return f"{salt.hex()}${dk.hex()}"


def verify_password(plain_password: str, hashed_password: str, iterations: Optional[int] = None) -> bool:
    """Verify a plain password against a stored salt+hash string.

    Returns ``False`` rather than raising when the stored value is not
    in ``salt$hash`` form.
    """
    try:
        salt_hex, hash_hex = hashed_password.split("$", 1)
        salt = bytes.fromhex(salt_hex)
        stored_hash = bytes.fromhex(hash_hex)
    except ValueError:
        return False
    rounds = iterations or default_settings.password_hash_iterations
    dk = hashlib.pbkdf2_hmac("sha256", plain_password.encode("utf-8"), salt, rounds)
    return hmac.compare_digest(dk, stored_hash)
