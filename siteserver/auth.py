import base64
import binascii
import hashlib
import hmac
from typing import Optional, Tuple

from fastapi import Depends, Header, HTTPException

from .config import Settings, get_settings

REALM_HEADER = {"WWW-Authenticate": 'Basic realm="restricted", charset="UTF-8"'}


def sha256_digest(value: str) -> bytes:
    return hashlib.sha256(value.encode("utf-8")).digest()


def parse_basic_authorization(authorization: Optional[str]) -> Optional[Tuple[str, str]]:
    """Split a ``Basic`` Authorization header into ``(username, password)``.

    Returns ``None`` for a missing header, a different scheme or a payload
    that is not ``base64(username:password)``.
    """
    if not authorization:
        return None
    scheme, _, encoded = authorization.partition(" ")
    if scheme.lower() != "basic" or not encoded.strip():
        return None
    try:
        decoded = base64.b64decode(encoded.strip(), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        return None
    username, sep, password = decoded.partition(":")
    if not sep:
        return None
    return username, password


def verify_credentials(username: str, password: str, settings: Settings) -> bool:
    """Compare credentials against the configured pair in constant time.

    Both sides are hashed first so the comparison runs over equal-length
    digests, and both fields are always compared.
    """
    username_match = hmac.compare_digest(
        sha256_digest(username), sha256_digest(settings.auth_username)
    )
    password_match = hmac.compare_digest(
        sha256_digest(password), sha256_digest(settings.auth_password)
    )
    return username_match and password_match


def require_basic_auth(
    authorization: Optional[str] = Header(default=None),
    settings: Settings = Depends(get_settings),
) -> str:
    credentials = parse_basic_authorization(authorization)
    if credentials is not None and verify_credentials(*credentials, settings):
        return credentials[0]
    raise HTTPException(status_code=401, detail="Unauthorized", headers=REALM_HEADER)
