"""
Credentials: bcrypt password hashes and signed JWT access tokens.

Tokens carry the user id in "sub" plus any extra claims the caller adds;
"iat" and "exp" are always set here from ACCESS_TOKEN_EXPIRE_MINUTES.
"""

# Standard library imports
from datetime import timedelta
from typing import Any, Dict, Optional

# External package imports
import bcrypt
import jwt

# Local application imports
from ..utils.datetime_utils import utc_now
from .config import get_settings

_ENCODING = "utf-8"


def hash_password(plain_password: str) -> str:
    salt = bcrypt.gensalt(rounds=get_settings().bcrypt_rounds)
    return bcrypt.hashpw(plain_password.encode(_ENCODING), salt).decode(_ENCODING)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a password against a stored hash; a malformed hash never matches."""
    try:
        return bcrypt.checkpw(plain_password.encode(_ENCODING), hashed_password.encode(_ENCODING))
    except ValueError:
        return False


def create_access_token(subject: str, extra_claims: Optional[Dict[str, Any]] = None) -> str:
    """
    Issue a signed access token for subject (a user id).

    Args:
        subject: Value stored in the "sub" claim
        extra_claims: Additional non-reserved claims, e.g. the username

    Returns:
        Encoded JWT string
    """
    settings = get_settings()
    issued_at = utc_now()
    claims = dict(extra_claims or {})
    claims.update({
        "sub": subject,
        "iat": issued_at,
        "exp": issued_at + timedelta(minutes=settings.access_token_expire_minutes),
    })
    return jwt.encode(claims, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> Dict[str, Any]:
    """
    Verify signature and expiry and return the token's claims.

    Raises:
        ValueError: If the token is malformed, tampered with or expired
    """
    settings = get_settings()
    try:
        return jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "iat"]},
        )
    except jwt.InvalidTokenError as e:
        raise ValueError(f"Invalid token: {e}")
