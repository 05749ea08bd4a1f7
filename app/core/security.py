# app/core/security.py
from typing import Optional
from datetime import datetime, timedelta, timezone

import bcrypt
from jose import jwt, JWTError
from pydantic import BaseModel, ValidationError as PydanticValidationError

from app.core.config import settings
from app.core.exceptions import InvalidToken

# bcrypt only looks at the first 72 bytes of its input
BCRYPT_MAX_BYTES = 72


class TokenPayload(BaseModel):
    """Claims carried by a session token."""
    userId: str
    email: str
    role: str
    exp: Optional[int] = None
    iat: Optional[int] = None


def password_fits(password: str) -> bool:
    return len(password.encode("utf-8")) <= BCRYPT_MAX_BYTES


def hash_password(password: str, rounds: Optional[int] = None) -> str:
    """
    Hash a password with a fresh bcrypt salt.
    Raises ValueError for passwords over 72 bytes instead of truncating them.
    """
    if not password_fits(password):
        raise ValueError(f"Password longer than {BCRYPT_MAX_BYTES} bytes")
    salt = bcrypt.gensalt(rounds=rounds or settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Verify a password against its hash. A malformed hash or an over-long password never verifies."""
    if not password_fits(password):
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except (ValueError, AttributeError):
        return False


def get_expiry_date(minutes: Optional[int] = None) -> datetime:
    """Calculate a token expiry from now, defaulting to the configured lifetime."""
    if minutes is None:
        minutes = settings.ACCESS_TOKEN_EXPIRE_MINUTES
    return datetime.now(timezone.utc) + timedelta(minutes=minutes)


def create_access_token(user_id: str, email: str, role: str, expires_minutes: Optional[int] = None) -> str:
    """
    Issue a signed session token.
    Claims: userId, email, role, iat, exp
    """
    claims = {
        "userId": user_id,
        "email": email,
        "role": role,
        "iat": datetime.now(timezone.utc),
        "exp": get_expiry_date(expires_minutes),
    }
    return jwt.encode(claims, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> TokenPayload:
    """
    Verify a session token and return its claims.
    Raises InvalidToken on a bad signature, an expired token or missing claims.
    """
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
        return TokenPayload(**payload)
    except (JWTError, PydanticValidationError) as exc:
        raise InvalidToken() from exc
