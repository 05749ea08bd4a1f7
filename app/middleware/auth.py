# app/middleware/auth.py
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.exceptions import MissingCredentials, UnknownUser, InvalidToken
from app.core.logging import logger
from app.core.permissions import AuthContext, ensure_admin
from app.core.security import decode_access_token
from app.db.session import get_db
from app.models.user import User

TOKEN_COOKIE_NAME = "token"

BEARER_SCHEME = HTTPBearer(auto_error=False)


def get_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(BEARER_SCHEME),
) -> str:
    """
    Extract the session token from the request.
    The Authorization header takes precedence over the cookie.
    """
    if credentials and credentials.credentials:
        return credentials.credentials

    cookie_token = request.cookies.get(TOKEN_COOKIE_NAME)
    if cookie_token:
        return cookie_token

    logger.warning(f"Access token missing: {request.method} {request.url.path}")
    raise MissingCredentials()


def get_current_user(
    token: str = Depends(get_token), db: Session = Depends(get_db)
) -> AuthContext:
    """
    Resolve the caller from the session token.
    Role and team come from the stored user, not the token claims, since both
    can change after the token was issued.
    """
    try:
        claims = decode_access_token(token)
    except InvalidToken:
        logger.warning("Invalid access token presented")
        raise

    user = db.query(User).filter(User.id == claims.userId).first()

    if not user:
        logger.warning(f"Token references missing user: {claims.userId}")
        raise UnknownUser()

    return AuthContext.from_user(user)


def require_admin(current_user: AuthContext = Depends(get_current_user)) -> AuthContext:
    """
    Same as get_current_user, but only lets team admins through
    """
    ensure_admin(current_user)
    return current_user
