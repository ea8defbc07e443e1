# app/utils/auth_utils.py
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from fastapi import Response

from stayvista.core.config import settings

logger = logging.getLogger(__name__)


class TokenError(Exception):
    pass


class InvalidToken(TokenError):
    pass


class TokenExpired(TokenError):
    pass


def create_access_token(identity: dict, expires_delta: Optional[timedelta] = None) -> str:
    if expires_delta is None:
        expires_delta = timedelta(days=settings.TOKEN_EXPIRE_DAYS)
    now = datetime.now(timezone.utc)
    to_encode = {
        "email": identity["email"],
        "role": identity.get("role", "guest"),
        "iat": now,
        "exp": now + expires_delta,
        "type": "access",
    }
    return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_token(token: Optional[str]) -> dict:
    if not token:
        raise InvalidToken("No token provided")
    try:
        decoded = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.ALGORITHM])
    except jwt.ExpiredSignatureError:
        logger.info("Rejected expired token")
        raise TokenExpired("Token has expired")
    except jwt.InvalidTokenError as e:
        logger.info("Rejected invalid token: %s", e)
        raise InvalidToken(str(e))

    if decoded.get("type") != "access" or not decoded.get("email"):
        raise InvalidToken("Invalid token payload")
    return decoded


def _cookie_flags() -> dict:
    if settings.is_production:
        return {"secure": True, "samesite": "none"}
    return {"secure": False, "samesite": "strict"}


def set_token_cookie(response: Response, token: str):
    response.set_cookie(
        settings.TOKEN_COOKIE_NAME,
        token,
        httponly=True,
        max_age=settings.TOKEN_EXPIRE_DAYS * 24 * 60 * 60,
        **_cookie_flags(),
    )


def clear_token_cookie(response: Response):
    response.delete_cookie(settings.TOKEN_COOKIE_NAME, httponly=True, **_cookie_flags())
