# app/middleware/rbac.py
import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import APIKeyCookie, HTTPAuthorizationCredentials, HTTPBearer

from app.models.user import find_by_email
from app.utils.auth_utils import TokenError, TokenExpired, decode_token
from stayvista.core.config import settings
from stayvista.core.error_messages import ErrorMessages
from stayvista.core.exceptions import Forbidden, Unauthorized

logger = logging.getLogger(__name__)

cookie_scheme = APIKeyCookie(name=settings.TOKEN_COOKIE_NAME, auto_error=False)
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_identity(
    cookie_token: Optional[str] = Depends(cookie_scheme),
    bearer: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> dict:
    """Verify the session token.

    The cookie is tried first; when it is missing or does not verify, an
    Authorization bearer token is tried. The first failure decides the 401
    message when neither verifies.
    """
    candidates = [t for t in (cookie_token, bearer.credentials if bearer else None) if t]
    first_error = None
    for token in candidates:
        try:
            return decode_token(token)
        except TokenError as e:
            first_error = first_error or e

    if isinstance(first_error, TokenExpired):
        raise Unauthorized(ErrorMessages.TOKEN_EXPIRED)
    raise Unauthorized(ErrorMessages.UNAUTHORIZED)


def require_role(*roles: str):
    """Build a dependency that checks the directory role of the caller.

    The role claim inside the token is ignored; the stored user record is the
    authority, so a demoted user loses access on the next request.
    """

    async def checker(identity: dict = Depends(get_current_identity)) -> dict:
        user = await find_by_email(identity["email"])
        if not user or user.get("role") not in roles:
            logger.info("Denied %s (role=%s), needs %s",
                        identity["email"], user.get("role") if user else None, roles)
            raise Forbidden(ErrorMessages.FORBIDDEN)
        return user

    return checker


get_current_admin = require_role("admin")
get_current_host = require_role("host")
get_current_host_or_admin = require_role("host", "admin")


async def get_current_user(identity: dict = Depends(get_current_identity)) -> dict:
    """Authenticated caller's directory record, or the bare token identity if
    they never stored one."""
    user = await find_by_email(identity["email"])
    return user or {"email": identity["email"], "role": None}
