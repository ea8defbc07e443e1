import logging

from fastapi import APIRouter, Response

from app.models.user import find_by_email
from app.schemas.user import TokenRequest
from app.utils.auth_utils import clear_token_cookie, create_access_token, set_token_cookie

logger = logging.getLogger(__name__)

auth_router = APIRouter(tags=["Auth"])


# ------------------------
# Issue session token
# ------------------------
@auth_router.post("/jwt")
async def issue_token(data: TokenRequest, response: Response):
    user = await find_by_email(data.email)
    # role claim is informational only; guards re-read the directory
    token = create_access_token({"email": data.email, "role": user["role"] if user else "guest"})
    set_token_cookie(response, token)
    return {"success": True}


# ------------------------
# Logout
# ------------------------
@auth_router.get("/logout")
async def logout(response: Response):
    clear_token_cookie(response)
    logger.info("Logout successful")
    return {"success": True}
