import logging
from typing import List

from fastapi import APIRouter, Depends

from app.middleware.rbac import get_current_admin
from app.models import user as user_model
from app.schemas.user import RoleUpdate, UserOut, UserUpsert
from stayvista.core.policy import ensure_not_self

logger = logging.getLogger(__name__)

user_router = APIRouter(tags=["Users"])


@user_router.put("/user", response_model=UserOut)
async def save_user(data: UserUpsert):
    return await user_model.upsert_user(data.model_dump(exclude_none=True))


@user_router.get("/users", response_model=List[UserOut])
async def get_users(admin: dict = Depends(get_current_admin)):
    return await user_model.list_users()


@user_router.get("/user/{email}", response_model=UserOut)
async def get_user(email: str):
    return await user_model.get_user(email)


@user_router.patch("/users/update/{email}", response_model=UserOut)
async def update_user_role(email: str, data: RoleUpdate, admin: dict = Depends(get_current_admin)):
    ensure_not_self(admin["email"], email)
    user = await user_model.update_role(email, data.role, data.status)
    logger.info("%s set role of %s to %s (%s)", admin["email"], email, data.role, data.status)
    return user
