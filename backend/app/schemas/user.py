from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

Role = Literal["guest", "host", "admin"]
Status = Literal["none", "Requested", "Verified"]


class TokenRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    email: EmailStr


class UserUpsert(BaseModel):
    model_config = ConfigDict(extra="ignore")

    email: EmailStr
    name: Optional[str] = None
    photo: Optional[str] = None
    status: Optional[Status] = None


class RoleUpdate(BaseModel):
    role: Role
    status: Status = "Verified"


class UserOut(BaseModel):
    id: str = Field(..., alias="_id")
    email: EmailStr
    name: Optional[str] = None
    photo: Optional[str] = None
    role: Role
    status: Status = "none"
    timestamp: Optional[datetime] = None
