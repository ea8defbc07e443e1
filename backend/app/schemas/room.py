from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, model_validator


class HostInfo(BaseModel):
    email: EmailStr
    name: Optional[str] = None
    image: Optional[str] = None


class RoomCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    location: str
    category: str
    title: str
    price: float = Field(..., gt=0, allow_inf_nan=False)
    guests: int = Field(..., ge=1)
    bathrooms: int = Field(..., ge=0)
    bedrooms: int = Field(..., ge=0)
    description: str = ""
    image: Optional[str] = None                 # already uploaded elsewhere
    from_: datetime = Field(..., alias="from")
    to: datetime

    @model_validator(mode="after")
    def check_window(self):
        if self.to < self.from_:
            raise ValueError("'to' must not be before 'from'")
        return self


class RoomUpdate(BaseModel):
    """Partial update; ``host`` and ``booked`` cannot be changed here."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    location: Optional[str] = None
    category: Optional[str] = None
    title: Optional[str] = None
    price: Optional[float] = Field(None, gt=0, allow_inf_nan=False)
    guests: Optional[int] = Field(None, ge=1)
    bathrooms: Optional[int] = Field(None, ge=0)
    bedrooms: Optional[int] = Field(None, ge=0)
    description: Optional[str] = None
    image: Optional[str] = None
    from_: Optional[datetime] = Field(None, alias="from")
    to: Optional[datetime] = None

    @model_validator(mode="after")
    def check_window(self):
        if self.from_ is not None and self.to is not None and self.to < self.from_:
            raise ValueError("'to' must not be before 'from'")
        return self


class RoomStatusUpdate(BaseModel):
    status: bool


class RoomOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    location: str
    category: str
    title: str
    price: float
    guests: int
    bathrooms: int
    bedrooms: int
    description: str = ""
    image: Optional[str] = None
    from_: datetime = Field(..., alias="from")
    to: datetime
    host: HostInfo
    booked: bool = False
