from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class Party(BaseModel):
    email: EmailStr
    name: Optional[str] = None
    image: Optional[str] = None


class BookingCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    roomId: str
    guest: Party
    host: Optional[Party] = None          # always replaced by the room's host
    price: float = Field(..., gt=0, allow_inf_nan=False)
    transactionId: str = Field(..., min_length=1)
    date: datetime = Field(default_factory=datetime.utcnow)

    # denormalized room details shown in booking tables
    title: Optional[str] = None
    location: Optional[str] = None
    image: Optional[str] = None
    from_: Optional[datetime] = Field(None, alias="from")
    to: Optional[datetime] = None


class BookingOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    roomId: str
    guest: Party
    host: Party
    price: float
    transactionId: str
    date: datetime
    title: Optional[str] = None
    location: Optional[str] = None
    image: Optional[str] = None
    from_: Optional[datetime] = Field(None, alias="from")
    to: Optional[datetime] = None


class PaymentIntentRequest(BaseModel):
    price: float = Field(..., allow_inf_nan=False)


class PaymentIntentResponse(BaseModel):
    clientSecret: str
