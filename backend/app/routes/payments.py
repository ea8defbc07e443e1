from fastapi import APIRouter, Depends

from app.middleware.rbac import get_current_identity
from app.schemas.bookings import PaymentIntentRequest, PaymentIntentResponse
from stayvista.service.payment_service import create_payment_intent

payment_router = APIRouter(tags=["Payments"])


@payment_router.post("/create-payment-intent", response_model=PaymentIntentResponse)
async def payment_intent(data: PaymentIntentRequest, identity: dict = Depends(get_current_identity)):
    return await create_payment_intent(data.price)
