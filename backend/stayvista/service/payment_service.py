# stayvista/service/payment_service.py
import logging
import math

import stripe
from starlette.concurrency import run_in_threadpool

from stayvista.core.config import settings
from stayvista.core.error_messages import ErrorMessages
from stayvista.core.exceptions import UpstreamFailure, ValidationError

logger = logging.getLogger(__name__)


def to_minor_units(price) -> int:
    try:
        value = float(price)
        if not math.isfinite(value):
            raise ValueError(price)
        cents = round(value * 100)
    except (TypeError, ValueError, OverflowError):
        raise ValidationError(ErrorMessages.INVALID_PRICE, detail=price)
    if cents < 1:
        raise ValidationError(ErrorMessages.INVALID_PRICE, detail=price)
    return cents


async def create_payment_intent(price) -> dict:
    """Ask Stripe for a PaymentIntent and hand back its client secret.

    Whether the charge succeeds is only known to the client; nothing is
    written here. Single attempt, no retry.
    """
    amount = to_minor_units(price)
    try:
        intent = await run_in_threadpool(
            stripe.PaymentIntent.create,
            amount=amount,
            currency=settings.PAYMENT_CURRENCY,
            automatic_payment_methods={"enabled": True},
            api_key=settings.STRIPE_SECRET,
        )
    except stripe.StripeError as e:
        logger.error("Stripe rejected payment intent for %s cents: %s", amount, e)
        raise UpstreamFailure(ErrorMessages.PAYMENT_FAILED)

    return {"clientSecret": intent["client_secret"]}
