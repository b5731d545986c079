"""
Billing API endpoints.

Two POST-only endpoints:
- /create-checkout: start a hosted Stripe checkout for the verified plan
- /stripe-webhook: receive Stripe lifecycle events

Both report failures as {"error": "<message>"}.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Header, Request
from fastapi.responses import JSONResponse

from api.dependencies import get_checkout_service, get_event_reconciler
from shared.exceptions import ConfigurationError, ExternalServiceError

from .exceptions import InvalidWebhookPayloadError, WebhookVerificationError
from .interfaces import ICheckoutService, IEventReconciler
from .models import CheckoutRequest, CheckoutResponse, ErrorResponse, WebhookAck

logger = logging.getLogger(__name__)

router = APIRouter()


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


@router.post(
    "/create-checkout",
    response_model=CheckoutResponse,
    responses={500: {"model": ErrorResponse}},
)
async def create_checkout(
    request: CheckoutRequest,
    service: ICheckoutService = Depends(get_checkout_service),
):
    """
    Create a Stripe checkout session for the verified plan.

    Creates the Stripe customer first unless customerId is supplied.
    Returns the checkout URL and the customer ID so the caller can store it.
    Missing Stripe configuration and Stripe failures both return 500.
    """
    try:
        return await service.create_checkout(request)
    except (ConfigurationError, ExternalServiceError) as e:
        return _error(500, e.message)


@router.post(
    "/stripe-webhook",
    response_model=WebhookAck,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def stripe_webhook(
    request: Request,
    stripe_signature: Optional[str] = Header(None),
    reconciler: IEventReconciler = Depends(get_event_reconciler),
):
    """
    Receive a Stripe webhook event.

    Acknowledges every authentic, well-formed event with {"received": true},
    including ignored types and updates that matched no developer, so Stripe
    stops redelivering. Only an exception while updating the developer
    record returns 500, which lets Stripe retry.
    """
    payload = await request.body()

    try:
        event = reconciler.construct_event(payload, stripe_signature)
    except (WebhookVerificationError, InvalidWebhookPayloadError) as e:
        return _error(400, e.message)

    try:
        result = await reconciler.reconcile(event)
    except ConfigurationError:
        # Reported by the app-level handler
        raise
    except Exception as e:
        logger.exception(f"Webhook error processing {event.type} event {event.id}")
        return _error(500, str(e))

    logger.debug(f"Webhook result: {result.model_dump()}")
    return WebhookAck()
