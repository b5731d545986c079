"""
Stripe event type to billing record transition table.

Each transition is a pure function of the event object and returns the
partial update to apply, or None when the event implies no change. Every
update sets fields to absolute values, so applying one twice leaves the
record as applying it once.
"""

from enum import Enum
from typing import Any, Callable, Optional

from .models import BillingRecordUpdate, Plan, PlanStatus


class EventType(str, Enum):
    """Event types that change a developer's billing record."""

    CHECKOUT_SESSION_COMPLETED = "checkout.session.completed"
    SUBSCRIPTION_UPDATED = "customer.subscription.updated"
    SUBSCRIPTION_DELETED = "customer.subscription.deleted"
    INVOICE_PAYMENT_FAILED = "invoice.payment_failed"

    @classmethod
    def parse(cls, value: str) -> Optional["EventType"]:
        """Return the matching member, or None for types we ignore."""
        try:
            return cls(value)
        except ValueError:
            return None


Transition = Callable[[dict[str, Any]], Optional[BillingRecordUpdate]]


def checkout_session_completed(session: dict[str, Any]) -> Optional[BillingRecordUpdate]:
    # One-off payment sessions don't touch the plan
    if session.get("mode") != "subscription":
        return None
    return BillingRecordUpdate(
        billing_customer_id=session.get("customer"),
        billing_subscription_id=session.get("subscription"),
        plan=Plan.VERIFIED,
        plan_status=PlanStatus.ACTIVE.value,
    )


def subscription_updated(subscription: dict[str, Any]) -> Optional[BillingRecordUpdate]:
    status = subscription.get("status")
    changes: dict[str, Any] = {
        "plan": Plan.VERIFIED if status == PlanStatus.ACTIVE.value else Plan.FREE,
    }
    # No status means plan_status is left as stored
    if status is not None:
        changes["plan_status"] = status
    return BillingRecordUpdate(**changes)


def subscription_deleted(subscription: dict[str, Any]) -> Optional[BillingRecordUpdate]:
    return BillingRecordUpdate(
        plan=Plan.FREE,
        plan_status=PlanStatus.CANCELED.value,
        billing_subscription_id=None,
    )


def invoice_payment_failed(invoice: dict[str, Any]) -> Optional[BillingRecordUpdate]:
    return BillingRecordUpdate(plan_status=PlanStatus.PAST_DUE.value)


TRANSITIONS: dict[EventType, Transition] = {
    EventType.CHECKOUT_SESSION_COMPLETED: checkout_session_completed,
    EventType.SUBSCRIPTION_UPDATED: subscription_updated,
    EventType.SUBSCRIPTION_DELETED: subscription_deleted,
    EventType.INVOICE_PAYMENT_FAILED: invoice_payment_failed,
}


def transition_for(event_type: str, event_object: dict[str, Any]) -> Optional[BillingRecordUpdate]:
    """
    Compute the update an event implies.

    Args:
        event_type: Raw Stripe event type
        event_object: The event's data.object

    Returns:
        The partial update, or None for ignored types and failed preconditions
    """
    kind = EventType.parse(event_type)
    if kind is None:
        return None
    return TRANSITIONS[kind](event_object)
