"""
Billing module data models.

These models define the developer billing record the module keeps in sync
with Stripe, the transient checkout/event payloads, and the API responses.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class Plan(str, Enum):
    """Entitlement the rest of the application reads."""

    FREE = "free"
    VERIFIED = "verified"


class PlanStatus(str, Enum):
    """
    Plan statuses the reconciler writes itself.

    Stripe subscription statuses outside this set (trialing, incomplete,
    unpaid, ...) are stored verbatim, so records hold plan_status as str.
    """

    ACTIVE = "active"
    PAST_DUE = "past_due"
    CANCELED = "canceled"


class DeveloperBillingRecord(BaseModel):
    """
    The billing subset of a developer row.

    The developers table is owned elsewhere; this module only reads and
    partially updates these fields.
    """

    id: str = Field(..., description="Developer ID")
    billing_customer_id: Optional[str] = Field(
        None,
        description="Stripe customer ID; the join key for reconciliation",
    )
    billing_subscription_id: Optional[str] = Field(
        None,
        description="Stripe subscription ID while a subscription is live",
    )
    plan: Plan = Field(default=Plan.FREE, description="Coarse entitlement gate")
    plan_status: Optional[str] = Field(
        None,
        description="Mirror of the provider's subscription status",
    )
    billing_event_at: Optional[int] = Field(
        None,
        description="Unix time of the last applied event (ordering guard only)",
    )


class BillingRecordUpdate(BaseModel):
    """
    Partial update produced by a lifecycle event.

    Only fields set explicitly are written, so an explicit None clears a
    column while an omitted field leaves it untouched.
    """

    billing_customer_id: Optional[str] = None
    billing_subscription_id: Optional[str] = None
    plan: Optional[Plan] = None
    plan_status: Optional[str] = None

    def changes(self) -> dict[str, Any]:
        """Fields to write, with enums reduced to their values."""
        return self.model_dump(mode="json", exclude_unset=True)


class CheckoutRequest(BaseModel):
    """Request to start a hosted subscription checkout."""

    model_config = ConfigDict(populate_by_name=True)

    customer_id: Optional[str] = Field(
        None,
        alias="customerId",
        description="Existing Stripe customer ID; used as-is when present",
    )
    email: str = Field(..., description="Developer's billing email, passed to Stripe unchecked")
    developer_name: Optional[str] = Field(
        None,
        alias="developerName",
        description="Display name for a new customer (falls back to email)",
    )
    developer_id: Optional[str] = Field(
        None,
        alias="developerId",
        description="Developer ID, passed to Stripe as client_reference_id",
    )


class CheckoutResponse(BaseModel):
    """Checkout redirect plus the resolved customer ID."""

    model_config = ConfigDict(populate_by_name=True)

    url: str = Field(..., description="Checkout URL to redirect the developer to")
    customer_id: str = Field(..., alias="customerId", description="Stripe customer ID")


class CheckoutSession(BaseModel):
    """
    Stripe checkout session info.

    Returned by the provider client when a session is created.
    """

    session_id: str = Field(..., description="Stripe checkout session ID")
    url: str = Field(..., description="Checkout URL to redirect user to")


class EventData(BaseModel):
    """The data envelope of a lifecycle event."""

    object: dict[str, Any] = Field(default_factory=dict, description="Event-specific payload")


class LifecycleEvent(BaseModel):
    """An inbound Stripe webhook event."""

    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = Field(None, description="Stripe event ID")
    type: str = Field(..., description="Event type, e.g. customer.subscription.updated")
    created: Optional[int] = Field(None, description="Unix time Stripe created the event")
    data: EventData = Field(default_factory=EventData)

    @property
    def object(self) -> dict[str, Any]:
        return self.data.object


class ReconcileResult(BaseModel):
    """Outcome of reconciling one event. Logged, never returned to Stripe."""

    event_type: str
    handled: bool = Field(..., description="Whether a transition applied")
    customer_id: Optional[str] = None
    matched: bool = Field(default=False, description="Whether a record was updated")


class WebhookAck(BaseModel):
    """Acknowledgement that stops Stripe redelivery."""

    received: bool = True


class ErrorResponse(BaseModel):
    """Error body returned by the billing endpoints."""

    error: str
