"""
Billing module.

Keeps each developer's plan in sync with their Stripe subscription.

Public API:
- ICheckoutService / CheckoutService: start a hosted subscription checkout
- IEventReconciler / EventReconciler: apply Stripe webhook events
- IBillingProvider, IDeveloperBillingRepository: collaborator boundaries
- Billing models and exceptions
"""

from .interfaces import (
    IBillingProvider,
    ICheckoutService,
    IDeveloperBillingRepository,
    IEventReconciler,
)
from .models import (
    Plan,
    PlanStatus,
    DeveloperBillingRecord,
    BillingRecordUpdate,
    CheckoutRequest,
    CheckoutResponse,
    CheckoutSession,
    LifecycleEvent,
    ReconcileResult,
)
from .exceptions import (
    BillingNotConfiguredError,
    PaymentProviderError,
    WebhookVerificationError,
    InvalidWebhookPayloadError,
)
from .transitions import EventType
from .checkout import CheckoutService
from .reconciler import EventReconciler

__all__ = [
    # Interfaces
    "IBillingProvider",
    "ICheckoutService",
    "IDeveloperBillingRepository",
    "IEventReconciler",
    # Services
    "CheckoutService",
    "EventReconciler",
    # Models
    "Plan",
    "PlanStatus",
    "DeveloperBillingRecord",
    "BillingRecordUpdate",
    "CheckoutRequest",
    "CheckoutResponse",
    "CheckoutSession",
    "LifecycleEvent",
    "ReconcileResult",
    "EventType",
    # Exceptions
    "BillingNotConfiguredError",
    "PaymentProviderError",
    "WebhookVerificationError",
    "InvalidWebhookPayloadError",
]
