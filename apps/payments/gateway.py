"""
Payment gateway abstraction

Call sites only see PaymentGateway.process(); the concrete backend is chosen
by settings.PAYMENT_GATEWAY so a real provider can replace the simulated one
without touching the services.
"""
import logging
import time
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from django.conf import settings
from django.utils.module_loading import import_string

logger = logging.getLogger(__name__)


@dataclass
class PaymentIntent:
    """What the caller wants charged."""
    amount: Decimal
    order_id: Optional[int] = None
    user_id: Optional[int] = None
    currency: str = "INR"


@dataclass
class PaymentResult:
    """Outcome reported by a gateway."""
    success: bool
    reference: str = field(default_factory=lambda: f"PAY-{uuid.uuid4().hex[:12].upper()}")
    message: str = ""


class PaymentGatewayError(Exception):
    """Raised by a gateway that could not reach a decision."""


class PaymentGateway(ABC):
    """
    Capability: process a payment intent and report success or failure.
    """
    name = "abstract"

    @abstractmethod
    def process(self, intent: PaymentIntent) -> PaymentResult:
        raise NotImplementedError


class SimulatedPaymentGateway(PaymentGateway):
    """
    Placeholder gateway: waits a fixed delay, then approves every intent.
    """
    name = "simulated"

    def __init__(self, delay_seconds: float = 1.0):
        self.delay_seconds = delay_seconds

    def process(self, intent: PaymentIntent) -> PaymentResult:
        logger.info(
            f"Simulated payment processing for order {intent.order_id}: "
            f"{intent.amount} {intent.currency} (no real gateway configured)"
        )
        if self.delay_seconds:
            time.sleep(self.delay_seconds)

        return PaymentResult(success=True, message="Approved by simulated gateway")


def get_payment_gateway() -> PaymentGateway:
    """
    Build the gateway configured in settings.PAYMENT_GATEWAY.
    """
    config = getattr(settings, 'PAYMENT_GATEWAY', {})
    backend = config.get('BACKEND', 'apps.payments.gateway.SimulatedPaymentGateway')
    options = config.get('OPTIONS', {})

    gateway_class = import_string(backend)
    return gateway_class(**options)
