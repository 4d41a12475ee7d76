"""
Payment Service - payment records against orders

Recording a payment copies the order total, asks the configured gateway to
process it and then, in one transaction, moves the order to PAID/CONFIRMED
(or back to PENDING/PENDING when declined) and stores the payment row.
An order accepts one payment: duplicates are rejected before the gateway is
called, and the unique order_id column rejects any that race past the check.
"""
import logging
from decimal import Decimal
from typing import Any, Dict, List

from django.db import IntegrityError, transaction
from django.utils import timezone

from apps.core.exceptions import ConflictException, PaymentProcessingException
from apps.core.utils import get_or_not_found
from apps.orders.models import Order, OrderStatus, PaymentStatus
from apps.users.services import UserService
from .gateway import PaymentGateway, PaymentGatewayError, PaymentIntent, get_payment_gateway
from .models import Payment

logger = logging.getLogger(__name__)


class PaymentService:
    """
    Domain operations on Payments.
    """

    def __init__(self, user_service: UserService = None, gateway: PaymentGateway = None):
        self.user_service = user_service or UserService()
        self.gateway = gateway or get_payment_gateway()

    def record_payment(self, order_id: int, user_id: int) -> Payment:
        """
        Pay an order in full and record the payment.

        A declined payment is recorded too and leaves the order PENDING/PENDING.
        That record counts as the order's one payment, so a decline is final:
        any later attempt for the same order is rejected as a conflict.
        """
        order =get_or_not_found(Order, "Order", "orderId", order_id)
        user = self.user_service.get_user(user_id)

        if Payment.objects.filter(order_id=order.id).exists():
            raise ConflictException(f"Order {order.id} has already been paid")

        intent = PaymentIntent(amount=order.total_price, order_id=order.id, user_id=user.id)
        result = self._process(intent)

        with transaction.atomic():
            order = Order.objects.select_for_update().get(pk=order.id)
            if result.success:
                order.payment_status = PaymentStatus.PAID
                order.order_status = OrderStatus.CONFIRMED
            else:
                order.payment_status = PaymentStatus.PENDING
                order.order_status = OrderStatus.PENDING
            order.save(update_fields=['payment_status', 'order_status'])

            try:
                with transaction.atomic():
                    payment = Payment.objects.create(
                        order_id=order.id,
                        user=user,
                        total_price=order.total_price,
                        paid_amount=order.total_price,
                        paid_date=timezone.localdate(),
                    )
            except IntegrityError:
                raise ConflictException(f"Order {order.id} has already been paid")

        logger.info(
            f"Recorded payment {payment.id} for order {order.id} "
            f"({payment.paid_amount}, ref {result.reference}): "
            f"order now {order.order_status}/{order.payment_status}"
        )
        return payment

    def process_payment(self, data: Dict[str, Any]) -> bool:
        """
        Run an intent through the gateway without recording anything.
        """
        amount = data.get('paid_amount')
        if amount is None:
            amount = data.get('total_price') or Decimal('0')

        intent = PaymentIntent(
            amount=amount,
            order_id=data.get('order_id'),
            user_id=data.get('user_id'),
        )
        return self._process(intent).success

    def get_payment(self, payment_id: int) -> Payment:
        return get_or_not_found(Payment, "Payment", "Id", payment_id)

    def get_by_order(self, order_id: int) -> Payment:
        return get_or_not_found(Payment, "Payment", "orderId", order_id, order_id=order_id)

    def list_payments(self) -> List[Payment]:
        return list(Payment.objects.all())

    def list_by_user(self, user_id: int) -> List[Payment]:
        return list(Payment.objects.filter(user_id=user_id))

    def list_by_amount_range(self, min_amount: Decimal, max_amount: Decimal) -> List[Payment]:
        return list(Payment.objects.filter(paid_amount__gte=min_amount, paid_amount__lte=max_amount))

    def list_by_amount_greater_than(self, amount: Decimal) -> List[Payment]:
        return list(Payment.objects.filter(paid_amount__gt=amount))

    def delete(self, payment_id: int) -> None:
        payment = self.get_payment(payment_id)
        payment.delete()
        logger.info(f"Deleted payment {payment_id}")

    def _process(self, intent: PaymentIntent):
        try:
            result = self.gateway.process(intent)
        except PaymentGatewayError as e:
            logger.error(f"Payment gateway '{self.gateway.name}' failed for order {intent.order_id}: {e}")
            raise PaymentProcessingException(str(e), gateway=self.gateway.name)

        if not result.success:
            logger.warning(f"Payment for order {intent.order_id} declined: {result.message}")
        return result
