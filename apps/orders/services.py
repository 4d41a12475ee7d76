"""
Order Service - order placement and status tracking

Order creation does not touch the user's cart or item stock; clearing the
cart and adjusting stock are separate calls made by the client.
"""
import logging
from decimal import Decimal
from typing import Any, Dict, List

from django.db import transaction
from django.utils import timezone

from apps.catalog.models import Item
from apps.core.exceptions import ResourceNotFoundException
from apps.core.utils import get_or_not_found
from apps.users.services import UserService
from .models import Order, OrderStatus, PaymentStatus

logger = logging.getLogger(__name__)


class OrderService:
    """
    Domain operations on Orders.
    """

    def __init__(self, user_service: UserService = None):
        self.user_service = user_service or UserService()

    @transaction.atomic
    def create(self, data: Dict[str, Any], user_id: int) -> Order:
        """
        Place an order for a user.

        Any status the caller sent is discarded: new orders are always
        PENDING/PENDING and dated now.
        """
        user = self.user_service.get_user(user_id)
        items = self._resolve_items(data.get('item_ids') or [])

        order = Order.objects.create(
            user=user,
            total_price=data['total_price'],
            order_status=OrderStatus.PENDING,
            payment_status=PaymentStatus.PENDING,
            order_date=timezone.now(),
        )
        if items:
            order.items.set(items)

        logger.info(f"User {user.id} placed order {order.id} for {order.total_price} ({len(items)} item(s))")
        return order

    def get_order(self, order_id: int) -> Order:
        return get_or_not_found(Order.objects.prefetch_related('items'), "Order", "Id", order_id)

    def list_orders(self) -> List[Order]:
        return list(Order.objects.prefetch_related('items'))

    def list_by_user(self, user_id: int) -> List[Order]:
        return list(Order.objects.filter(user_id=user_id).prefetch_related('items'))

    def list_by_status(self, order_status: str) -> List[Order]:
        return list(Order.objects.filter(order_status=order_status).prefetch_related('items'))

    def list_by_payment_status(self, payment_status: str) -> List[Order]:
        return list(Order.objects.filter(payment_status=payment_status).prefetch_related('items'))

    def list_by_user_and_status(self, user_id: int, order_status: str) -> List[Order]:
        user = self.user_service.get_user(user_id)
        return list(Order.objects.filter(user=user, order_status=order_status).prefetch_related('items'))

    def list_by_total_price_greater_than(self, min_price: Decimal) -> List[Order]:
        return list(Order.objects.filter(total_price__gt=min_price).prefetch_related('items'))

    @transaction.atomic
    def update(self, order_id: int, data: Dict[str, Any]) -> Order:
        order = self._locked_order(order_id)
        order.total_price = data['total_price']
        order.order_status = data['order_status']
        order.payment_status = data['payment_status']
        order.save(update_fields=['total_price', 'order_status', 'payment_status'])

        logger.info(f"Updated order {order.id}: {order.order_status}/{order.payment_status}")
        return order

    @transaction.atomic
    def update_status(self, order_id: int, order_status: str) -> Order:
        order = self._locked_order(order_id)
        previous = order.order_status
        order.order_status = order_status
        order.save(update_fields=['order_status'])

        logger.info(f"Order {order.id} status {previous} -> {order_status}")
        return order

    @transaction.atomic
    def update_payment_status(self, order_id: int, payment_status: str) -> Order:
        order = self._locked_order(order_id)
        previous = order.payment_status
        order.payment_status = payment_status
        order.save(update_fields=['payment_status'])

        logger.info(f"Order {order.id} payment status {previous} -> {payment_status}")
        return order

    def delete(self, order_id: int) -> None:
        order = get_or_not_found(Order, "Order", "Id", order_id)
        order.delete()
        logger.info(f"Deleted order {order_id}")

    def _locked_order(self, order_id: int) -> Order:
        return get_or_not_found(Order.objects.select_for_update(), "Order", "Id", order_id)

    def _resolve_items(self, item_ids: List[int]) -> List[Item]:
        unique_ids = list(dict.fromkeys(item_ids))
        items = {item.id: item for item in Item.objects.filter(pk__in=unique_ids)}
        for item_id in unique_ids:
            if item_id not in items:
                raise ResourceNotFoundException("Item", "Id", item_id)
        return [items[item_id] for item_id in unique_ids]
