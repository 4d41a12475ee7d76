"""
Cart Service - per-user shopping cart

The merge rule: a user has at most one line per item. Adding an item that
is already in the cart adds the requested quantity to the existing line and
refreshes its captured price to the item's current price. The read-check-write
runs in one transaction with the line row locked, the increment is done
in SQL, and a unique constraint on (user, item) turns a lost insert race
into an increment of the winning row.
"""
import logging
from typing import Any, Dict, List, Optional

from django.db import IntegrityError, transaction
from django.db.models import F

from apps.catalog.models import Item
from apps.catalog.services import ItemService
from apps.core.exceptions import BadRequestException
from apps.core.utils import get_or_not_found
from apps.users.models import User
from apps.users.services import UserService
from .models import CartLine

logger = logging.getLogger(__name__)


class CartService:
    """
    Domain operations on CartLines.
    """

    def __init__(self, user_service: UserService = None, item_service: ItemService = None):
        self.user_service = user_service or UserService()
        self.item_service = item_service or ItemService(self.user_service)

    @transaction.atomic
    def add_to_cart(self, user_id: int, item_id: int, quantity: int) -> CartLine:
        if quantity is None or quantity < 1:
            raise BadRequestException("Quantity must be at least 1")

        item = self.item_service.get_item(item_id)
        user = self.user_service.get_user(user_id)

        line = self._locked_line(user, item)
        if line is None:
            try:
                with transaction.atomic():
                    line = CartLine.objects.create(
                        user=user,
                        item=item,
                        quantity=quantity,
                        mrp_price=item.mrp_price,
                    )
                logger.info(f"User {user.id} added item {item.id} x{quantity} to cart (line {line.id})")
                return line
            except IntegrityError:
                # Another request inserted the (user, item) line first; merge into it.
                logger.info(f"Cart line for user {user.id}, item {item.id} created concurrently, merging")
                line = CartLine.objects.select_for_update().get(user=user, item=item)

        return self._merge(line, item, quantity)

    def get_line(self, cart_id: int) -> CartLine:
        return get_or_not_found(CartLine, "Cart", "Id", cart_id)

    def list_lines(self) -> List[CartLine]:
        return list(CartLine.objects.all())

    def list_by_user(self, user_id: int) -> List[CartLine]:
        return list(CartLine.objects.filter(user_id=user_id))

    @transaction.atomic
    def update_line(self, cart_id: int, data: Dict[str, Any]) -> CartLine:
        """
        Replace the quantity and captured price of a line.

        The captured price is kept when the payload omits it.
        """
        line = get_or_not_found(CartLine.objects.select_for_update(), "Cart", "Id", cart_id)
        line.quantity = data['quantity']
        if data.get('mrp_price') is not None:
            line.mrp_price = data['mrp_price']
        line.save(update_fields=['quantity', 'mrp_price'])

        logger.info(f"Replaced cart line {line.id}: quantity={line.quantity}, price={line.mrp_price}")
        return line

    @transaction.atomic
    def update_quantity(self, cart_id: int, quantity: int) -> CartLine:
        line = get_or_not_found(CartLine.objects.select_for_update(), "Cart", "Id", cart_id)
        if quantity is None or quantity < 1:
            raise BadRequestException("Quantity must be at least 1")

        line.quantity = quantity
        line.save(update_fields=['quantity'])
        return line

    def delete_line(self, cart_id: int) -> None:
        line = self.get_line(cart_id)
        line.delete()
        logger.info(f"Deleted cart line {cart_id}")

    def clear(self, user_id: int) -> int:
        deleted, _ = CartLine.objects.filter(user_id=user_id).delete()
        logger.info(f"Cleared {deleted} cart line(s) for user {user_id}")
        return deleted

    def count_lines(self, user_id: int) -> int:
        return CartLine.objects.filter(user_id=user_id).count()

    def _locked_line(self, user: User, item: Item) -> Optional[CartLine]:
        return CartLine.objects.select_for_update().filter(user=user, item=item).first()

    def _merge(self, line: CartLine, item: Item, quantity: int) -> CartLine:
        CartLine.objects.filter(pk=line.pk).update(
            quantity=F('quantity') + quantity,
            mrp_price=item.mrp_price,
        )
        line.refresh_from_db()

        logger.info(f"Merged item {item.id} x{quantity} into cart line {line.id} (now {line.quantity})")
        return line
