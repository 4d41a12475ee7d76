"""
Item Service - catalog management for vendors and shoppers

Handles:
- Vendor-only item creation
- Item updates, stock quantity updates and deletion
- Catalog queries by category, price, name, vendor and availability,
  each with a paginated variant where the storefront pages results

Stock is never reserved or decremented by carts or orders; quantity only
changes through update() and update_quantity().
"""
import logging
from decimal import Decimal
from typing import Any, Dict, List

from django.db import transaction

from apps.core.exceptions import BadRequestException, ForbiddenException
from apps.core.utils import PagedResult, get_or_not_found, paginate, truncate_for_display
from apps.users.models import Role, User
from apps.users.services import UserService
from .models import Category, Item

logger = logging.getLogger(__name__)


ITEM_FIELDS = ('name', 'image', 'description', 'mrp_price', 'quantity', 'category')


def parse_category(value: str) -> str:
    """
    Resolve a category name from a path segment (case-insensitive).
    """
    candidate = (value or '').strip().upper()
    if candidate not in Category.values:
        raise BadRequestException(
            f"Invalid category '{value}'. Must be one of: {', '.join(Category.values)}"
        )
    return candidate


class ItemService:
    """
    Domain operations on catalog Items.
    """

    def __init__(self, user_service: UserService = None):
        self.user_service = user_service or UserService()

    def add(self, data: Dict[str, Any], vendor_id: int) -> Item:
        vendor = self.user_service.get_user(vendor_id)
        self._require_vendor(vendor, "add items")

        item = Item(vendor=vendor, **{name: data[name] for name in ITEM_FIELDS if name in data})
        item.save()

        logger.info(f"Vendor {vendor.id} listed item {item.id} '{item.name}'")
        return item

    def get_item(self, item_id: int) -> Item:
        return get_or_not_found(Item.objects.select_related('vendor'), "Item", "Id", item_id)

    def list_items(self) -> List[Item]:
        return list(Item.objects.all())

    def list_items_paged(self, page_no: int, page_size: int) -> PagedResult:
        return paginate(Item.objects.all(), page_no, page_size)

    @transaction.atomic
    def update(self, item_id: int, data: Dict[str, Any]) -> Item:
        item = get_or_not_found(Item.objects.select_for_update(), "Item", "itemId", item_id)
        for name in ITEM_FIELDS:
            if name in data:
                setattr(item, name, data[name])
        item.save()

        logger.info(f"Updated item {item.id}")
        return item

    @transaction.atomic
    def update_quantity(self, item_id: int, quantity: int) -> Item:
        item = get_or_not_found(Item.objects.select_for_update(), "Item", "itemId", item_id)
        if quantity is None or quantity < 0:
            raise BadRequestException("Quantity must be non-negative")

        item.quantity = quantity
        item.save(update_fields=['quantity'])

        logger.info(f"Item {item.id} stock set to {quantity}")
        return item

    def delete(self, item_id: int) -> None:
        item = self.get_item(item_id)
        item.delete()
        logger.info(f"Deleted item {item_id}")

    def list_by_category(self, category: str) -> List[Item]:
        return list(Item.objects.filter(category=parse_category(category)))

    def list_by_category_paged(self, category: str, page_no: int, page_size: int) -> PagedResult:
        return paginate(Item.objects.filter(category=parse_category(category)), page_no, page_size)

    def list_by_price(self, mrp_price: Decimal) -> List[Item]:
        return list(Item.objects.filter(mrp_price=mrp_price))

    def search_by_name(self, keyword: str, page_no: int, page_size: int) -> PagedResult:
        logger.debug(f"Item search '{truncate_for_display(keyword, 50)}' page {page_no} size {page_size}")
        return paginate(Item.objects.filter(name__icontains=keyword or ''), page_no, page_size)

    def list_by_vendor(self, vendor_id: int) -> List[Item]:
        return list(Item.objects.filter(vendor_id=vendor_id))

    def list_by_vendor_paged(self, vendor_id: int, page_no: int, page_size: int) -> PagedResult:
        vendor = self.user_service.get_user(vendor_id)
        return paginate(Item.objects.filter(vendor=vendor), page_no, page_size)

    def list_by_price_range(self, min_price: Decimal, max_price: Decimal) -> List[Item]:
        return list(Item.objects.filter(mrp_price__gte=min_price, mrp_price__lte=max_price))

    def list_by_category_and_price_range(
        self,
        category: str,
        min_price: Decimal,
        max_price: Decimal
    ) -> List[Item]:
        return list(Item.objects.filter(
            category=parse_category(category),
            mrp_price__gte=min_price,
            mrp_price__lte=max_price,
        ))

    def list_available(self) -> List[Item]:
        return list(Item.objects.filter(quantity__gt=0))

    def list_available_paged(self, page_no: int, page_size: int) -> PagedResult:
        return paginate(Item.objects.filter(quantity__gt=0), page_no, page_size)

    def _require_vendor(self, user: User, action: str) -> None:
        if user.is_vendor:
            return
        if user.role == Role.USER:
            raise ForbiddenException(f"Only vendors can {action}")
        raise BadRequestException(f"User {user.id} has an unknown role '{user.role}'")
