"""
Cart Models - Shopping Cart
Tables: Carts

One row per (user, item) pair. Adding an item that is already in the cart
increments the existing row instead of inserting a second one.
"""
from django.core.validators import MinValueValidator
from django.db import models

from apps.catalog.models import Item
from apps.core.models import BaseModel
from apps.users.models import User


class CartLine(BaseModel):
    """
    A quantity of one item in one user's cart, with the price captured when added.
    """
    quantity = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    mrp_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(0)],
        help_text="Item price captured when the line was last added to"
    )
    item = models.ForeignKey(Item, on_delete=models.CASCADE, related_name='cart_lines')
    user = models.ForeignKey(User, on_delete=models.PROTECT, related_name='cart_lines')

    class Meta(BaseModel.Meta):
        db_table = 'carts'
        verbose_name = 'Cart line'
        verbose_name_plural = 'Cart lines'
        constraints = [
            models.UniqueConstraint(fields=['user', 'item'], name='unique_cart_line_per_user_item'),
        ]

    def __str__(self):
        return f"Cart {self.id} - user {self.user_id} - {self.quantity} x item {self.item_id}"
