"""
Orders Models - Checkout
Tables: Orders, OrderItems (join table)

Order and payment statuses are stored as free-form strings; the values the
system itself writes are listed in OrderStatus and PaymentStatus.
"""
from django.core.validators import MinValueValidator
from django.db import models

from apps.catalog.models import Item
from apps.core.models import BaseModel
from apps.users.models import User


class OrderStatus:
    PENDING = 'PENDING'
    CONFIRMED = 'CONFIRMED'
    SHIPPED = 'SHIPPED'
    DELIVERED = 'DELIVERED'
    CANCELLED = 'CANCELLED'


class PaymentStatus:
    PENDING = 'PENDING'
    PAID = 'PAID'


class Order(BaseModel):
    """
    A user's order. Created PENDING/PENDING and confirmed by a payment.
    """
    total_price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(0)]
    )
    order_status = models.CharField(max_length=20, default=OrderStatus.PENDING)
    payment_status = models.CharField(max_length=20, default=PaymentStatus.PENDING)
    order_date = models.DateTimeField()
    user = models.ForeignKey(User, on_delete=models.PROTECT, related_name='orders')
    items = models.ManyToManyField(Item, related_name='orders', db_table='order_items', blank=True)

    class Meta(BaseModel.Meta):
        db_table = 'orders'
        verbose_name = 'Order'
        verbose_name_plural = 'Orders'

    def __str__(self):
        return f"Order {self.id} - user {self.user_id} - {self.order_status}/{self.payment_status}"
