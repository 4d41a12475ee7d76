"""
Payments Models - Payment Records
Tables: Payments
Dependency: Links to Orders via order_id (one payment per order)
"""
from django.core.validators import MinValueValidator
from django.db import models

from apps.core.models import BaseModel
from apps.users.models import User


class Payment(BaseModel):
    """
    Record of a payment made against an order.
    """
    total_price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(0)],
        help_text="Order total at the time of payment"
    )
    # Plain column rather than a foreign key so the record outlives the order
    order_id = models.BigIntegerField(unique=True, help_text="Reference to Order")
    paid_date = models.DateField()
    paid_amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(0)]
    )
    user = models.ForeignKey(User, on_delete=models.PROTECT, related_name='payments')

    class Meta(BaseModel.Meta):
        db_table = 'payments'
        verbose_name = 'Payment'
        verbose_name_plural = 'Payments'

    def __str__(self):
        return f"Payment {self.id} - order {self.order_id} - {self.paid_amount}"
