"""
Catalog Models - Grocery Items
Tables: Items

Items are listed by vendors. Quantity is the stock on hand and is only ever
changed by explicit updates.
"""
from django.core.validators import MinValueValidator
from django.db import models

from apps.core.models import BaseModel
from apps.users.models import User


class Category(models.TextChoices):
    VEGETABLES = 'VEGETABLES', 'Vegetables'
    FRUITS = 'FRUITS', 'Fruits'
    DAIRYPRODUCTS = 'DAIRYPRODUCTS', 'Dairy Products'
    MEAT = 'MEAT', 'Meat'
    GRAINSANDOILS = 'GRAINSANDOILS', 'Grains and Oils'
    SPICESANDSEASONINGS = 'SPICESANDSEASONINGS', 'Spices and Seasonings'
    BAKINGINGREDIENTS = 'BAKINGINGREDIENTS', 'Baking Ingredients'
    CONDIMENTS = 'CONDIMENTS', 'Condiments'
    SNACKS = 'SNACKS', 'Snacks'
    SKINCARE = 'SKINCARE', 'Skincare'


class Item(BaseModel):
    """
    Product listed in the catalog by a vendor.
    """
    name = models.CharField(max_length=50)
    image = models.URLField(max_length=255, blank=True, null=True)
    description = models.CharField(max_length=255)
    mrp_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(0)],
        help_text="Maximum retail price"
    )
    quantity = models.PositiveIntegerField(default=0, help_text="Available stock")
    category = models.CharField(max_length=30, choices=Category.choices)
    vendor = models.ForeignKey(User, on_delete=models.PROTECT, related_name='items')

    class Meta(BaseModel.Meta):
        db_table = 'items'
        verbose_name = 'Item'
        verbose_name_plural = 'Items'

    def __str__(self):
        return f"{self.name} ({self.mrp_price})"
