"""
Users Models - Accounts
Tables: Users

A user is either a shopper (USER) or a seller (VENDOR). Every other entity
references a user row.
"""
from django.contrib.auth.hashers import check_password, make_password
from django.db import models

from apps.core.models import TimestampedModel


class Role(models.TextChoices):
    USER = 'USER', 'User'
    VENDOR = 'VENDOR', 'Vendor'


class Gender(models.TextChoices):
    MALE = 'MALE', 'Male'
    FEMALE = 'FEMALE', 'Female'
    OTHER = 'OTHER', 'Other'
    PREFER_NOT_TO_SAY = 'PREFER_NOT_TO_SAY', 'Prefer not to say'


class User(TimestampedModel):
    """
    Shopper or vendor account.
    """
    first_name = models.CharField(max_length=50)
    last_name = models.CharField(max_length=50)
    email = models.EmailField(max_length=100, unique=True)
    password = models.CharField(max_length=128, help_text="Salted password hash")
    phone_number = models.CharField(max_length=15)
    district = models.CharField(max_length=50)
    state = models.CharField(max_length=50)
    address = models.CharField(max_length=200)
    zipcode = models.CharField(max_length=10)
    gender = models.CharField(max_length=20, choices=Gender.choices, default=Gender.PREFER_NOT_TO_SAY)
    date_of_birth = models.DateField(blank=True, null=True)
    role = models.CharField(max_length=20, choices=Role.choices, default=Role.USER)
    is_active = models.BooleanField(default=True)

    class Meta(TimestampedModel.Meta):
        db_table = 'users'
        verbose_name = 'User'
        verbose_name_plural = 'Users'

    def __str__(self):
        return f"{self.first_name} {self.last_name} ({self.email})"

    @property
    def is_vendor(self) -> bool:
        return self.role == Role.VENDOR

    def set_password(self, raw_password: str):
        self.password = make_password(raw_password)

    def check_password(self, raw_password: str) -> bool:
        return check_password(raw_password, self.password)
