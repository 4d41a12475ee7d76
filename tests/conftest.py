"""
Shared fixtures for the Groceteria test suite
"""
from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from apps.catalog.models import Category, Item
from apps.users.models import Role, User


PASSWORD = "Secret@123"


def make_user(email, role=Role.USER, **overrides):
    fields = {
        'first_name': "Asha",
        'last_name': "Verma",
        'email': email,
        'phone_number': "9876543210",
        'district': "Pune",
        'state': "Maharashtra",
        'address': "12 Market Road, Shivaji Nagar",
        'zipcode': "411005",
        'role': role,
    }
    fields.update(overrides)
    user = User(**fields)
    user.set_password(PASSWORD)
    user.save()
    return user


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def vendor(db):
    return make_user("vendor@groceteria.test", role=Role.VENDOR, first_name="Ravi")


@pytest.fixture
def shopper(db):
    return make_user("shopper@groceteria.test")


@pytest.fixture
def item(vendor):
    return Item.objects.create(
        name="Tomato",
        description="Fresh red tomatoes",
        mrp_price=Decimal('30.00'),
        quantity=100,
        category=Category.VEGETABLES,
        vendor=vendor,
    )


@pytest.fixture
def registration_payload():
    return {
        "firstName": "Meera",
        "lastName": "Iyer",
        "email": "meera@groceteria.test",
        "password": PASSWORD,
        "phoneNumber": "9123456780",
        "district": "Chennai",
        "state": "Tamil Nadu",
        "address": "45 Temple Street, Mylapore",
        "zipcode": "600004",
        "role": "USER",
    }
