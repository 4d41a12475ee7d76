"""
Tests for cart lines and the merge-on-add rule
"""
from decimal import Decimal
from unittest import mock

import pytest

from apps.cart.models import CartLine
from apps.cart.services import CartService
from apps.catalog.models import Category, Item

pytestmark = pytest.mark.django_db


def add(api_client, user, item, quantity):
    return api_client.post(
        f'/api/v1/cart?itemId={item.id}&userId={user.id}',
        {"quantity": quantity},
        format='json'
    )


class TestAddToCart:

    def test_first_add_creates_line_at_current_price(self, api_client, shopper, item):
        response = add(api_client, shopper, item, 2)

        assert response.status_code == 201
        body = response.json()
        assert body['quantity'] == 2
        assert body['mrpPrice'] == 30.0
        assert body['itemId'] == item.id
        assert body['userId'] == shopper.id

    def test_repeated_add_merges_into_one_line(self, api_client, shopper, item):
        first = add(api_client, shopper, item, 2).json()
        second = add(api_client, shopper, item, 3).json()

        assert second['cartId'] == first['cartId']
        assert second['quantity'] == 5
        assert CartLine.objects.filter(user=shopper, item=item).count() == 1

    def test_merge_refreshes_price(self, api_client, shopper, item):
        add(api_client, shopper, item, 1)
        item.mrp_price = Decimal('35.50')
        item.save()

        body = add(api_client, shopper, item, 1).json()

        assert body['mrpPrice'] == 35.5

    def test_different_items_get_separate_lines(self, api_client, shopper, item, vendor):
        onion = Item.objects.create(
            name="Onion", description="Red onions", mrp_price=Decimal('25.00'),
            quantity=40, category=Category.VEGETABLES, vendor=vendor
        )

        add(api_client, shopper, item, 1)
        add(api_client, shopper, onion, 1)

        assert api_client.get(f'/api/v1/cart/user/{shopper.id}/count').json() == 2

    def test_concurrent_insert_is_merged(self, shopper, item):
        existing = CartLine.objects.create(user=shopper, item=item, quantity=2, mrp_price=item.mrp_price)
        service = CartService()

        # Simulate a request that checked for the line before a racing insert committed.
        with mock.patch.object(CartService, '_locked_line', return_value=None):
            line = service.add_to_cart(shopper.id, item.id, 3)

        assert line.id == existing.id
        assert line.quantity == 5
        assert CartLine.objects.count() == 1

    def test_zero_quantity_is_rejected(self, api_client, shopper, item):
        response = add(api_client, shopper, item, 0)

        assert response.status_code == 400
        assert not CartLine.objects.exists()

    def test_unknown_item_is_not_found(self, api_client, shopper, item):
        response = api_client.post(f'/api/v1/cart?itemId=999&userId={shopper.id}', {"quantity": 1}, format='json')

        assert response.status_code == 404
        assert response.json()['errors'] == ["Item not found with Id : '999'"]


class TestCartLines:

    def test_update_line_replaces_quantity_and_price(self, api_client, shopper, item):
        line = add(api_client, shopper, item, 2).json()

        response = api_client.put(
            f"/api/v1/cart/{line['cartId']}",
            {"quantity": 7, "mrpPrice": 28.0},
            format='json'
        )

        assert response.status_code == 200
        assert response.json()['quantity'] == 7
        assert response.json()['mrpPrice'] == 28.0

    def test_update_line_keeps_price_when_omitted(self, api_client, shopper, item):
        line = add(api_client, shopper, item, 2).json()

        body = api_client.put(f"/api/v1/cart/{line['cartId']}", {"quantity": 4}, format='json').json()

        assert body['quantity'] == 4
        assert body['mrpPrice'] == 30.0

    def test_update_quantity(self, api_client, shopper, item):
        line = add(api_client, shopper, item, 2).json()

        ok = api_client.put(f"/api/v1/cart/{line['cartId']}/quantity?quantity=9")
        rejected = api_client.put(f"/api/v1/cart/{line['cartId']}/quantity?quantity=0")

        assert ok.json()['quantity'] == 9
        assert rejected.status_code == 400

    def test_count_counts_lines_not_units(self, api_client, shopper, item):
        add(api_client, shopper, item, 4)

        assert api_client.get(f'/api/v1/cart/user/{shopper.id}/count').json() == 1

    def test_clear_cart(self, api_client, shopper, item):
        add(api_client, shopper, item, 4)

        response = api_client.delete(f'/api/v1/cart/user/{shopper.id}')

        assert response.status_code == 200
        assert api_client.get(f'/api/v1/cart/user/{shopper.id}').json() == []

    def test_delete_line(self, api_client, shopper, item):
        line = add(api_client, shopper, item, 1).json()

        assert api_client.delete(f"/api/v1/cart/{line['cartId']}").status_code == 200
        assert api_client.delete(f"/api/v1/cart/{line['cartId']}").status_code == 404

    def test_deleting_item_removes_its_cart_lines(self, api_client, shopper, item):
        add(api_client, shopper, item, 1)

        api_client.delete(f'/api/v1/items/{item.id}')

        assert not CartLine.objects.exists()
