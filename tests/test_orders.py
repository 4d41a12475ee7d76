"""
Tests for order placement, lookups and status transitions
"""
from decimal import Decimal

import pytest

from apps.orders.models import Order, OrderStatus, PaymentStatus
from apps.orders.services import OrderService

pytestmark = pytest.mark.django_db


def place(api_client, user, **payload):
    body = {"totalPrice": 150.0}
    body.update(payload)
    return api_client.post(f'/api/v1/orders?userId={user.id}', body, format='json')


class TestOrderCreation:

    def test_new_order_is_pending_whatever_the_caller_sends(self, api_client, shopper):
        response = place(api_client, shopper, orderStatus="DELIVERED", paymentStatus="PAID")

        assert response.status_code == 201
        body = response.json()
        assert body['orderStatus'] == "PENDING"
        assert body['paymentStatus'] == "PENDING"
        assert body['orderDate'] is not None
        assert body['userId'] == shopper.id

    def test_items_are_attached(self, api_client, shopper, item):
        body = place(api_client, shopper, itemIds=[item.id, item.id]).json()

        assert body['itemIds'] == [item.id]
        assert list(Order.objects.get(pk=body['orderId']).items.all()) == [item]

    def test_unknown_item_is_not_found(self, api_client, shopper, item):
        response = place(api_client, shopper, itemIds=[item.id, 999])

        assert response.status_code == 404
        assert not Order.objects.exists()

    def test_unknown_user_is_not_found(self, api_client, db):
        response = api_client.post('/api/v1/orders?userId=42', {"totalPrice": 10}, format='json')

        assert response.status_code == 404
        assert response.json()['errors'] == ["User not found with Id : '42'"]

    def test_total_is_required(self, api_client, shopper):
        response = api_client.post(f'/api/v1/orders?userId={shopper.id}', {}, format='json')

        assert response.status_code == 400
        assert response.json()['errorCode'] == "VALIDATION_ERROR"


class TestOrderTransitions:

    def test_update_status(self, api_client, shopper):
        order = place(api_client, shopper).json()

        response = api_client.put(f"/api/v1/orders/{order['orderId']}/status?orderStatus=SHIPPED")

        assert response.json()['orderStatus'] == "SHIPPED"
        assert response.json()['paymentStatus'] == "PENDING"

    def test_update_payment_status(self, api_client, shopper):
        order = place(api_client, shopper).json()

        response = api_client.put(f"/api/v1/orders/{order['orderId']}/payment-status?paymentStatus=PAID")

        assert response.json()['paymentStatus'] == "PAID"

    def test_missing_status_parameter_is_bad_request(self, api_client, shopper):
        order = place(api_client, shopper).json()

        response = api_client.put(f"/api/v1/orders/{order['orderId']}/status")

        assert response.status_code == 400

    def test_full_update(self, api_client, shopper):
        order = place(api_client, shopper).json()

        response = api_client.put(
            f"/api/v1/orders/{order['orderId']}",
            {"totalPrice": 99.5, "orderStatus": "CANCELLED", "paymentStatus": "PENDING"},
            format='json'
        )

        assert response.status_code == 200
        assert response.json()['totalPrice'] == 99.5
        assert response.json()['orderStatus'] == "CANCELLED"


class TestOrderQueries:

    @pytest.fixture
    def orders(self, shopper):
        service = OrderService()
        cheap = service.create({'total_price': Decimal('50.00')}, shopper.id)
        dear = service.create({'total_price': Decimal('500.00')}, shopper.id)
        service.update_status(dear.id, OrderStatus.SHIPPED)
        return cheap, dear

    def test_by_status(self, api_client, orders):
        body = api_client.get('/api/v1/orders/status/SHIPPED').json()

        assert [entry['orderId'] for entry in body] == [orders[1].id]

    def test_by_payment_status(self, api_client, orders):
        body = api_client.get(f'/api/v1/orders/payment-status/{PaymentStatus.PENDING}').json()

        assert len(body) == 2

    def test_by_user_and_status(self, api_client, shopper, orders):
        body = api_client.get(f'/api/v1/orders/user/{shopper.id}/status/PENDING').json()

        assert [entry['orderId'] for entry in body] == [orders[0].id]
        assert api_client.get('/api/v1/orders/user/999/status/PENDING').status_code == 404

    def test_price_greater_than_is_strict(self, api_client, orders):
        body = api_client.get('/api/v1/orders/price-greater-than?minPrice=50').json()

        assert [entry['orderId'] for entry in body] == [orders[1].id]

    def test_by_user(self, api_client, shopper, orders):
        assert len(api_client.get(f'/api/v1/orders/user/{shopper.id}').json()) == 2

    def test_delete(self, api_client, orders):
        assert api_client.delete(f'/api/v1/orders/{orders[0].id}').status_code == 200
        assert api_client.get(f'/api/v1/orders/{orders[0].id}').status_code == 404
