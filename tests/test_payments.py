"""
Tests for payment recording and the payment gateway abstraction
"""
from decimal import Decimal
from unittest import mock

import pytest

from apps.orders.models import OrderStatus, PaymentStatus
from apps.orders.services import OrderService
from apps.payments.gateway import (
    PaymentGateway,
    PaymentGatewayError,
    PaymentResult,
    SimulatedPaymentGateway,
    get_payment_gateway,
)
from apps.payments.models import Payment

pytestmark = pytest.mark.django_db


class DecliningGateway(PaymentGateway):
    name = "declining"

    def process(self, intent):
        return PaymentResult(success=False, message="Card declined")


class BrokenGateway(PaymentGateway):
    name = "broken"

    def process(self, intent):
        raise PaymentGatewayError("Gateway timed out")


@pytest.fixture
def order(shopper):
    return OrderService().create({'total_price': Decimal('150.00')}, shopper.id)


def pay(api_client, order, user):
    return api_client.post(f'/api/v1/payments?orderId={order.id}&userId={user.id}', {}, format='json')


class TestRecordPayment:

    def test_approved_payment_confirms_order(self, api_client, shopper, order):
        response = pay(api_client, order, shopper)

        assert response.status_code == 201
        body = response.json()
        assert body['paidAmount'] == 150.0
        assert body['totalPrice'] == 150.0
        assert body['orderId'] == order.id
        assert body['paidDate'] is not None

        order.refresh_from_db()
        assert order.payment_status == PaymentStatus.PAID
        assert order.order_status == OrderStatus.CONFIRMED

    def test_amounts_come_from_the_order(self, api_client, shopper, order):
        response = api_client.post(
            f'/api/v1/payments?orderId={order.id}&userId={shopper.id}',
            {"paidAmount": 1.0, "totalPrice": 1.0},
            format='json'
        )

        assert response.json()['paidAmount'] == 150.0

    def test_second_payment_is_conflict(self, api_client, shopper, order):
        pay(api_client, order, shopper)

        with mock.patch.object(SimulatedPaymentGateway, 'process') as process:
            response = pay(api_client, order, shopper)

        assert response.status_code == 409
        assert response.json()['errorCode'] == "CONFLICT"
        process.assert_not_called()
        assert Payment.objects.count() == 1

    def test_declined_payment_is_recorded_and_order_stays_pending(self, api_client, shopper, order):
        with mock.patch('apps.payments.services.get_payment_gateway', return_value=DecliningGateway()):
            response = pay(api_client, order, shopper)

        assert response.status_code == 201
        order.refresh_from_db()
        assert order.payment_status == PaymentStatus.PENDING
        assert order.order_status == OrderStatus.PENDING

    def test_declined_order_cannot_be_paid_again(self, api_client, shopper, order):
        with mock.patch('apps.payments.services.get_payment_gateway', return_value=DecliningGateway()):
            pay(api_client, order, shopper)

        retry = pay(api_client, order, shopper)

        assert retry.status_code == 409
        assert Payment.objects.filter(order_id=order.id).count() == 1

    def test_gateway_failure_persists_nothing(self, api_client, shopper, order):
        with mock.patch('apps.payments.services.get_payment_gateway', return_value=BrokenGateway()):
            response = pay(api_client, order, shopper)

        assert response.status_code == 500
        body = response.json()
        assert body['errorCode'] == "PAYMENT_ERROR"
        assert body['message'] == "Payment processing failed"
        assert body['errors'] == ["Gateway timed out"]
        assert not Payment.objects.exists()
        order.refresh_from_db()
        assert order.payment_status == PaymentStatus.PENDING

    def test_unknown_order_is_not_found(self, api_client, shopper):
        response = api_client.post(f'/api/v1/payments?orderId=77&userId={shopper.id}', {}, format='json')

        assert response.status_code == 404
        assert response.json()['errors'] == ["Order not found with orderId : '77'"]

    def test_unknown_user_is_not_found(self, api_client, order):
        response = api_client.post(f'/api/v1/payments?orderId={order.id}&userId=999', {}, format='json')

        assert response.status_code == 404


class TestPaymentQueries:

    @pytest.fixture
    def payment(self, api_client, shopper, order):
        return pay(api_client, order, shopper).json()

    def test_by_order(self, api_client, order, payment):
        body = api_client.get(f'/api/v1/payments/order/{order.id}').json()

        assert body['paymentId'] == payment['paymentId']

    def test_by_order_without_payment_is_not_found(self, api_client, db):
        response = api_client.get('/api/v1/payments/order/5')

        assert response.status_code == 404
        assert response.json()['errors'] == ["Payment not found with orderId : '5'"]

    def test_by_user(self, api_client, shopper, payment):
        assert len(api_client.get(f'/api/v1/payments/user/{shopper.id}').json()) == 1

    def test_amount_range_is_inclusive(self, api_client, payment):
        assert len(api_client.get('/api/v1/payments/amount-range?minAmount=150&maxAmount=200').json()) == 1
        assert api_client.get('/api/v1/payments/amount-range?minAmount=151&maxAmount=200').json() == []

    def test_amount_greater_than_is_strict(self, api_client, payment):
        assert api_client.get('/api/v1/payments/amount-greater-than?amount=150').json() == []
        assert len(api_client.get('/api/v1/payments/amount-greater-than?amount=149.99').json()) == 1

    def test_delete(self, api_client, payment):
        payment_id = payment['paymentId']

        assert api_client.delete(f'/api/v1/payments/{payment_id}').status_code == 200
        assert api_client.get(f'/api/v1/payments/{payment_id}').status_code == 404


class TestGateway:

    def test_process_endpoint_returns_boolean(self, api_client, db):
        response = api_client.post('/api/v1/payments/process', {"paidAmount": 10.0}, format='json')

        assert response.status_code == 200
        assert response.json() is True

    def test_process_endpoint_reports_decline(self, api_client, db):
        with mock.patch('apps.payments.services.get_payment_gateway', return_value=DecliningGateway()):
            response = api_client.post('/api/v1/payments/process', {"paidAmount": 10.0}, format='json')

        assert response.json() is False

    def test_gateway_is_built_from_settings(self, settings):
        settings.PAYMENT_GATEWAY = {
            'BACKEND': 'apps.payments.gateway.SimulatedPaymentGateway',
            'OPTIONS': {'delay_seconds': 0.25},
        }

        gateway = get_payment_gateway()

        assert isinstance(gateway, SimulatedPaymentGateway)
        assert gateway.delay_seconds == 0.25

    def test_simulated_gateway_waits_then_approves(self):
        gateway = SimulatedPaymentGateway(delay_seconds=1.0)

        with mock.patch('apps.payments.gateway.time.sleep') as sleep:
            result = gateway.process(mock.Mock(amount=Decimal('10'), order_id=1, currency="INR"))

        sleep.assert_called_once_with(1.0)
        assert result.success is True
        assert result.reference.startswith("PAY-")
