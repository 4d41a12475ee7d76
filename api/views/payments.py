"""
Payment endpoints

POST /payments records a payment for an order and moves the order to
PAID/CONFIRMED when the gateway approves it. POST /payments/process only
asks the gateway and records nothing.
"""
import logging

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.payments.services import PaymentService
from api.serializers import (
    AmountQuerySerializer,
    AmountRangeQuerySerializer,
    PaymentCreateQuerySerializer,
    PaymentSerializer,
)
from .base import parse_body, parse_query

logger = logging.getLogger(__name__)


def payments_response(payments):
    return Response(PaymentSerializer(payments, many=True).data)


class PaymentListCreateView(APIView):
    """
    List payments, or pay ?orderId= on behalf of ?userId=.

    Amounts are always copied from the order; body values are validated but
    not used.
    """
    permission_classes = [AllowAny]

    def get(self, request):
        return payments_response(PaymentService().list_payments())

    def post(self, request):
        params = parse_query(request, PaymentCreateQuerySerializer)
        parse_body(request, PaymentSerializer)
        logger.info(f"Payment request for order {params['order_id']} by user {params['user_id']}")

        payment = PaymentService().record_payment(params['order_id'], params['user_id'])
        return Response(PaymentSerializer(payment).data, status=status.HTTP_201_CREATED)


class PaymentDetailView(APIView):
    permission_classes = [AllowAny]

    def get(self, request, payment_id):
        return Response(PaymentSerializer(PaymentService().get_payment(payment_id)).data)

    def delete(self, request, payment_id):
        PaymentService().delete(payment_id)
        return Response(status=status.HTTP_200_OK)


class PaymentsByUserView(APIView):
    permission_classes = [AllowAny]

    def get(self, request, user_id):
        return payments_response(PaymentService().list_by_user(user_id))


class PaymentByOrderView(APIView):
    permission_classes = [AllowAny]

    def get(self, request, order_id):
        return Response(PaymentSerializer(PaymentService().get_by_order(order_id)).data)


class PaymentsByAmountRangeView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        params = parse_query(request, AmountRangeQuerySerializer)
        return payments_response(
            PaymentService().list_by_amount_range(params['min_amount'], params['max_amount'])
        )


class PaymentsByAmountGreaterThanView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        amount = parse_query(request, AmountQuerySerializer)['amount']
        return payments_response(PaymentService().list_by_amount_greater_than(amount))


class ProcessPaymentView(APIView):
    """
    Run a payment through the gateway and answer true/false.
    """
    permission_classes = [AllowAny]

    def post(self, request):
        data = parse_body(request, PaymentSerializer)
        return Response(PaymentService().process_payment(data))
