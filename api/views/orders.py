"""
Order endpoints: placement, lookups and status transitions
"""
import logging

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.orders.services import OrderService
from api.serializers import (
    MinPriceQuerySerializer,
    OrderSerializer,
    OrderStatusQuerySerializer,
    OrderUpdateSerializer,
    PaymentStatusQuerySerializer,
    UserQuerySerializer,
)
from .base import parse_body, parse_query

logger = logging.getLogger(__name__)


def orders_response(orders):
    return Response(OrderSerializer(orders, many=True).data)


class OrderListCreateView(APIView):
    """
    List all orders, or place one for ?userId=.

    New orders always start PENDING/PENDING whatever statuses the body carries.
    """
    permission_classes = [AllowAny]

    def get(self, request):
        return orders_response(OrderService().list_orders())

    def post(self, request):
        user_id = parse_query(request, UserQuerySerializer)['user_id']
        data = parse_body(request, OrderSerializer)
        logger.info(f"User {user_id} placing order for {data['total_price']}")

        order = OrderService().create(data, user_id)
        return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)


class OrderDetailView(APIView):
    permission_classes = [AllowAny]

    def get(self, request, order_id):
        return Response(OrderSerializer(OrderService().get_order(order_id)).data)

    def put(self, request, order_id):
        data = parse_body(request, OrderUpdateSerializer)
        order = OrderService().update(order_id, data)
        return Response(OrderSerializer(order).data)

    def delete(self, request, order_id):
        OrderService().delete(order_id)
        return Response(status=status.HTTP_200_OK)


class OrdersByUserView(APIView):
    permission_classes = [AllowAny]

    def get(self, request, user_id):
        return orders_response(OrderService().list_by_user(user_id))


class OrdersByStatusView(APIView):
    permission_classes = [AllowAny]

    def get(self, request, order_status):
        return orders_response(OrderService().list_by_status(order_status))


class OrdersByPaymentStatusView(APIView):
    permission_classes = [AllowAny]

    def get(self, request, payment_status):
        return orders_response(OrderService().list_by_payment_status(payment_status))


class OrdersByUserAndStatusView(APIView):
    permission_classes = [AllowAny]

    def get(self, request, user_id, order_status):
        return orders_response(OrderService().list_by_user_and_status(user_id, order_status))


class OrderStatusView(APIView):
    """
    Move an order to the status given in ?orderStatus=.
    """
    permission_classes = [AllowAny]

    def put(self, request, order_id):
        order_status = parse_query(request, OrderStatusQuerySerializer)['order_status']
        order = OrderService().update_status(order_id, order_status)
        return Response(OrderSerializer(order).data)


class OrderPaymentStatusView(APIView):
    """
    Move an order to the payment status given in ?paymentStatus=.
    """
    permission_classes = [AllowAny]

    def put(self, request, order_id):
        payment_status = parse_query(request, PaymentStatusQuerySerializer)['payment_status']
        order = OrderService().update_payment_status(order_id, payment_status)
        return Response(OrderSerializer(order).data)


class OrdersByMinPriceView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        min_price = parse_query(request, MinPriceQuerySerializer)['min_price']
        return orders_response(OrderService().list_by_total_price_greater_than(min_price))
