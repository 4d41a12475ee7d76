"""
Cart endpoints

Adding an item the user already has in the cart merges into the existing
line instead of creating a second one.
"""
import logging

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.cart.services import CartService
from api.serializers import CartAddQuerySerializer, CartSerializer, QuantityQuerySerializer
from .base import parse_body, parse_query

logger = logging.getLogger(__name__)


class CartListCreateView(APIView):
    """
    List every cart line, or add ?itemId= to the cart of ?userId=.
    """
    permission_classes = [AllowAny]

    def get(self, request):
        return Response(CartSerializer(CartService().list_lines(), many=True).data)

    def post(self, request):
        params = parse_query(request, CartAddQuerySerializer)
        data = parse_body(request, CartSerializer)
        logger.info(f"User {params['user_id']} adding item {params['item_id']} x{data['quantity']}")

        line = CartService().add_to_cart(params['user_id'], params['item_id'], data['quantity'])
        return Response(CartSerializer(line).data, status=status.HTTP_201_CREATED)


class CartDetailView(APIView):
    permission_classes = [AllowAny]

    def get(self, request, cart_id):
        return Response(CartSerializer(CartService().get_line(cart_id)).data)

    def put(self, request, cart_id):
        data = parse_body(request, CartSerializer)
        line = CartService().update_line(cart_id, data)
        return Response(CartSerializer(line).data)

    def delete(self, request, cart_id):
        CartService().delete_line(cart_id)
        return Response(status=status.HTTP_200_OK)


class CartQuantityView(APIView):
    permission_classes = [AllowAny]

    def put(self, request, cart_id):
        quantity = parse_query(request, QuantityQuerySerializer)['quantity']
        line = CartService().update_quantity(cart_id, quantity)
        return Response(CartSerializer(line).data)


class UserCartView(APIView):
    """
    A user's cart lines; DELETE empties the cart.
    """
    permission_classes = [AllowAny]

    def get(self, request, user_id):
        return Response(CartSerializer(CartService().list_by_user(user_id), many=True).data)

    def delete(self, request, user_id):
        CartService().clear(user_id)
        return Response(status=status.HTTP_200_OK)


class UserCartCountView(APIView):
    permission_classes = [AllowAny]

    def get(self, request, user_id):
        return Response(CartService().count_lines(user_id))
