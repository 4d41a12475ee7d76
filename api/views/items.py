"""
Catalog endpoints

Vendors add and maintain items; shoppers browse by category, price, name,
vendor and availability. Paged endpoints answer with {items, totalItems}.
"""
import logging

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.catalog.services import ItemService
from api.serializers import (
    ItemPageSerializer,
    ItemSerializer,
    PageQuerySerializer,
    PriceRangeQuerySerializer,
    QuantityQuerySerializer,
    SearchQuerySerializer,
    VendorQuerySerializer,
)
from .base import parse_body, parse_decimal, parse_query

logger = logging.getLogger(__name__)


def items_response(items):
    return Response(ItemSerializer(items, many=True).data)


def page_response(page):
    return Response(ItemPageSerializer(page).data)


class ItemListCreateView(APIView):
    """
    List the whole catalog, or add an item on behalf of ?vendorId=.
    """
    permission_classes = [AllowAny]

    def get(self, request):
        return items_response(ItemService().list_items())

    def post(self, request):
        vendor_id = parse_query(request, VendorQuerySerializer)['vendor_id']
        data = parse_body(request, ItemSerializer)
        logger.info(f"Vendor {vendor_id} adding item '{data['name']}'")

        item = ItemService().add(data, vendor_id)
        return Response(ItemSerializer(item).data, status=status.HTTP_201_CREATED)


class ItemDetailView(APIView):
    permission_classes = [AllowAny]

    def get(self, request, item_id):
        return Response(ItemSerializer(ItemService().get_item(item_id)).data)

    def put(self, request, item_id):
        data = parse_body(request, ItemSerializer)
        item = ItemService().update(item_id, data)
        return Response(ItemSerializer(item).data)

    def delete(self, request, item_id):
        ItemService().delete(item_id)
        return Response(status=status.HTTP_200_OK)


class ItemQuantityView(APIView):
    """
    Set the stock quantity of an item.
    """
    permission_classes = [AllowAny]

    def put(self, request, item_id):
        quantity = parse_query(request, QuantityQuerySerializer)['quantity']
        item = ItemService().update_quantity(item_id, quantity)
        return Response(ItemSerializer(item).data)


class ItemPagedView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        params = parse_query(request, PageQuerySerializer)
        return page_response(ItemService().list_items_paged(params['page_no'], params['page_size']))


class ItemsByCategoryView(APIView):
    permission_classes = [AllowAny]

    def get(self, request, category):
        return items_response(ItemService().list_by_category(category))


class ItemsByCategoryPagedView(APIView):
    permission_classes = [AllowAny]

    def get(self, request, category):
        params = parse_query(request, PageQuerySerializer)
        page = ItemService().list_by_category_paged(category, params['page_no'], params['page_size'])
        return page_response(page)


class ItemsByCategoryAndPriceRangeView(APIView):
    """
    Items of one category priced within [minPrice, maxPrice].
    """
    permission_classes = [AllowAny]

    def get(self, request, category):
        params = parse_query(request, PriceRangeQuerySerializer)
        items = ItemService().list_by_category_and_price_range(
            category, params['min_price'], params['max_price']
        )
        return items_response(items)


class ItemsByPriceView(APIView):
    permission_classes = [AllowAny]

    def get(self, request, mrp_price):
        return items_response(ItemService().list_by_price(parse_decimal(mrp_price, 'mrpPrice')))


class ItemSearchView(APIView):
    """
    Case-insensitive name search, paged.
    """
    permission_classes = [AllowAny]

    def get(self, request):
        params = parse_query(request, SearchQuerySerializer)
        page = ItemService().search_by_name(params['keyword'], params['page_no'], params['page_size'])
        return page_response(page)


class ItemsByVendorView(APIView):
    permission_classes = [AllowAny]

    def get(self, request, vendor_id):
        return items_response(ItemService().list_by_vendor(vendor_id))


class ItemsByVendorPagedView(APIView):
    permission_classes = [AllowAny]

    def get(self, request, vendor_id):
        params = parse_query(request, PageQuerySerializer)
        page = ItemService().list_by_vendor_paged(vendor_id, params['page_no'], params['page_size'])
        return page_response(page)


class ItemsByPriceRangeView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        params = parse_query(request, PriceRangeQuerySerializer)
        return items_response(ItemService().list_by_price_range(params['min_price'], params['max_price']))


class AvailableItemsView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        return items_response(ItemService().list_available())


class AvailableItemsPagedView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        params = parse_query(request, PageQuerySerializer)
        return page_response(ItemService().list_available_paged(params['page_no'], params['page_size']))
