"""
API Serializers for Request/Response handling

Wire names are camelCase; ``source`` maps each one onto the snake_case model
attribute so services receive validated_data keyed by model field names.
"""
from django.conf import settings
from django.core.validators import RegexValidator
from rest_framework import serializers

from apps.catalog.models import Category
from apps.users.models import Gender, Role


NAME_VALIDATOR = RegexValidator(r'^[a-zA-Z\s]+$', "Name can only contain letters and spaces")
PHONE_VALIDATOR = RegexValidator(r'^[+]?[0-9]{10,15}$', "Please provide a valid phone number")
ZIPCODE_VALIDATOR = RegexValidator(
    r'^[0-9A-Za-z\s-]+$',
    "Zipcode can only contain letters, numbers, spaces, and hyphens"
)
PASSWORD_VALIDATOR = RegexValidator(
    r'^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[@$!%*?&])[A-Za-z\d@$!%*?&]{8,}$',
    "Password must contain at least one uppercase letter, one lowercase letter, "
    "one digit, and one special character"
)


def price_field(**kwargs):
    return serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, **kwargs)


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------

class UserProfileSerializer(serializers.Serializer):
    """
    Profile fields shared by registration and update requests.
    """
    firstName = serializers.CharField(
        source='first_name', min_length=2, max_length=50, validators=[NAME_VALIDATOR]
    )
    lastName = serializers.CharField(
        source='last_name', min_length=2, max_length=50, validators=[NAME_VALIDATOR]
    )
    phoneNumber = serializers.CharField(source='phone_number', validators=[PHONE_VALIDATOR])
    district = serializers.CharField(min_length=2, max_length=50)
    state = serializers.CharField(min_length=2, max_length=50)
    address = serializers.CharField(min_length=10, max_length=200)
    zipcode = serializers.CharField(min_length=5, max_length=10, validators=[ZIPCODE_VALIDATOR])
    role = serializers.ChoiceField(choices=Role.choices)
    gender = serializers.ChoiceField(choices=Gender.choices, required=False)
    dateOfBirth = serializers.DateField(source='date_of_birth', required=False, allow_null=True)


class UserRegistrationSerializer(UserProfileSerializer):
    """
    Request serializer for registration.
    """
    email = serializers.EmailField(max_length=100)
    password = serializers.CharField(
        write_only=True, min_length=8, max_length=128, validators=[PASSWORD_VALIDATOR]
    )


class UserSerializer(serializers.Serializer):
    """
    Response serializer for a user. Never exposes the credential.
    """
    userId = serializers.IntegerField(source='id', read_only=True)
    firstName = serializers.CharField(source='first_name')
    lastName = serializers.CharField(source='last_name')
    email = serializers.EmailField()
    phoneNumber = serializers.CharField(source='phone_number')
    district = serializers.CharField()
    state = serializers.CharField()
    address = serializers.CharField()
    zipcode = serializers.CharField()
    gender = serializers.CharField()
    dateOfBirth = serializers.DateField(source='date_of_birth', allow_null=True)
    role = serializers.CharField()
    isActive = serializers.BooleanField(source='is_active')
    createdAt = serializers.DateTimeField(source='created_at')
    updatedAt = serializers.DateTimeField(source='updated_at')


class LoginRequestSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)


class EmailRequestSerializer(serializers.Serializer):
    email = serializers.EmailField()


# ---------------------------------------------------------------------------
# Items
# ---------------------------------------------------------------------------

class ItemSerializer(serializers.Serializer):
    """
    Request/response serializer for catalog items.
    """
    itemId = serializers.IntegerField(source='id', read_only=True)
    itemName = serializers.CharField(source='name', max_length=50)
    image = serializers.URLField(max_length=255, required=False, allow_null=True, allow_blank=True)
    description = serializers.CharField(max_length=255)
    mrpPrice = serializers.DecimalField(source='mrp_price', max_digits=10, decimal_places=2, min_value=0)
    quantity = serializers.IntegerField(min_value=0)
    category = serializers.ChoiceField(choices=Category.choices)
    vendorId = serializers.IntegerField(source='vendor_id', read_only=True)


class ItemPageSerializer(serializers.Serializer):
    """
    Response serializer for one page of items.
    """
    items = ItemSerializer(many=True)
    totalItems = serializers.IntegerField(source='total_items')


# ---------------------------------------------------------------------------
# Cart
# ---------------------------------------------------------------------------

class CartSerializer(serializers.Serializer):
    """
    Request/response serializer for cart lines.
    """
    cartId = serializers.IntegerField(source='id', read_only=True)
    quantity = serializers.IntegerField(min_value=1)
    mrpPrice = serializers.DecimalField(
        source='mrp_price', max_digits=10, decimal_places=2, min_value=0, required=False, allow_null=True
    )
    itemId = serializers.IntegerField(source='item_id', read_only=True)
    userId = serializers.IntegerField(source='user_id', read_only=True)


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------

class OrderSerializer(serializers.Serializer):
    """
    Request serializer for order creation and response serializer for orders.

    orderStatus and paymentStatus are accepted but ignored on creation.
    """
    orderId = serializers.IntegerField(source='id', read_only=True)
    totalPrice = price_field(source='total_price')
    orderStatus = serializers.CharField(source='order_status', max_length=20, required=False)
    paymentStatus = serializers.CharField(source='payment_status', max_length=20, required=False)
    orderDate = serializers.DateTimeField(source='order_date', read_only=True)
    userId = serializers.IntegerField(source='user_id', read_only=True)
    itemIds = serializers.ListField(
        source='item_ids',
        child=serializers.IntegerField(min_value=1),
        required=False,
        write_only=True
    )

    def to_representation(self, instance):
        data = super().to_representation(instance)
        data['itemIds'] = [item.id for item in instance.items.all()]
        return data


class OrderUpdateSerializer(serializers.Serializer):
    """
    Request serializer for a full order update.
    """
    totalPrice = price_field(source='total_price')
    orderStatus = serializers.CharField(source='order_status', max_length=20)
    paymentStatus = serializers.CharField(source='payment_status', max_length=20)


# ---------------------------------------------------------------------------
# Payments
# ---------------------------------------------------------------------------

class PaymentSerializer(serializers.Serializer):
    """
    Request/response serializer for payments.

    On creation every amount is copied from the order, so request values
    are only used by the /process endpoint.
    """
    paymentId = serializers.IntegerField(source='id', read_only=True)
    totalPrice = price_field(source='total_price', required=False)
    orderId = serializers.IntegerField(source='order_id', required=False, min_value=1)
    paidDate = serializers.DateField(source='paid_date', read_only=True)
    paidAmount = price_field(source='paid_amount', required=False)
    userId = serializers.IntegerField(source='user_id', required=False, min_value=1)


# ---------------------------------------------------------------------------
# Query parameters
# ---------------------------------------------------------------------------

class PageQuerySerializer(serializers.Serializer):
    pageNo = serializers.IntegerField(
        source='page_no', default=settings.PAGINATION_DEFAULTS['page_no'], min_value=0
    )
    pageSize = serializers.IntegerField(
        source='page_size', default=settings.PAGINATION_DEFAULTS['page_size'], min_value=1
    )


class SearchQuerySerializer(PageQuerySerializer):
    keyword = serializers.CharField(allow_blank=True, trim_whitespace=False)


class VendorQuerySerializer(serializers.Serializer):
    vendorId = serializers.IntegerField(source='vendor_id')


class UserQuerySerializer(serializers.Serializer):
    userId = serializers.IntegerField(source='user_id')


class CartAddQuerySerializer(serializers.Serializer):
    itemId = serializers.IntegerField(source='item_id')
    userId = serializers.IntegerField(source='user_id')


class PaymentCreateQuerySerializer(serializers.Serializer):
    orderId = serializers.IntegerField(source='order_id')
    userId = serializers.IntegerField(source='user_id')


class QuantityQuerySerializer(serializers.Serializer):
    quantity = serializers.IntegerField()


class PriceRangeQuerySerializer(serializers.Serializer):
    minPrice = serializers.DecimalField(source='min_price', max_digits=None, decimal_places=None)
    maxPrice = serializers.DecimalField(source='max_price', max_digits=None, decimal_places=None)


class MinPriceQuerySerializer(serializers.Serializer):
    minPrice = serializers.DecimalField(source='min_price', max_digits=None, decimal_places=None)


class AmountRangeQuerySerializer(serializers.Serializer):
    minAmount = serializers.DecimalField(source='min_amount', max_digits=None, decimal_places=None)
    maxAmount = serializers.DecimalField(source='max_amount', max_digits=None, decimal_places=None)


class AmountQuerySerializer(serializers.Serializer):
    amount = serializers.DecimalField(max_digits=None, decimal_places=None)


class OrderStatusQuerySerializer(serializers.Serializer):
    orderStatus = serializers.CharField(source='order_status', max_length=20)


class PaymentStatusQuerySerializer(serializers.Serializer):
    paymentStatus = serializers.CharField(source='payment_status', max_length=20)

