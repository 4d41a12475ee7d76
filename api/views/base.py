"""
Helpers shared by the API views
"""
from rest_framework import serializers

from apps.core.exceptions import BadRequestException
from api.exceptions import flatten_errors


def parse_query(request, serializer_class):
    """
    Validate query-string parameters and return them keyed by model field name.

    Missing or malformed parameters are a bad request, not a field validation
    failure, because they are part of the URL rather than the body.
    """
    serializer = serializer_class(data=request.query_params)
    if not serializer.is_valid():
        raise BadRequestException(
            "Invalid request parameters",
            errors=flatten_errors(serializer.errors)
        )
    return serializer.validated_data


def parse_body(request, serializer_class):
    serializer = serializer_class(data=request.data)
    serializer.is_valid(raise_exception=True)
    return serializer.validated_data


def parse_decimal(value, name):
    """
    Convert a path segment to a Decimal.
    """
    field = serializers.DecimalField(max_digits=None, decimal_places=None)
    try:
        return field.to_internal_value(value)
    except serializers.ValidationError:
        raise BadRequestException(
            f"Parameter '{name}' should be of type Decimal",
            code="TYPE_MISMATCH"
        )
