"""
Custom Exception Handler for API

Every failure leaves the API in one JSON shape:
{status, message, errors[], timestamp, path, errorCode}
"""
import logging

from django.db import DatabaseError
from django.http import Http404, JsonResponse
from django.utils import timezone
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.settings import api_settings
from rest_framework.views import exception_handler, set_rollback

from apps.core.exceptions import GroceteriaException

logger = logging.getLogger(__name__)


def build_error_body(status_code, message, errors, error_code, path):
    return {
        "status": status_code,
        "message": message,
        "errors": list(errors),
        "timestamp": timezone.now().isoformat(),
        "path": path,
        "errorCode": error_code,
    }


def flatten_errors(detail, field=None):
    """
    Flatten DRF error details into "field: message" strings.
    """
    if isinstance(detail, dict):
        flattened = []
        for key, value in detail.items():
            name = key if field is None else f"{field}.{key}"
            flattened.extend(flatten_errors(value, name))
        return flattened

    if isinstance(detail, (list, tuple)):
        flattened = []
        for value in detail:
            flattened.extend(flatten_errors(value, field))
        return flattened

    if field is None or field == api_settings.NON_FIELD_ERRORS_KEY:
        return [str(detail)]
    return [f"{field}: {detail}"]


def _request_path(context):
    request = context.get('request')
    return request.path if request is not None else "Unknown"


def custom_exception_handler(exc, context):
    """
    Custom exception handler that provides consistent error responses.
    """
    path = _request_path(context)

    if isinstance(exc, GroceteriaException):
        if exc.status_code >= 500:
            logger.error(f"{exc.code} on {path}: {exc.message}")
        else:
            logger.warning(f"{exc.code} on {path}: {exc.message}")
        set_rollback()
        return Response(
            build_error_body(exc.status_code, exc.title, exc.errors, exc.code, path),
            status=exc.status_code
        )

    # Call REST framework's default exception handler first
    response = exception_handler(exc, context)

    if response is not None:
        request = context.get('request')
        method = request.method if request is not None else ""

        if isinstance(exc, exceptions.ValidationError):
            message, errors, code = "Validation failed", flatten_errors(exc.detail), "VALIDATION_ERROR"
        elif isinstance(exc, (exceptions.MethodNotAllowed, exceptions.NotFound, Http404)):
            response.status_code = status.HTTP_404_NOT_FOUND
            message = "Endpoint not found"
            errors = [f"No handler found for {method} {path}"]
            code = "ENDPOINT_NOT_FOUND"
        elif isinstance(exc, (exceptions.ParseError, exceptions.UnsupportedMediaType)):
            response.status_code = status.HTTP_400_BAD_REQUEST
            message, errors, code = "Bad request", flatten_errors(exc.detail), "BAD_REQUEST"
        elif isinstance(exc, exceptions.NotAuthenticated):
            message, errors, code = "Authentication failed", flatten_errors(exc.detail), "UNAUTHORIZED"
        elif isinstance(exc, exceptions.PermissionDenied):
            message, errors, code = "Access forbidden", flatten_errors(exc.detail), "FORBIDDEN"
        else:
            message = str(exc.default_detail)
            errors = flatten_errors(exc.detail)
            code = str(exc.default_code).upper()

        logger.warning(f"{code} on {method} {path}: {errors}")
        response.data = build_error_body(response.status_code, message, errors, code, path)
        return response

    # Handle unexpected exceptions
    logger.exception(f"Unhandled exception on {path}: {exc}")
    set_rollback()
    if isinstance(exc, (DatabaseError, RuntimeError)):
        message, code = "Internal server error", "INTERNAL_ERROR"
    else:
        message, code = "An unexpected error occurred", "UNEXPECTED_ERROR"

    return Response(
        build_error_body(500, message, [str(exc) or exc.__class__.__name__], code, path),
        status=status.HTTP_500_INTERNAL_SERVER_ERROR
    )


def endpoint_not_found(request, exception=None):
    """
    handler404: unmatched routes get the API error shape instead of HTML.
    """
    logger.warning(f"No handler found for {request.method} {request.path}")
    return JsonResponse(
        build_error_body(
            404,
            "Endpoint not found",
            [f"No handler found for {request.method} {request.path}"],
            "ENDPOINT_NOT_FOUND",
            request.path,
        ),
        status=404
    )


def server_error(request):
    """
    handler500 for failures raised outside DRF views.
    """
    return JsonResponse(
        build_error_body(
            500,
            "An unexpected error occurred",
            ["An unexpected error occurred"],
            "UNEXPECTED_ERROR",
            request.path,
        ),
        status=500
    )
