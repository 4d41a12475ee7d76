"""
Custom exceptions for the Groceteria backend

Every domain failure raised by a service is one of these. The API layer
translates them into the standard error body without inspecting messages.
"""
from typing import List, Optional


class GroceteriaException(Exception):
    """Base exception for all Groceteria errors"""
    status_code = 500
    default_code = "INTERNAL_ERROR"
    title = "Internal server error"

    def __init__(self, message: str, code: str = None, errors: Optional[List[str]] = None):
        self.message = message
        self.code = code or self.default_code
        self.errors = errors or [message]
        super().__init__(self.message)


class ResourceNotFoundException(GroceteriaException):
    """Exception raised when an entity lookup by id or key misses"""
    status_code = 404
    default_code = "RESOURCE_NOT_FOUND"
    title = "Resource not found"

    def __init__(self, resource_name: str, field_name: str, field_value):
        self.resource_name = resource_name
        self.field_name = field_name
        self.field_value = field_value
        super().__init__(
            message=f"{resource_name} not found with {field_name} : '{field_value}'"
        )


class BadRequestException(GroceteriaException):
    """Exception raised for malformed input or a violated business rule"""
    status_code = 400
    default_code = "BAD_REQUEST"
    title = "Bad request"


class ValidationException(GroceteriaException):
    """Exception raised for validation errors"""
    status_code = 400
    default_code = "VALIDATION_ERROR"
    title = "Validation error"


class ConflictException(GroceteriaException):
    """Exception raised on a uniqueness or state conflict"""
    status_code = 409
    default_code = "CONFLICT"
    title = "Resource conflict"


class UnauthorizedException(GroceteriaException):
    status_code = 401
    default_code = "UNAUTHORIZED"
    title = "Authentication failed"


class ForbiddenException(GroceteriaException):
    """Exception raised when the caller's role does not allow the action"""
    status_code = 403
    default_code = "FORBIDDEN"
    title = "Access forbidden"


class PaymentProcessingException(GroceteriaException):
    """Exception raised when the payment gateway fails to process a payment"""
    status_code = 500
    default_code = "PAYMENT_ERROR"
    title = "Payment processing failed"

    def __init__(self, message: str, gateway: str = None):
        self.gateway = gateway
        super().__init__(message=message)
