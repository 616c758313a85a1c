from typing import Any, Optional


class BaseAPIException(Exception):
    """
    Base exception for all API errors.

    Provides consistent structure with status_code, error_code, and details.
    """

    status_code: int = 500
    error_code: str = "INTERNAL_ERROR"

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        if error_code:
            self.error_code = error_code
        self.details = details or {}


class BusinessException(BaseAPIException):
    """Business rule violation (HTTP 409)."""

    status_code = 409
    error_code = "BUSINESS_RULE_VIOLATION"


class NotFoundException(BaseAPIException):
    """Resource not found (HTTP 404)."""

    status_code = 404
    error_code = "RESOURCE_NOT_FOUND"


class SystemException(BaseAPIException):
    """Internal system error (HTTP 500)."""

    status_code = 500
    error_code = "SYSTEM_ERROR"


# Domain-specific exceptions
class RestaurantNotFoundException(NotFoundException):
    """Restaurant ID or name not found in database."""

    error_code = "RESTAURANT_NOT_FOUND"

    def __init__(self, restaurant_id: Optional[int] = None, name: Optional[str] = None):
        if name is not None:
            message = f"Restaurant not found: {name}"
            details: dict[str, Any] = {"name": name}
        else:
            message = f"Restaurant not found: {restaurant_id}"
            details = {"restaurant_id": restaurant_id}
        super().__init__(message=message, details=details)


class PaymentNotFoundException(NotFoundException):
    """Payment ID not found in database."""

    error_code = "PAYMENT_NOT_FOUND"

    def __init__(self, payment_id: int):
        super().__init__(
            message=f"Payment not found: {payment_id}",
            details={"payment_id": payment_id},
        )


class DuplicateRestaurantNameException(BusinessException):
    """Another restaurant already uses this name."""

    error_code = "RESTAURANT_NAME_TAKEN"

    def __init__(self, name: str):
        super().__init__(
            message=f"Restaurant name already exists: {name}",
            details={"name": name},
        )


class DuplicatePaymentTypeException(BusinessException):
    """Payment type already registered."""

    error_code = "PAYMENT_TYPE_TAKEN"

    def __init__(self, payment_type: str):
        super().__init__(
            message=f"Payment type already exists: {payment_type}",
            details={"type": payment_type},
        )


class DatabaseException(SystemException):
    """Database connection or query failure."""

    error_code = "DATABASE_ERROR"

    def __init__(self, message: str, operation: Optional[str] = None):
        super().__init__(
            message=message, details={"operation": operation} if operation else {}
        )
