from app.schemas.common import ErrorDetail, ErrorResponse
from app.schemas.payments import PaymentCreate, PaymentResponse, PaymentSummary
from app.schemas.restaurants import (
    MenuIn,
    PaymentRef,
    RestaurantCreate,
    RestaurantResponse,
    RestaurantUpdate,
)

__all__ = [
    "ErrorDetail",
    "ErrorResponse",
    "MenuIn",
    "PaymentCreate",
    "PaymentRef",
    "PaymentResponse",
    "PaymentSummary",
    "RestaurantCreate",
    "RestaurantResponse",
    "RestaurantUpdate",
]
