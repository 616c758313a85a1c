from app.services.payment_service import PaymentService
from app.services.restaurant_service import RestaurantService

__all__ = [
    "PaymentService",
    "RestaurantService",
]
