from app.db.repositories.payment_repository import PaymentRepository
from app.db.repositories.restaurant_repository import RestaurantRepository

__all__ = [
    "PaymentRepository",
    "RestaurantRepository",
]
