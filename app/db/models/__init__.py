from app.db.models.associations import restaurant_payments
from app.db.models.menu import Menu
from app.db.models.payment import Payment
from app.db.models.restaurant import Restaurant

__all__ = ["Restaurant", "Payment", "Menu", "restaurant_payments"]
