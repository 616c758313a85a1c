from tests.utils.factories import PaymentFactory, RestaurantFactory
from tests.utils.helpers import create_restaurants, dish_names

__all__ = [
    "PaymentFactory",
    "RestaurantFactory",
    "create_restaurants",
    "dish_names",
]
