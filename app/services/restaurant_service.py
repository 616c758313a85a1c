import logging
from typing import Optional, Union

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.errors import is_unique_violation
from app.db.models import Menu, Payment, Restaurant
from app.db.repositories import PaymentRepository, RestaurantRepository
from app.exceptions import (
    DuplicateRestaurantNameException,
    PaymentNotFoundException,
    RestaurantNotFoundException,
)
from app.metrics import menus_removed_total, restaurant_operations_total
from app.schemas.restaurants import (
    RESTAURANT_SCALAR_FIELDS,
    MenuIn,
    PaymentRef,
    RestaurantCreate,
    RestaurantUpdate,
)

logger = logging.getLogger(__name__)

# Nullable text columns; a partial update only touches the ones that were sent
TEXT_FIELDS = ("name", "address", "city", "state", "telephone")


class RestaurantService:
    """Create, read, replace, patch and delete restaurants with their menus and payments.

    Write methods flush but never commit; the caller owns the transaction.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.restaurant_repo = RestaurantRepository(session)
        self.payment_repo = PaymentRepository(session)

    async def list_restaurants(self) -> list[Restaurant]:
        return await self.restaurant_repo.list_all()

    async def get_restaurant(self, restaurant_id: int) -> Restaurant:
        restaurant = await self.restaurant_repo.get_by_id(restaurant_id)
        if restaurant is None:
            raise RestaurantNotFoundException(restaurant_id=restaurant_id)
        return restaurant

    async def get_restaurant_by_name(self, name: str) -> Restaurant:
        restaurant = await self.restaurant_repo.get_by_name(name)
        if restaurant is None:
            raise RestaurantNotFoundException(name=name)
        return restaurant

    async def list_restaurants_by_state(self, state: str) -> list[Restaurant]:
        return await self.restaurant_repo.list_by_state(state)

    async def list_restaurants_by_name_like(self, subname: str) -> list[Restaurant]:
        return await self.restaurant_repo.list_by_name_like(subname)

    async def create_restaurant(self, data: RestaurantCreate) -> Restaurant:
        await self._ensure_name_available(data.name)

        restaurant = self._restaurant_from_request(data)
        restaurant.payments = await self._resolve_payments(data.payments)
        restaurant.menus = self._build_menus(data.menus)
        self.session.add(restaurant)
        await self._flush_checking_name(restaurant.name)

        restaurant_operations_total.labels(operation="created").inc()
        logger.info(
            "Created restaurant restaurant_id=%s name=%s menus=%s payments=%s",
            restaurant.id,
            restaurant.name,
            len(restaurant.menus),
            len(restaurant.payments),
            extra={"restaurant_id": restaurant.id, "restaurant_name": restaurant.name},
        )
        return restaurant

    async def replace_restaurant(
        self, restaurant_id: int, data: RestaurantCreate
    ) -> Restaurant:
        """Overwrite every field, the payment set and the menu list."""
        restaurant = await self.get_restaurant(restaurant_id)
        await self._ensure_name_available(data.name, exclude_id=restaurant_id)

        for field in TEXT_FIELDS:
            setattr(restaurant, field, getattr(data, field))
        restaurant.seat_capacity = data.seat_capacity
        restaurant.payments = await self._resolve_payments(data.payments)
        self._replace_menus(restaurant, data.menus)
        await self._flush_checking_name(restaurant.name)

        restaurant_operations_total.labels(operation="replaced").inc()
        logger.info(
            "Replaced restaurant restaurant_id=%s",
            restaurant_id,
            extra={"restaurant_id": restaurant_id},
        )
        return restaurant

    async def update_restaurant(
        self, restaurant_id: int, data: RestaurantUpdate
    ) -> Restaurant:
        """Apply only the fields the client sent.

        Text fields are copied when not null. seat_capacity is copied only when
        it was explicitly set, so a 0 in the request is kept apart from an
        absent value. Payments and menus are replaced only by non-empty lists.
        """
        restaurant = await self.get_restaurant(restaurant_id)
        changes = self._restaurant_from_request(data)

        if changes.name is not None and changes.name != restaurant.name:
            await self._ensure_name_available(changes.name, exclude_id=restaurant_id)

        for field in TEXT_FIELDS:
            value = getattr(changes, field)
            if value is not None:
                setattr(restaurant, field, value)

        if changes.has_value_for_seat_capacity:
            restaurant.seat_capacity = changes.seat_capacity

        if data.payments:
            restaurant.payments = await self._resolve_payments(data.payments)

        if data.menus:
            self._replace_menus(restaurant, data.menus)

        await self._flush_checking_name(restaurant.name)

        restaurant_operations_total.labels(operation="updated").inc()
        logger.info(
            "Updated restaurant restaurant_id=%s fields=%s",
            restaurant_id,
            sorted(data.model_fields_set),
            extra={"restaurant_id": restaurant_id},
        )
        return restaurant

    async def delete_restaurant(self, restaurant_id: int) -> None:
        restaurant = await self.get_restaurant(restaurant_id)
        menu_count = len(restaurant.menus)

        await self.restaurant_repo.delete(restaurant)

        restaurant_operations_total.labels(operation="deleted").inc()
        menus_removed_total.inc(menu_count)
        logger.info(
            "Deleted restaurant restaurant_id=%s menus_removed=%s",
            restaurant_id,
            menu_count,
            extra={"restaurant_id": restaurant_id, "menus_removed": menu_count},
        )

    @staticmethod
    def _restaurant_from_request(
        data: Union[RestaurantCreate, RestaurantUpdate],
    ) -> Restaurant:
        """Build an unattached Restaurant from the scalar fields present in the request."""
        fields = data.model_dump(
            include=set(RESTAURANT_SCALAR_FIELDS), exclude_unset=True, exclude_none=True
        )
        if isinstance(data, RestaurantCreate):
            fields.setdefault("seat_capacity", data.seat_capacity)
        return Restaurant(**fields)

    async def _ensure_name_available(self, name: str, exclude_id: Optional[int] = None) -> None:
        if await self.restaurant_repo.name_taken(name, exclude_id=exclude_id):
            logger.warning(
                "Restaurant name already taken name=%s",
                name,
                extra={"restaurant_name": name},
            )
            raise DuplicateRestaurantNameException(name)

    async def _flush_checking_name(self, name: str) -> None:
        """Flush, reporting a lost race on the unique name like the up-front check does."""
        try:
            await self.session.flush()
        except IntegrityError as exc:
            if is_unique_violation(exc, "restaurants", "name"):
                logger.warning(
                    "Restaurant name taken concurrently name=%s",
                    name,
                    extra={"restaurant_name": name},
                )
                raise DuplicateRestaurantNameException(name) from exc
            raise

    async def _resolve_payments(self, refs: list[PaymentRef]) -> list[Payment]:
        payments: list[Payment] = []
        seen: set[int] = set()
        for ref in refs:
            if ref.id in seen:
                continue
            payment = await self.payment_repo.get_by_id(ref.id)
            if payment is None:
                raise PaymentNotFoundException(ref.id)
            seen.add(ref.id)
            payments.append(payment)
        return payments

    @staticmethod
    def _build_menus(items: list[MenuIn]) -> list[Menu]:
        return [Menu(dish=item.dish, price=item.price) for item in items]

    def _replace_menus(self, restaurant: Restaurant, items: list[MenuIn]) -> None:
        orphaned = len(restaurant.menus)
        restaurant.menus = self._build_menus(items)
        if orphaned:
            menus_removed_total.inc(orphaned)
