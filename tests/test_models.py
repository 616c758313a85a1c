import pytest
from sqlalchemy import func, select, text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models import Menu, Payment, Restaurant


async def _count(session: AsyncSession, model) -> int:
    result = await session.execute(select(func.count()).select_from(model))
    return result.scalar_one()


class TestSeatCapacityFlag:
    def test_new_restaurant_has_no_seat_capacity_value(self) -> None:
        restaurant = Restaurant()

        assert restaurant.has_value_for_seat_capacity is False

    def test_assigning_zero_marks_value_as_set(self) -> None:
        restaurant = Restaurant(name="Zero Seats")

        restaurant.seat_capacity = 0

        assert restaurant.has_value_for_seat_capacity is True
        assert restaurant.seat_capacity == 0

    def test_constructor_keyword_marks_value_as_set(self) -> None:
        restaurant = Restaurant(name="Bistro", seat_capacity=40)

        assert restaurant.has_value_for_seat_capacity is True
        assert restaurant.seat_capacity == 40

    def test_flag_is_per_instance(self) -> None:
        first = Restaurant(seat_capacity=1)
        second = Restaurant()

        assert first.has_value_for_seat_capacity is True
        assert second.has_value_for_seat_capacity is False

    async def test_loaded_restaurant_has_no_seat_capacity_value(
        self, db_session: AsyncSession
    ) -> None:
        db_session.add(Restaurant(name="Loaded", seat_capacity=12))
        await db_session.flush()
        db_session.expunge_all()

        result = await db_session.execute(
            select(Restaurant).where(Restaurant.name == "Loaded")
        )
        restaurant = result.scalar_one()

        assert restaurant.seat_capacity == 12
        assert restaurant.has_value_for_seat_capacity is False

    async def test_seat_capacity_defaults_to_zero_on_insert(
        self, db_session: AsyncSession
    ) -> None:
        restaurant = Restaurant(name="No Seats Given")
        db_session.add(restaurant)
        await db_session.flush()

        assert restaurant.seat_capacity == 0
        assert restaurant.has_value_for_seat_capacity is False


class TestRestaurantConstraints:
    async def test_duplicate_name_rejected(self, db_session: AsyncSession) -> None:
        db_session.add(Restaurant(name="Twin"))
        await db_session.flush()

        db_session.add(Restaurant(name="Twin"))
        with pytest.raises(IntegrityError):
            await db_session.flush()

    async def test_name_is_required(self, db_session: AsyncSession) -> None:
        db_session.add(Restaurant(city="Nowhere"))

        with pytest.raises(IntegrityError):
            await db_session.flush()

    async def test_id_generated_on_insert(self, db_session: AsyncSession) -> None:
        restaurant = Restaurant(name="Fresh")
        assert restaurant.id is None

        db_session.add(restaurant)
        await db_session.flush()

        assert isinstance(restaurant.id, int)


class TestRestaurantRelationships:
    async def test_delete_restaurant_cascades_to_menus_only(
        self, db_session: AsyncSession
    ) -> None:
        cash = Payment(type="Cash")
        restaurant = Restaurant(
            name="Eagle Cafe",
            payments=[cash],
            menus=[Menu(dish="Tacos", price=10.49), Menu(dish="Barbacoa", price=12.75)],
        )
        db_session.add(restaurant)
        await db_session.flush()

        assert await _count(db_session, Menu) == 2

        await db_session.delete(restaurant)
        await db_session.flush()

        assert await _count(db_session, Restaurant) == 0
        assert await _count(db_session, Menu) == 0
        assert await _count(db_session, Payment) == 1
        join_rows = await db_session.execute(text("SELECT COUNT(*) FROM restaurantpayments"))
        assert join_rows.scalar_one() == 0

    async def test_replacing_menus_deletes_orphans(
        self, db_session: AsyncSession
    ) -> None:
        restaurant = Restaurant(
            name="Number 1 Eats", menus=[Menu(dish="Pizza", price=15.15)]
        )
        db_session.add(restaurant)
        await db_session.flush()

        restaurant.menus = [Menu(dish="Calzone", price=11.0)]
        await db_session.flush()

        result = await db_session.execute(select(Menu.dish))
        assert list(result.scalars().all()) == ["Calzone"]

    async def test_payment_shared_between_restaurants(
        self, db_session: AsyncSession
    ) -> None:
        card = Payment(type="Credit Card")
        first = Restaurant(name="First", payments=[card])
        second = Restaurant(name="Second", payments=[card])
        db_session.add_all([first, second])
        await db_session.flush()

        await db_session.delete(first)
        await db_session.flush()

        assert await _count(db_session, Payment) == 1
        assert [p.type for p in second.payments] == ["Credit Card"]

    async def test_menu_requires_restaurant(self, db_session: AsyncSession) -> None:
        db_session.add(Menu(dish="Stray Soup", price=3.0))

        with pytest.raises(IntegrityError):
            await db_session.flush()
