from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models import Restaurant


class RestaurantRepository:
    """Queries over restaurants.

    Payments and menus come back populated because both relationships are
    declared ``lazy="selectin"`` on the Restaurant model.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def list_all(self) -> list[Restaurant]:
        stmt = select(Restaurant).order_by(Restaurant.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_id(self, restaurant_id: int) -> Optional[Restaurant]:
        stmt = select(Restaurant).where(Restaurant.id == restaurant_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_name(self, name: str) -> Optional[Restaurant]:
        stmt = select(Restaurant).where(Restaurant.name == name)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_by_state(self, state: str) -> list[Restaurant]:
        stmt = (
            select(Restaurant)
            .where(func.lower(Restaurant.state) == state.lower())
            .order_by(Restaurant.id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_by_name_like(self, subname: str) -> list[Restaurant]:
        stmt = (
            select(Restaurant)
            .where(Restaurant.name.icontains(subname, autoescape=True))
            .order_by(Restaurant.id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def name_taken(
        self, name: str, exclude_id: Optional[int] = None
    ) -> bool:
        stmt = select(Restaurant.id).where(Restaurant.name == name)
        if exclude_id is not None:
            stmt = stmt.where(Restaurant.id != exclude_id)
        result = await self.session.execute(stmt.limit(1))
        return result.scalar_one_or_none() is not None

    async def delete(self, restaurant: Restaurant) -> None:
        await self.session.delete(restaurant)
        await self.session.flush()
