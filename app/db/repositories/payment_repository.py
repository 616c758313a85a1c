from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.db.models import Payment


class PaymentRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def list_all(self) -> list[Payment]:
        stmt = select(Payment).order_by(Payment.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_id(
        self, payment_id: int, with_restaurants: bool = False
    ) -> Optional[Payment]:
        stmt = select(Payment).where(Payment.id == payment_id)
        if with_restaurants:
            stmt = stmt.options(selectinload(Payment.restaurants))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_type(self, payment_type: str) -> Optional[Payment]:
        stmt = select(Payment).where(Payment.type == payment_type)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def add(self, payment: Payment) -> Payment:
        self.session.add(payment)
        await self.session.flush()
        return payment
