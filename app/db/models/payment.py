from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base, BigIntegerPK
from app.db.models.associations import restaurant_payments

if TYPE_CHECKING:
    from app.db.models.restaurant import Restaurant


class Payment(Base):
    """Payment method. Lives independently of the restaurants that accept it."""

    __tablename__ = "payments"

    id: Mapped[int] = mapped_column(BigIntegerPK, primary_key=True, autoincrement=True)
    type: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)

    restaurants: Mapped[list["Restaurant"]] = relationship(
        secondary=restaurant_payments,
        back_populates="payments",
        order_by="Restaurant.id",
    )

    def __repr__(self) -> str:
        return f"<Payment(id={self.id}, type='{self.type}')>"
