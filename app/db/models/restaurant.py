from typing import TYPE_CHECKING, Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from app.db.base import Base, BigIntegerPK
from app.db.models.associations import restaurant_payments

if TYPE_CHECKING:
    from app.db.models.menu import Menu
    from app.db.models.payment import Payment


class Restaurant(Base):
    """Restaurant entity.

    Owns its menus (cascade all, delete-orphan) and shares payment methods
    with other restaurants through the ``restaurantpayments`` join table.
    """

    __tablename__ = "restaurants"

    id: Mapped[int] = mapped_column(BigIntegerPK, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    address: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    city: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    state: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    telephone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    seat_capacity: Mapped[int] = mapped_column(
        Integer, default=0, server_default="0", nullable=False
    )

    payments: Mapped[list["Payment"]] = relationship(
        secondary=restaurant_payments,
        back_populates="restaurants",
        order_by="Payment.id",
        lazy="selectin",
    )
    menus: Mapped[list["Menu"]] = relationship(
        back_populates="restaurant",
        cascade="all, delete-orphan",
        order_by="Menu.id",
        lazy="selectin",
    )

    # Not mapped. Tells a seat_capacity of 0 that was sent apart from one that was never set.
    has_value_for_seat_capacity = False

    @validates("seat_capacity")
    def _mark_seat_capacity(self, key: str, value: int) -> int:
        self.has_value_for_seat_capacity = True
        return value

    def __repr__(self) -> str:
        return f"<Restaurant(id={self.id}, name='{self.name}')>"
