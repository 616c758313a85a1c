from typing import TYPE_CHECKING

from sqlalchemy import Float, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base, BigIntegerPK

if TYPE_CHECKING:
    from app.db.models.restaurant import Restaurant


class Menu(Base):
    __tablename__ = "menus"

    id: Mapped[int] = mapped_column(BigIntegerPK, primary_key=True, autoincrement=True)
    dish: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[float] = mapped_column(
        Float, default=0.0, server_default="0", nullable=False
    )
    restaurant_id: Mapped[int] = mapped_column(
        BigIntegerPK,
        ForeignKey("restaurants.id", ondelete="CASCADE"),
        nullable=False,
    )

    restaurant: Mapped["Restaurant"] = relationship(back_populates="menus")

    __table_args__ = (Index("idx_menus_restaurant_id", "restaurant_id"),)

    def __repr__(self) -> str:
        return f"<Menu(id={self.id}, dish='{self.dish}', restaurant_id={self.restaurant_id})>"
