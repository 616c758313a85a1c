from sqlalchemy import Column, ForeignKey, Table

from app.db.base import Base, BigIntegerPK

restaurant_payments = Table(
    "restaurantpayments",
    Base.metadata,
    Column(
        "restaurant_id",
        BigIntegerPK,
        ForeignKey("restaurants.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "payment_id",
        BigIntegerPK,
        ForeignKey("payments.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)
