from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.payments import PaymentSummary

# Fields copied one-to-one from a request onto the Restaurant row
RESTAURANT_SCALAR_FIELDS = ("name", "address", "city", "state", "telephone", "seat_capacity")


class MenuIn(BaseModel):
    dish: str = Field(..., min_length=1, max_length=255)
    price: float = Field(default=0.0, ge=0)


class PaymentRef(BaseModel):
    """Reference to an existing payment method by id."""

    id: int


class RestaurantCreate(BaseModel):
    """Body for POST and PUT. Every field not sent is reset to its default."""

    name: str = Field(..., min_length=1, max_length=255)
    address: Optional[str] = Field(default=None, max_length=255)
    city: Optional[str] = Field(default=None, max_length=100)
    state: Optional[str] = Field(default=None, max_length=50)
    telephone: Optional[str] = Field(default=None, max_length=50)
    seat_capacity: int = Field(default=0, ge=0)
    payments: list[PaymentRef] = Field(default_factory=list)
    menus: list[MenuIn] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")


class RestaurantUpdate(BaseModel):
    """Body for PATCH. Only the fields present in the request are applied."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    address: Optional[str] = Field(default=None, max_length=255)
    city: Optional[str] = Field(default=None, max_length=100)
    state: Optional[str] = Field(default=None, max_length=50)
    telephone: Optional[str] = Field(default=None, max_length=50)
    seat_capacity: Optional[int] = Field(default=None, ge=0)
    payments: list[PaymentRef] = Field(default_factory=list)
    menus: list[MenuIn] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")


class RestaurantResponse(BaseModel):
    class Menu(BaseModel):
        id: int
        dish: str
        price: float

        model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    telephone: Optional[str] = None
    seat_capacity: int
    payments: list[PaymentSummary] = Field(default_factory=list)
    menus: list[Menu] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)
