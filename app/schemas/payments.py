from pydantic import BaseModel, ConfigDict, Field


class PaymentCreate(BaseModel):
    type: str = Field(..., min_length=1, max_length=100)


class PaymentSummary(BaseModel):
    id: int
    type: str

    model_config = ConfigDict(from_attributes=True)


class PaymentResponse(PaymentSummary):
    class Restaurant(BaseModel):
        id: int
        name: str
        city: str | None = None
        state: str | None = None

        model_config = ConfigDict(from_attributes=True)

    restaurants: list[Restaurant] = Field(default_factory=list)
