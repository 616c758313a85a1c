from fastapi import APIRouter, Response, status

from app.api.dependencies import SessionDep
from app.schemas.payments import PaymentCreate, PaymentResponse, PaymentSummary
from app.services.payment_service import PaymentService

router = APIRouter()


@router.get("", response_model=list[PaymentSummary])
async def list_payments(session: SessionDep) -> list[PaymentSummary]:
    service = PaymentService(session)
    payments = await service.list_payments()
    return [PaymentSummary.model_validate(p) for p in payments]


@router.get("/{payment_id}", response_model=PaymentResponse)
async def get_payment(payment_id: int, session: SessionDep) -> PaymentResponse:
    service = PaymentService(session)
    return PaymentResponse.model_validate(await service.get_payment(payment_id))


@router.post("", response_model=PaymentSummary, status_code=status.HTTP_201_CREATED)
async def create_payment(
    payment_data: PaymentCreate, session: SessionDep, response: Response
) -> PaymentSummary:
    async with session.begin():
        service = PaymentService(session)
        payment = await service.create_payment(payment_data)

        response.headers["Location"] = f"/v1/payments/{payment.id}"
        return PaymentSummary.model_validate(payment)
