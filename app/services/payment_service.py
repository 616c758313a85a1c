import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.errors import is_unique_violation
from app.db.models import Payment
from app.db.repositories import PaymentRepository
from app.exceptions import DuplicatePaymentTypeException, PaymentNotFoundException
from app.metrics import payments_created_total
from app.schemas.payments import PaymentCreate

logger = logging.getLogger(__name__)


class PaymentService:
    def __init__(self, session: AsyncSession) -> None:
        self.payment_repo = PaymentRepository(session)

    async def list_payments(self) -> list[Payment]:
        return await self.payment_repo.list_all()

    async def get_payment(self, payment_id: int) -> Payment:
        payment = await self.payment_repo.get_by_id(payment_id, with_restaurants=True)
        if payment is None:
            raise PaymentNotFoundException(payment_id)
        return payment

    async def create_payment(self, data: PaymentCreate) -> Payment:
        if await self.payment_repo.get_by_type(data.type) is not None:
            logger.warning(
                "Payment type already registered type=%s",
                data.type,
                extra={"payment_type": data.type},
            )
            raise DuplicatePaymentTypeException(data.type)

        try:
            payment = await self.payment_repo.add(Payment(type=data.type))
        except IntegrityError as exc:
            if is_unique_violation(exc, "payments", "type"):
                raise DuplicatePaymentTypeException(data.type) from exc
            raise

        payments_created_total.inc()
        logger.info(
            "Created payment payment_id=%s type=%s",
            payment.id,
            payment.type,
            extra={"payment_id": payment.id, "payment_type": payment.type},
        )
        return payment
