"""
Payment detail service: persistence for payment card records.

PaymentDetailService wraps one AsyncSession, handed in at construction
(see app.dependencies). Every operation is keyed by the integer
payment_details_id.

Write path:
  1. Input has already been validated (PaymentDetailInput)
  2. The card number is masked with mask_card_number, on create AND update
  3. The change is committed before the method returns

Absence is a normal outcome: get_by_id/update return None and delete
returns False when the record does not exist. Optimistic-concurrency
failures (StaleDataError from the version_id check) are rolled back and
raised as ConcurrencyConflictError, never retried.
"""

import logging

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from app.exceptions import ConcurrencyConflictError
from app.models.payment_detail import PaymentDetail
from app.schemas.payment_detail import PaymentDetailInput
from app.security import mask_card_number


logger = logging.getLogger(__name__)


class PaymentDetailService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_all(self) -> list[PaymentDetail]:
        logger.info("Getting all payment details")
        result = await self.db.execute(select(PaymentDetail))
        return list(result.scalars().all())

    async def get_by_id(self, payment_detail_id: int) -> PaymentDetail | None:
        logger.info("Getting payment detail with ID: %s", payment_detail_id)
        return await self.db.get(PaymentDetail, payment_detail_id)

    async def create(self, data: PaymentDetailInput) -> PaymentDetail:
        """
        Store a new payment detail.

        The card number is masked before the row is written. Returns the
        stored record, including the id assigned by the database.
        """
        logger.info("Creating new payment detail")

        payment_detail = PaymentDetail(
            card_owner_name=data.card_owner_name,
            card_number=mask_card_number(data.card_number),
            expiration_date=data.expiration_date,
            cvc=data.cvc,
        )

        self.db.add(payment_detail)
        await self.db.commit()
        return payment_detail

    async def update(
        self,
        payment_detail_id: int,
        data: PaymentDetailInput,
    ) -> PaymentDetail | None:
        """
        Overwrite all business fields of an existing payment detail.

        Returns None without writing anything if the record doesn't exist.

        Raises:
            ConcurrencyConflictError: If the row changed since it was loaded.
        """
        logger.info("Updating payment detail with ID: %s", payment_detail_id)

        payment_detail = await self.db.get(PaymentDetail, payment_detail_id)
        if payment_detail is None:
            return None

        payment_detail.card_owner_name = data.card_owner_name
        payment_detail.card_number = mask_card_number(data.card_number)
        payment_detail.expiration_date = data.expiration_date
        payment_detail.cvc = data.cvc

        await self._commit(payment_detail_id, "updating")
        return payment_detail

    async def delete(self, payment_detail_id: int) -> bool:
        """
        Remove a payment detail.

        Returns False if the record doesn't exist, True once it is deleted.

        Raises:
            ConcurrencyConflictError: If the row changed since it was loaded.
        """
        logger.info("Deleting payment detail with ID: %s", payment_detail_id)

        payment_detail = await self.db.get(PaymentDetail, payment_detail_id)
        if payment_detail is None:
            return False

        await self.db.delete(payment_detail)
        await self._commit(payment_detail_id, "deleting")
        return True

    async def exists(self, payment_detail_id: int) -> bool:
        """Check for a record without loading it."""
        result = await self.db.execute(
            select(
                exists().where(PaymentDetail.payment_details_id == payment_detail_id)
            )
        )
        return bool(result.scalar())

    async def _commit(self, payment_detail_id: int, action: str) -> None:
        try:
            await self.db.commit()
        except StaleDataError as exc:
            await self.db.rollback()
            logger.error(
                "Concurrency error while %s payment detail with ID: %s",
                action,
                payment_detail_id,
                exc_info=exc,
            )
            raise ConcurrencyConflictError(payment_detail_id) from exc
