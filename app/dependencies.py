"""
FastAPI dependencies for the payment detail endpoints.

The service is built per request around that request's database session,
so no module-level database handle is shared between requests:

  get_db (AsyncSession)
      └── get_payment_detail_service (AsyncSession -> PaymentDetailService)

Tests swap either link with app.dependency_overrides.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.services.payment_detail_service import PaymentDetailService


async def get_payment_detail_service(
    db: AsyncSession = Depends(get_db),
) -> PaymentDetailService:
    """Provide a PaymentDetailService bound to the request's session."""
    return PaymentDetailService(db)
