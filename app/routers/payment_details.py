"""
Payment details router: CRUD endpoints for stored payment cards.

Endpoints (mounted at {API_PREFIX}/payment-detail):
  GET    /                     : List all payment details
  GET    /{payment_detail_id}  : Get one payment detail
  POST   /                     : Create a payment detail (201 + Location header)
  PUT    /{payment_detail_id}  : Replace a payment detail's fields
  DELETE /{payment_detail_id}  : Delete a payment detail (204)

The collection routes answer both with and without a trailing slash.

Card numbers are masked before storage, so responses only ever contain
"************1234"-style values.

Outcome mapping:
  - invalid body or id         -> 400 with {field: [messages]}
  - record doesn't exist        -> 404 with an empty body
  - concurrent modification     -> 409
  - anything else going wrong   -> logged, then 500 with a generic message
"""

import logging
from contextlib import contextmanager
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Request, Response, status

from app.dependencies import get_payment_detail_service
from app.exceptions import PaymentAPIError, PaymentDetailOperationError
from app.schemas.payment_detail import PaymentDetailInput, PaymentDetailResponse
from app.services.payment_detail_service import PaymentDetailService

logger = logging.getLogger(__name__)

router = APIRouter()

# Ids are store-assigned positive 64-bit integers; anything else is a 400
PaymentDetailId = Annotated[int, Path(ge=1, le=2**63 - 1)]


@contextmanager
def operation_guard(action: str, payment_detail_id: int | None = None):
    """
    Handler boundary for one operation.

    Domain errors pass through to their registered handlers. Any other
    exception is logged with the operation and id, then replaced by a
    PaymentDetailOperationError carrying only a generic message.
    """
    try:
        yield
    except PaymentAPIError:
        raise
    except Exception as exc:
        if payment_detail_id is None:
            logger.exception("Error occurred while %s", action)
        else:
            logger.exception(
                "Error occurred while %s with ID: %s", action, payment_detail_id
            )
        raise PaymentDetailOperationError(
            f"An error occurred while {action}"
        ) from exc


def _not_found() -> Response:
    return Response(status_code=status.HTTP_404_NOT_FOUND)


@router.get("/", response_model=list[PaymentDetailResponse], include_in_schema=False)
@router.get(
    "",
    response_model=list[PaymentDetailResponse],
    summary="List all payment details",
)
async def list_payment_details(
    service: PaymentDetailService = Depends(get_payment_detail_service),
):
    """Return every stored payment detail, in database order."""
    with operation_guard("retrieving payment details"):
        return await service.list_all()


@router.get(
    "/{payment_detail_id}",
    response_model=PaymentDetailResponse,
    summary="Get a payment detail",
    responses={404: {"description": "Payment detail not found"}},
)
async def get_payment_detail(
    payment_detail_id: PaymentDetailId,
    service: PaymentDetailService = Depends(get_payment_detail_service),
):
    with operation_guard("retrieving the payment detail", payment_detail_id):
        payment_detail = await service.get_by_id(payment_detail_id)
    if payment_detail is None:
        return _not_found()
    return payment_detail


@router.post(
    "/",
    response_model=PaymentDetailResponse,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
@router.post(
    "",
    response_model=PaymentDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a payment detail",
    responses={400: {"description": "Invalid payment detail data"}},
)
async def create_payment_detail(
    payload: PaymentDetailInput,
    request: Request,
    response: Response,
    service: PaymentDetailService = Depends(get_payment_detail_service),
):
    """
    Store a new payment detail.

    - The card number is masked (only the last four digits are kept)
    - The Location header points at GET /payment-detail/{payment_detail_id} for the new record
    """
    with operation_guard("creating the payment detail"):
        payment_detail = await service.create(payload)

    response.headers["Location"] = str(
        request.url_for(
            "get_payment_detail",
            payment_detail_id=payment_detail.payment_details_id,
        )
    )
    return payment_detail


@router.put(
    "/{payment_detail_id}",
    response_model=PaymentDetailResponse,
    summary="Update a payment detail",
    responses={
        400: {"description": "Invalid payment detail data"},
        404: {"description": "Payment detail not found"},
        409: {"description": "Payment detail was modified concurrently"},
    },
)
async def update_payment_detail(
    payment_detail_id: PaymentDetailId,
    payload: PaymentDetailInput,
    service: PaymentDetailService = Depends(get_payment_detail_service),
):
    """
    Overwrite all fields of an existing payment detail.

    The id comes from the path; any paymentDetailsID in the body is ignored.
    The supplied card number is masked again before storage.
    """
    with operation_guard("updating the payment detail", payment_detail_id):
        payment_detail = await service.update(payment_detail_id, payload)
    if payment_detail is None:
        return _not_found()
    return payment_detail


@router.delete(
    "/{payment_detail_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a payment detail",
    responses={
        404: {"description": "Payment detail not found"},
        409: {"description": "Payment detail was modified concurrently"},
    },
)
async def delete_payment_detail(
    payment_detail_id: PaymentDetailId,
    service: PaymentDetailService = Depends(get_payment_detail_service),
):
    with operation_guard("deleting the payment detail", payment_detail_id):
        deleted = await service.delete(payment_detail_id)
    if not deleted:
        return _not_found()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
