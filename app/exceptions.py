"""
Custom exception classes and FastAPI exception handlers.

The service layer raises domain errors without importing HTTP concepts; the
handlers registered here translate them into HTTP responses. "Not found" is
not an exception: the service returns None/False and the router answers 404.

Exception hierarchy:
    PaymentAPIError (base)
    ├── ConcurrencyConflictError     record changed by another writer (409)
    └── PaymentDetailOperationError  unexpected failure at the handler boundary (500)

Request validation errors (pydantic) are answered with 400 and a mapping
from field name to messages.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.validation import field_errors


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Base exception
# ---------------------------------------------------------------------------

class PaymentAPIError(Exception):
    """Base exception for all Payment API domain errors."""

    def __init__(self, detail: str = "An error occurred"):
        self.detail = detail
        super().__init__(self.detail)


# ---------------------------------------------------------------------------
# Domain exceptions
# ---------------------------------------------------------------------------

class ConcurrencyConflictError(PaymentAPIError):
    """
    Raised when a write loses an optimistic-concurrency check.

    Attributes:
        payment_detail_id: The record another writer modified or removed first.
    """

    def __init__(self, payment_detail_id: int):
        self.payment_detail_id = payment_detail_id
        super().__init__(
            f"Payment detail {payment_detail_id} was modified by another request"
        )


class PaymentDetailOperationError(PaymentAPIError):
    """
    Raised by the router when an operation fails unexpectedly.

    The detail is a generic, caller-safe message; the underlying exception
    is logged where it is caught and never sent to the client.
    """


# ---------------------------------------------------------------------------
# FastAPI exception handlers
# ---------------------------------------------------------------------------

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register custom exception handlers with the FastAPI application.

    This is called once during app startup in main.py.
    """

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        # Bad user input is expected; keep it out of the error log
        errors = field_errors(exc.errors())
        logger.debug(
            "Rejected %s %s: %s", request.method, request.url.path, errors
        )
        return JSONResponse(status_code=400, content=errors)

    @app.exception_handler(ConcurrencyConflictError)
    async def concurrency_conflict_handler(
        request: Request, exc: ConcurrencyConflictError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=409,  # the stored version moved on
            content={"detail": exc.detail, "error_type": "concurrency_conflict"},
        )

    @app.exception_handler(PaymentDetailOperationError)
    async def operation_error_handler(
        request: Request, exc: PaymentDetailOperationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=500,
            content={"detail": exc.detail},
        )
