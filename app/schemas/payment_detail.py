"""
Pydantic schemas for PaymentDetail endpoints.

JSON bodies use camelCase names (cardOwnerName, cardNumber, ...). Python
code may construct PaymentDetailInput with the snake_case attribute names
as well.

Field rules:
  cardOwnerName   required, at most 100 characters
  cardNumber      exactly 16 digits
  expirationDate  MM/YY with MM in 01..12
  cvc             exactly 3 digits

Rule violations raise PydanticCustomError with the human-readable message
that ends up in the 400 response (see app.validation).
"""

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError


OWNER_NAME_MAX_LENGTH = 100

CARD_NUMBER_PATTERN = re.compile(r"\d{16}", re.ASCII)
EXPIRATION_DATE_PATTERN = re.compile(r"(0[1-9]|1[0-2])/\d{2}", re.ASCII)
CVC_PATTERN = re.compile(r"\d{3}", re.ASCII)

# Error type carried by every rule violation raised below
PAYMENT_DETAIL_ERROR = "payment_detail_invalid"

REQUIRED_MESSAGES = {
    "cardOwnerName": "Card owner name is required",
    "cardNumber": "Card number is required",
    "expirationDate": "Expiration date is required",
    "cvc": "CVC is required",
}

INVALID_MESSAGES = {
    "cardOwnerName": "Card owner name must be a string",
    "cardNumber": "Card number must be 16 digits",
    "expirationDate": "Expiration date must be in MM/YY format",
    "cvc": "CVC must be 3 digits",
}

OWNER_NAME_TOO_LONG_MESSAGE = (
    f"Card owner name cannot exceed {OWNER_NAME_MAX_LENGTH} characters"
)


def _rule_violation(message: str) -> PydanticCustomError:
    return PydanticCustomError(PAYMENT_DETAIL_ERROR, message)


def _check_pattern(value: str, pattern: re.Pattern, field: str) -> str:
    if value == "":
        raise _rule_violation(REQUIRED_MESSAGES[field])
    if pattern.fullmatch(value) is None:
        raise _rule_violation(INVALID_MESSAGES[field])
    return value


class PaymentDetailInput(BaseModel):
    """Request body for POST /payment-detail and PUT /payment-detail/{id}.

    A paymentDetailsID in the body is ignored; on update the id comes from
    the URL path.
    """

    model_config = ConfigDict(populate_by_name=True)

    card_owner_name: str = Field(
        alias="cardOwnerName",
        description="Name printed on the card",
        examples=["Jane Doe"],
    )
    card_number: str = Field(
        alias="cardNumber",
        description="16-digit card number; stored masked",
        examples=["4111111111111111"],
    )
    expiration_date: str = Field(
        alias="expirationDate",
        description="Expiration date in MM/YY format",
        examples=["09/27"],
    )
    cvc: str = Field(
        alias="cvc",
        description="3-digit card verification code",
        examples=["123"],
    )

    @field_validator("card_owner_name")
    @classmethod
    def check_card_owner_name(cls, value: str) -> str:
        if not value.strip():
            raise _rule_violation(REQUIRED_MESSAGES["cardOwnerName"])
        if len(value) > OWNER_NAME_MAX_LENGTH:
            raise _rule_violation(OWNER_NAME_TOO_LONG_MESSAGE)
        return value

    @field_validator("card_number")
    @classmethod
    def check_card_number(cls, value: str) -> str:
        return _check_pattern(value, CARD_NUMBER_PATTERN, "cardNumber")

    @field_validator("expiration_date")
    @classmethod
    def check_expiration_date(cls, value: str) -> str:
        return _check_pattern(value, EXPIRATION_DATE_PATTERN, "expirationDate")

    @field_validator("cvc")
    @classmethod
    def check_cvc(cls, value: str) -> str:
        return _check_pattern(value, CVC_PATTERN, "cvc")


class PaymentDetailResponse(BaseModel):
    """Public representation of a stored payment detail (card number masked)."""
    payment_details_id: int = Field(serialization_alias="paymentDetailsID")
    card_owner_name: str = Field(serialization_alias="cardOwnerName")
    card_number: str = Field(serialization_alias="cardNumber")
    expiration_date: str = Field(serialization_alias="expirationDate")
    cvc: str = Field(serialization_alias="cvc")

    model_config = {"from_attributes": True}
