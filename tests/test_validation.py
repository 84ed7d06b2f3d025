"""
Tests for payment detail field validation.

These tests verify:
  - A well-formed body passes and parses into PaymentDetailInput
  - Each field's format rule and its error message
  - Missing fields report "<field> is required"
  - Errors are keyed by the JSON field name
  - FastAPI-style error locations are mapped to field names
"""

import pytest

from app.schemas.payment_detail import PaymentDetailInput
from app.validation import field_errors, validate_payment_detail


def _with(card_payload, **changes):
    body = dict(card_payload)
    body.update(changes)
    return body


class TestValidPayload:

    def test_valid_payload_passes(self, card_payload):
        result = validate_payment_detail(card_payload)
        assert result.is_valid
        assert result.errors == {}
        assert result.value.card_owner_name == "Jane Doe"
        assert result.value.card_number == "4111111111111111"
        assert result.value.expiration_date == "09/27"
        assert result.value.cvc == "123"

    def test_body_id_is_ignored(self, card_payload):
        result = validate_payment_detail(_with(card_payload, paymentDetailsID=42))
        assert result.is_valid
        assert not hasattr(result.value, "payment_details_id")

    def test_snake_case_names_accepted(self):
        data = PaymentDetailInput(
            card_owner_name="Jane Doe",
            card_number="4111111111111111",
            expiration_date="12/30",
            cvc="999",
        )
        assert data.expiration_date == "12/30"

    def test_owner_name_at_limit_passes(self, card_payload):
        result = validate_payment_detail(_with(card_payload, cardOwnerName="x" * 100))
        assert result.is_valid


class TestCardOwnerName:

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name_rejected(self, card_payload, name):
        result = validate_payment_detail(_with(card_payload, cardOwnerName=name))
        assert not result.is_valid
        assert result.errors == {"cardOwnerName": ["Card owner name is required"]}

    def test_name_over_100_characters_rejected(self, card_payload):
        result = validate_payment_detail(_with(card_payload, cardOwnerName="x" * 101))
        assert result.errors == {
            "cardOwnerName": ["Card owner name cannot exceed 100 characters"]
        }


class TestCardNumber:

    @pytest.mark.parametrize(
        "card_number",
        [
            "411111111111111",      # 15 digits
            "41111111111111111",    # 17 digits
            "4111-1111-1111-1111",
            "4111abcd11111111",
            "4111111111111111\n",
        ],
    )
    def test_malformed_card_number_rejected(self, card_payload, card_number):
        result = validate_payment_detail(_with(card_payload, cardNumber=card_number))
        assert result.errors == {"cardNumber": ["Card number must be 16 digits"]}

    def test_empty_card_number_is_required_error(self, card_payload):
        result = validate_payment_detail(_with(card_payload, cardNumber=""))
        assert result.errors == {"cardNumber": ["Card number is required"]}

    def test_non_string_card_number_rejected(self, card_payload):
        result = validate_payment_detail(_with(card_payload, cardNumber=4111111111111111))
        assert result.errors == {"cardNumber": ["Card number must be 16 digits"]}


class TestExpirationDate:

    @pytest.mark.parametrize("expiration", ["01/25", "09/27", "12/99"])
    def test_valid_months_pass(self, card_payload, expiration):
        assert validate_payment_detail(_with(card_payload, expirationDate=expiration)).is_valid

    @pytest.mark.parametrize(
        "expiration",
        ["13/25", "00/25", "1/25", "09/2027", "09-27", "ab/cd"],
    )
    def test_invalid_expiration_rejected(self, card_payload, expiration):
        result = validate_payment_detail(_with(card_payload, expirationDate=expiration))
        assert result.errors == {
            "expirationDate": ["Expiration date must be in MM/YY format"]
        }


class TestCvc:

    @pytest.mark.parametrize("cvc", ["12", "1234", "12a", " 123"])
    def test_invalid_cvc_rejected(self, card_payload, cvc):
        result = validate_payment_detail(_with(card_payload, cvc=cvc))
        assert result.errors == {"cvc": ["CVC must be 3 digits"]}

    def test_integer_cvc_rejected(self, card_payload):
        result = validate_payment_detail(_with(card_payload, cvc=123))
        assert result.errors == {"cvc": ["CVC must be 3 digits"]}


class TestMissingFields:

    def test_empty_body_reports_every_field(self):
        result = validate_payment_detail({})
        assert not result.is_valid
        assert result.value is None
        assert result.errors == {
            "cardOwnerName": ["Card owner name is required"],
            "cardNumber": ["Card number is required"],
            "expirationDate": ["Expiration date is required"],
            "cvc": ["CVC is required"],
        }

    def test_null_fields_reported_as_missing(self, card_payload):
        result = validate_payment_detail(
            {**card_payload, "cardOwnerName": None, "cvc": None}
        )
        assert result.errors == {
            "cardOwnerName": ["Card owner name is required"],
            "cvc": ["CVC is required"],
        }

    def test_multiple_failures_reported_together(self, card_payload):
        result = validate_payment_detail(
            _with(card_payload, cardNumber="123", cvc="12")
        )
        assert set(result.errors) == {"cardNumber", "cvc"}


class TestFieldErrors:
    """field_errors() also accepts FastAPI's request error locations."""

    def test_body_location_prefix_is_dropped(self):
        errors = field_errors([
            {"type": "missing", "loc": ("body", "cvc"), "msg": "Field required"},
        ])
        assert errors == {"cvc": ["CVC is required"]}

    def test_attribute_names_reported_as_json_names(self):
        errors = field_errors([
            {"type": "string_type", "loc": ("card_number",), "msg": "Input should be a valid string"},
        ])
        assert errors == {"cardNumber": ["Card number must be 16 digits"]}

    def test_path_parameter_errors_keep_their_name(self):
        errors = field_errors([
            {
                "type": "int_parsing",
                "loc": ("path", "payment_detail_id"),
                "msg": "Input should be a valid integer",
            },
        ])
        assert errors == {"payment_detail_id": ["Input should be a valid integer"]}

    def test_whole_body_errors_keyed_as_body(self):
        errors = field_errors([
            {"type": "missing", "loc": ("body",), "msg": "Field required"},
        ])
        assert errors == {"body": ["Field required"]}

    def test_json_decode_errors_keyed_as_body(self):
        errors = field_errors([
            {"type": "json_invalid", "loc": ("body", 0), "msg": "JSON decode error"},
        ])
        assert errors == {"body": ["JSON decode error"]}

    def test_duplicate_messages_collapsed(self):
        error = {"type": "missing", "loc": ("body", "cvc"), "msg": "Field required"}
        assert field_errors([error, error]) == {"cvc": ["CVC is required"]}
