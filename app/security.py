"""
Card number masking.

Card numbers are masked before they are stored: every character except the
last four is replaced with "*". The transform is one-way, the original
digits cannot be recovered from the stored value.

    >>> mask_card_number("4111111111111111")
    '************1111'

Values shorter than four characters (or empty) are returned unchanged.
Validation normally rejects such input before it gets here.
"""

MASK_CHAR = "*"
VISIBLE_DIGITS = 4


def mask_card_number(card_number: str) -> str:
    """Replace all but the last four characters of a card number with '*'."""
    if not card_number or len(card_number) < VISIBLE_DIGITS:
        return card_number

    hidden = len(card_number) - VISIBLE_DIGITS
    return MASK_CHAR * hidden + card_number[hidden:]
