"""Turn raw keystroke text into decimal odds and amounts."""

import re
from decimal import Decimal, InvalidOperation

from dutcher.models import ZERO


_NON_DIGITS = re.compile(r"[^0-9]")


def normalize_odds(raw_text: str) -> str:
    """
    Reduce keyboard input to a canonical decimal string.

    Digits fill a fixed two-decimal field from the right, so the user never
    types the point: "150" becomes "1.50" and "1234" becomes "12.34".
    One or two digits are left alone and read as whole odds ("2" stays "2").
    Anything that is not an ASCII digit is dropped, including a typed point.

    Args:
        raw_text: Whatever the input widget currently holds

    Returns:
        The normalized text, possibly empty
    """
    digits = _NON_DIGITS.sub("", raw_text or "")

    if len(digits) <= 2:
        return digits

    return f"{digits[:-2]}.{digits[-2:]}"


def parse_odds(normalized: str) -> Decimal:
    """Numeric value of normalized odds text; 0 when empty or unparsable."""
    return _to_decimal(normalized)


def parse_amount(value) -> Decimal:
    """
    Coerce an investment input to a Decimal.

    Accepts numbers or text. Empty, non-numeric and non-finite input all
    come back as 0 so the caller always has something to allocate.
    """
    if isinstance(value, Decimal):
        return value if value.is_finite() else ZERO
    if isinstance(value, bool):
        return ZERO
    if isinstance(value, (int, float)):
        return _to_decimal(repr(value))
    if value is None:
        return ZERO
    return _to_decimal(str(value).strip())


def _to_decimal(text: str) -> Decimal:
    if not text:
        return ZERO
    try:
        number = Decimal(text)
    except InvalidOperation:
        return ZERO
    if not number.is_finite():
        return ZERO
    return number
