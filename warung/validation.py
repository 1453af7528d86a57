"""Typed validators for console input."""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation

from warung.config import MAX_QUANTITY
from warung.errors import InvalidInput, InvalidPayment, InvalidQuantity
from warung.models import to_money

_TEXT_PATTERN = re.compile(r"^[a-zA-Z\s]+$")
_AMOUNT_PATTERN = re.compile(r"^\d+(\.\d{2})?$")


def normalize(raw: str) -> str:
    """Trim and lowercase a raw input line."""
    return raw.strip().lower()


def validate_text(text: str) -> str:
    """Accept letters and whitespace only."""
    if not _TEXT_PATTERN.match(text):
        raise InvalidInput(text)
    return text


def validate_amount(amount: Decimal) -> Decimal:
    """Accept finite, non-negative amounts with at most two fraction digits."""
    if not amount.is_finite():
        raise InvalidPayment(str(amount))
    rendered = f"{amount:.2f}"
    if not _AMOUNT_PATTERN.match(rendered):
        raise InvalidPayment(rendered)
    return amount


def parse_quantity(raw: str) -> int:
    text = raw.strip()
    try:
        quantity = int(text)
    except ValueError:
        raise InvalidQuantity(text) from None
    if not 0 < quantity <= MAX_QUANTITY:
        raise InvalidQuantity(text)
    return quantity


def parse_payment(raw: str) -> Decimal:
    text = raw.strip()
    try:
        return to_money(validate_amount(Decimal(text)))
    except InvalidOperation:
        raise InvalidPayment(text) from None
