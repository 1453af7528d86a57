"""Static menu data."""

from __future__ import annotations

from decimal import Decimal
from types import MappingProxyType
from typing import Mapping

from warung.constant import MENU_PRICES as _MENU_PRICES_RAW
from warung.errors import UnknownMenuItem
from warung.models import to_money

# Read-only after import; safe to share with worker threads.
MENU: Mapping[str, Decimal] = MappingProxyType(
    {name.strip().lower(): to_money(Decimal(price)) for name, price in _MENU_PRICES_RAW.items()}
)


def price_for(name: str) -> Decimal:
    """Look up the unit price for a normalized menu name."""
    try:
        return MENU[name]
    except KeyError:
        raise UnknownMenuItem(name) from None


def menu_entries() -> list[tuple[str, Decimal]]:
    """Return (display name, price) pairs in menu order."""
    return [(display_name(name), price) for name, price in MENU.items()]


def display_name(name: str) -> str:
    """Title-case a menu name for display and receipts."""
    return name.title()
