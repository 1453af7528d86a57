"""Editable static menu configuration."""

from __future__ import annotations

# Unit prices in rupiah, as decimal strings. Keys are lowercase menu names.
MENU_PRICES: dict[str, str] = {
    "nasi goreng": "25000.00",
    "ayam bakar": "30000.00",
}
