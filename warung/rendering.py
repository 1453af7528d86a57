"""Rich renderables for the console session."""

from __future__ import annotations

from decimal import Decimal

from rich.table import Table
from rich.text import Text

from warung.config import CURRENCY_PREFIX, DONE_SENTINEL
from warung.models import Order


def format_money(amount: Decimal) -> str:
    """Render an amount with the currency prefix and two decimals."""
    return f"{CURRENCY_PREFIX}{amount:.2f}"


def menu_table(entries: list[tuple[str, Decimal]]) -> Table:
    """Render the menu as a two-column table."""
    table = Table(
        title="Menu",
        title_justify="left",
        caption=f"Type a menu name, or '{DONE_SENTINEL}' to finish",
        caption_justify="left",
        show_edge=False,
    )
    table.add_column("Item", style="bold")
    table.add_column("Price", justify="right")
    for name, price in entries:
        table.add_row(name, format_money(price))
    return table


def order_table(order: Order) -> Table:
    """Render the order lines with a total footer."""
    table = Table(title="Your order", title_justify="left", show_footer=True, show_edge=False)
    table.add_column("Item", footer="Total")
    table.add_column("Qty", justify="right")
    table.add_column("Subtotal", justify="right", footer=format_money(order.total))
    for item in order.items:
        table.add_row(item.name, f"x{item.quantity}", format_money(item.subtotal))
    return table


def receipt_text(order: Order) -> Text:
    """Render payment, change and the encoded summary of a processed order."""
    text = Text()
    text.append("Paid: ", style="bold")
    text.append(format_money(order.payment or Decimal(0)))
    text.append("\nChange: ", style="bold")
    text.append(format_money(order.change or Decimal(0)))
    text.append("\nOrder (encoded): ", style="bold")
    text.append(order.summary or "", style="cyan")
    return text
