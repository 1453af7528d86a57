"""Interactive console session: menu selection, payment and receipt."""

from __future__ import annotations

import logging
from queue import Empty
from typing import TextIO

from rich.console import Console

from warung.config import DONE_SENTINEL, FAREWELL_LINES
from warung.data import display_name, menu_entries, price_for
from warung.errors import OrderError
from warung.models import Order
from warung.processor import OrderProcessor
from warung.rendering import format_money, menu_table, order_table, receipt_text
from warung.validation import normalize, parse_payment, parse_quantity, validate_text

logger = logging.getLogger("warung.session")


def run_session(console: Console, processor: OrderProcessor, stream: TextIO | None = None) -> int:
    """Take one order from the console; returns a process exit code."""
    try:
        order = collect_items(console, stream)
        console.print()
        console.print(order_table(order))

        payment = parse_payment(_read_line(console, "\nAmount paid: ", stream))
        order.finalize(payment)

        processor.submit(order)
        processor.await_all()
        processor.shutdown()
        try:
            processed = processor.take()
        except Empty:
            logger.info("order %s produced no result", order.order_id)
            console.print("No processed order is available: the order timed out.", style="bold red")
            return 1

        console.print()
        console.print(receipt_text(processed))
        return 0
    except OrderError as exc:
        logger.info("session aborted: %s", exc)
        console.print(f"Error: {exc}", style="bold red", markup=False)
        return 1
    finally:
        print_farewell(console)


def collect_items(console: Console, stream: TextIO | None = None) -> Order:
    """Read menu selections until the done sentinel."""
    order = Order()
    while True:
        console.print()
        console.print(menu_table(menu_entries()))
        choice = normalize(_read_line(console, "Choice: ", stream))
        if choice == DONE_SENTINEL:
            return order

        validate_text(choice)
        price = price_for(choice)
        quantity = parse_quantity(_read_line(console, "Quantity: ", stream))
        item = order.add_item(display_name(choice), price, quantity)
        console.print(f"Added {item.name} x{item.quantity}, running total {format_money(order.total)}", markup=False)


def print_farewell(console: Console) -> None:
    for line in FAREWELL_LINES:
        console.print(line, markup=False)


def _read_line(console: Console, prompt: str, stream: TextIO | None) -> str:
    try:
        return console.input(prompt, markup=False, stream=stream)
    except EOFError:
        return ""
