"""Shared pytest fixtures."""

from __future__ import annotations

import io
import time
from decimal import Decimal
from typing import Callable

import pytest
from rich.console import Console

from warung.models import Order


def wait_until(predicate: Callable[[], bool], timeout: float = 2.0) -> None:
    """Poll until predicate holds; fail the test when the deadline passes."""
    deadline = time.monotonic() + timeout
    while not predicate():
        if time.monotonic() > deadline:
            pytest.fail("condition not met before deadline")
        time.sleep(0.005)


def make_order(*lines: tuple[str, str, int], payment: str | None = None) -> Order:
    order = Order()
    for name, price, quantity in lines:
        order.add_item(name, Decimal(price), quantity)
    if payment is not None:
        order.finalize(Decimal(payment))
    return order


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), width=120, color_system=None, force_terminal=False)


@pytest.fixture
def finalized_order() -> Order:
    return make_order(("Nasi Goreng", "25000", 1), ("Ayam Bakar", "30000", 1), payment="60000")
