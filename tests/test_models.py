from __future__ import annotations

import dataclasses
from decimal import Decimal

import pytest

from warung.errors import InsufficientPayment
from warung.models import MenuItem, Order, OrderStatus, to_money


def test_new_order_is_empty():
    order = Order()
    assert order.items == []
    assert order.total == Decimal("0.00")
    assert order.payment is None
    assert order.change is None
    assert order.summary is None
    assert order.status is OrderStatus.CREATED


def test_total_is_resummed_after_each_item():
    order = Order()
    order.add_item("Nasi Goreng", Decimal("25000"), 2)
    assert order.total == Decimal("50000.00")
    order.add_item("Ayam Bakar", Decimal("30000"), 1)
    assert order.total == Decimal("80000.00")
    order.add_item("Es Teh", Decimal("0.10"), 3)
    assert order.total == Decimal("80000.30")
    assert order.total == sum((item.unit_price * item.quantity for item in order.items), Decimal(0))


def test_small_prices_do_not_drift():
    order = Order()
    for _ in range(100):
        order.add_item("Kerupuk", Decimal("0.10"), 1)
    assert order.total == Decimal("10.00")


def test_items_keep_insertion_order():
    order = Order()
    order.add_item("Ayam Bakar", Decimal("30000"), 1)
    order.add_item("Nasi Goreng", Decimal("25000"), 2)
    assert [item.name for item in order.items] == ["Ayam Bakar", "Nasi Goreng"]


def test_menu_item_is_immutable():
    item = MenuItem("Nasi Goreng", Decimal("25000.00"), 2)
    assert item.subtotal == Decimal("50000.00")
    with pytest.raises(dataclasses.FrozenInstanceError):
        item.quantity = 3  # type: ignore[misc]


def test_finalize_sets_payment_and_change():
    order = Order()
    order.add_item("Nasi Goreng", Decimal("25000"), 2)
    change = order.finalize(Decimal("60000"))
    assert change == Decimal("10000.00")
    assert order.payment == Decimal("60000.00")
    assert order.change == order.payment - order.total
    assert order.status is OrderStatus.FINALIZED


def test_exact_payment_gives_zero_change():
    order = Order()
    order.add_item("Ayam Bakar", Decimal("30000"), 1)
    assert order.finalize(Decimal("30000.00")) == Decimal("0.00")


def test_insufficient_payment_leaves_order_unpaid():
    order = Order()
    order.add_item("Ayam Bakar", Decimal("30000"), 2)
    with pytest.raises(InsufficientPayment) as excinfo:
        order.finalize(Decimal("59999.99"))
    assert excinfo.value.total == Decimal("60000.00")
    assert "less than total 60000.00" in str(excinfo.value)
    assert order.payment is None
    assert order.change is None
    assert order.status is OrderStatus.CREATED


def test_lifecycle_is_enforced():
    order = Order()
    order.add_item("Nasi Goreng", Decimal("25000"), 1)
    order.finalize(Decimal("25000"))
    with pytest.raises(ValueError):
        order.add_item("Ayam Bakar", Decimal("30000"), 1)
    with pytest.raises(ValueError):
        order.finalize(Decimal("30000"))


def test_to_money_rounds_half_up():
    assert to_money(Decimal("1.005")) == Decimal("1.01")
    assert to_money(3) == Decimal("3.00")
