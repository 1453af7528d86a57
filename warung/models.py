"""Domain models for warung order taking."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from uuid import uuid4

from warung.errors import InsufficientPayment

_CENTS = Decimal("0.01")


def to_money(value: Decimal | int) -> Decimal:
    """Quantize a value to two fraction digits."""
    return Decimal(value).quantize(_CENTS, rounding=ROUND_HALF_UP)


class OrderStatus(str, Enum):
    CREATED = "created"
    FINALIZED = "finalized"
    SUBMITTED = "submitted"
    SUMMARIZED = "summarized"
    DROPPED = "dropped"


@dataclass(frozen=True)
class MenuItem:
    """A selected menu line: unit price times quantity."""

    name: str
    unit_price: Decimal
    quantity: int

    @property
    def subtotal(self) -> Decimal:
        return to_money(self.unit_price * self.quantity)


@dataclass
class Order:
    """An accumulating order with derived total, payment and change."""

    items: list[MenuItem] = field(default_factory=list)
    total: Decimal = field(default_factory=lambda: to_money(0))
    payment: Decimal | None = None
    change: Decimal | None = None
    summary: str | None = None
    status: OrderStatus = OrderStatus.CREATED
    order_id: str = field(default_factory=lambda: uuid4().hex[:8])

    def add_item(self, name: str, unit_price: Decimal, quantity: int) -> MenuItem:
        """Append a line item and recompute the total from scratch."""
        if self.status is not OrderStatus.CREATED:
            raise ValueError(f"cannot add items to a {self.status.value} order")
        item = MenuItem(name=name, unit_price=to_money(unit_price), quantity=quantity)
        self.items.append(item)
        self._recalculate_total()
        return item

    def finalize(self, payment: Decimal) -> Decimal:
        """Record payment and compute change; returns the change."""
        if self.status is not OrderStatus.CREATED:
            raise ValueError(f"cannot finalize a {self.status.value} order")
        payment = to_money(payment)
        if payment < self.total:
            raise InsufficientPayment(payment, self.total)
        self.payment = payment
        self.change = to_money(payment - self.total)
        self.status = OrderStatus.FINALIZED
        return self.change

    def _recalculate_total(self) -> None:
        self.total = to_money(sum((item.unit_price * item.quantity for item in self.items), Decimal(0)))
