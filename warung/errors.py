"""Error taxonomy for order taking and processing."""

from __future__ import annotations

from decimal import Decimal


class OrderError(Exception):
    """Base class for errors that abort an ordering session."""


class InvalidInput(OrderError):
    def __init__(self, text: str) -> None:
        super().__init__(text)
        self.text = text

    def __str__(self) -> str:
        return f"input may only contain letters and spaces: {self.text!r}"


class UnknownMenuItem(OrderError):
    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"menu item {self.name!r} is not available"


class InvalidQuantity(OrderError):
    def __init__(self, text: str) -> None:
        super().__init__(text)
        self.text = text

    def __str__(self) -> str:
        return f"invalid quantity: {self.text!r}"


class InvalidPayment(OrderError):
    def __init__(self, text: str) -> None:
        super().__init__(text)
        self.text = text

    def __str__(self) -> str:
        return f"invalid payment amount: {self.text!r}"


class InsufficientPayment(OrderError):
    def __init__(self, payment: Decimal, total: Decimal) -> None:
        super().__init__(payment, total)
        self.payment = payment
        self.total = total

    def __str__(self) -> str:
        return f"payment {self.payment:.2f} is less than total {self.total:.2f}"


class OrderTimeout(OrderError):
    """An order was not accepted into the processing pipeline before its deadline."""

    def __init__(self, order_id: str, timeout: float) -> None:
        super().__init__(order_id, timeout)
        self.order_id = order_id
        self.timeout = timeout

    def __str__(self) -> str:
        return f"order {self.order_id} timed out after {self.timeout:g}s waiting for the processing queue"
