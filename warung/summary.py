"""Order summary text and its reversible base64 encoding."""

from __future__ import annotations

import base64

from warung.models import Order


def summary_text(order: Order) -> str:
    """Render the plain summary line for a finalized order."""
    if order.payment is None or order.change is None:
        raise ValueError(f"order {order.order_id} has no payment recorded")
    return f"Total: {order.total:.2f}, Payment: {order.payment:.2f}, Change: {order.change:.2f}"


def encode_summary(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def decode_summary(encoded: str) -> str:
    return base64.b64decode(encoded.encode("ascii"), validate=True).decode("utf-8")


def summarize(order: Order) -> str:
    """Compute, encode and store the order summary; returns the encoded text."""
    order.summary = encode_summary(summary_text(order))
    return order.summary
