from __future__ import annotations

import base64

import pytest

from tests.conftest import make_order
from warung.summary import decode_summary, encode_summary, summarize, summary_text


def test_summary_text_format():
    order = make_order(("Nasi Goreng", "25000", 1), ("Ayam Bakar", "30000", 1), payment="60000")
    assert summary_text(order) == "Total: 55000.00, Payment: 60000.00, Change: 5000.00"


def test_summarize_stores_reversible_encoding():
    order = make_order(("Nasi Goreng", "25000", 1), ("Ayam Bakar", "30000", 1), payment="60000")
    encoded = summarize(order)
    assert order.summary == encoded
    assert decode_summary(encoded) == "Total: 55000.00, Payment: 60000.00, Change: 5000.00"


def test_encoding_is_standard_base64():
    text = "Total: 85000.00, Payment: 100000.00, Change: 15000.00"
    assert encode_summary(text) == base64.b64encode(text.encode()).decode()


def test_summary_requires_payment():
    order = make_order(("Nasi Goreng", "25000", 1))
    with pytest.raises(ValueError):
        summary_text(order)
