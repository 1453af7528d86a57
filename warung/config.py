"""Runtime configuration defaults for order processing and the console session."""

from __future__ import annotations

import os

QUEUE_CAPACITY = 10
MAX_QUANTITY = 1000
ORDER_TIMEOUT_SECONDS = float(os.environ.get("WARUNG_ORDER_TIMEOUT_SECONDS", "5"))

LOG_LEVEL = os.environ.get("WARUNG_LOG_LEVEL", "WARNING").strip().upper() or "WARNING"

DONE_SENTINEL = "selesai"
CURRENCY_PREFIX = "Rp"

FAREWELL_LINES = (
    "",
    "Terima kasih, see you again at the warung.",
    "Program selesai",
)
