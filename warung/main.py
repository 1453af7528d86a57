"""Entry point for the warung order-taking console."""

from __future__ import annotations

from rich.console import Console

from warung.logs import configure_logging
from warung.processor import OrderProcessor
from warung.session import run_session


def main() -> int:
    """Run one interactive ordering session."""
    configure_logging()
    try:
        return run_session(Console(), OrderProcessor())
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
