from __future__ import annotations

from warung import main as entry
from warung.processor import OrderProcessor


def test_main_runs_one_session(monkeypatch):
    seen = {}

    def fake_run_session(console, processor):
        seen["processor"] = processor
        return 0

    monkeypatch.setattr(entry, "configure_logging", lambda: None)
    monkeypatch.setattr(entry, "run_session", fake_run_session)
    assert entry.main() == 0
    assert isinstance(seen["processor"], OrderProcessor)


def test_main_maps_interrupt_to_exit_code(monkeypatch):
    def interrupted(console, processor):
        raise KeyboardInterrupt

    monkeypatch.setattr(entry, "configure_logging", lambda: None)
    monkeypatch.setattr(entry, "run_session", interrupted)
    assert entry.main() == 130
