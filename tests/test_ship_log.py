"""Outcome log ordering and capacity."""

from __future__ import annotations

from iso_drift.constants import LOG_LINES
from iso_drift.models.ship_log import ShipLog


def test_newest_line_first() -> None:
    log = ShipLog()
    log.add("one")
    log.add("two")
    assert log.lines == ["two", "one"]


def test_extend_keeps_event_order() -> None:
    log = ShipLog()
    log.extend(["repaired", "refueled"])
    assert log.lines[0] == "refueled"


def test_capacity_drops_the_oldest() -> None:
    log = ShipLog()
    for i in range(LOG_LINES + 3):
        log.add(f"line {i}")
    assert len(log.lines) == LOG_LINES
    assert log.lines[0] == f"line {LOG_LINES + 2}"
    assert "line 0" not in log.lines


def test_clear() -> None:
    log = ShipLog(capacity=2)
    log.extend(["a", "b", "c"])
    assert log.lines == ["c", "b"]
    log.clear()
    assert log.lines == []
