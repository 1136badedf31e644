"""Engine metrics tests."""

from __future__ import annotations

from schengen_calc.observability.engine_metrics import EngineMetrics, get_engine_metrics, observe_operation


def test_record_ok_and_error():
    metrics = EngineMetrics()
    metrics.record(operation="compute_status", latency_ms=4.0, ok=True)
    metrics.record(operation="Compute_Status ", latency_ms=6.0, ok=False, error_code="INVALID_INTERVAL")

    snap = metrics.snapshot()
    assert snap["total_calls"] == 2
    row = snap["operations"]["compute_status"]
    assert row["count"] == 2
    assert row["ok"] == 1
    assert row["error"] == 1
    assert row["success_rate"] == 0.5
    assert row["error_codes"] == {"INVALID_INTERVAL": 1}
    assert row["latency"]["avg_ms"] == 5.0
    assert row["latency"]["max_ms"] == 6.0


def test_negative_latency_is_clamped():
    metrics = EngineMetrics()
    metrics.record(operation="x", latency_ms=-3, ok=True)
    assert metrics.snapshot()["operations"]["x"]["latency"]["max_ms"] == 0.0


def test_reset():
    observe_operation(operation="find_safe_window", latency_ms=1.0, ok=True)
    assert get_engine_metrics().snapshot()["total_calls"] == 1
    get_engine_metrics().reset()
    assert get_engine_metrics().snapshot() == {"total_calls": 0, "operations": {}}
