"""In-process metrics for compliance engine calls."""

from __future__ import annotations

import math
import threading
from dataclasses import dataclass


@dataclass
class _LatencyAgg:
    total_ms: float = 0.0
    count: int = 0
    max_ms: float = 0.0
    values: list[float] | None = None

    def __post_init__(self) -> None:
        if self.values is None:
            self.values = []

    def add(self, value_ms: float) -> None:
        val = max(0.0, float(value_ms))
        self.total_ms += val
        self.count += 1
        if val > self.max_ms:
            self.max_ms = val
        self.values.append(val)
        if len(self.values) > 5000:
            self.values = self.values[-5000:]

    def p95(self) -> float:
        if not self.values:
            return 0.0
        rows = sorted(self.values)
        idx = max(0, min(len(rows) - 1, math.ceil(len(rows) * 0.95) - 1))
        return rows[idx]

    def snapshot(self) -> dict[str, float]:
        avg_ms = (self.total_ms / self.count) if self.count else 0.0
        return {
            "count": self.count,
            "avg_ms": round(avg_ms, 2),
            "max_ms": round(self.max_ms, 2),
            "p95_ms": round(self.p95(), 2),
        }


@dataclass
class _OperationStats:
    count: int = 0
    ok: int = 0
    error: int = 0
    latency: _LatencyAgg | None = None
    error_codes: dict[str, int] | None = None

    def __post_init__(self) -> None:
        if self.latency is None:
            self.latency = _LatencyAgg()
        if self.error_codes is None:
            self.error_codes = {}


class EngineMetrics:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._total_calls = 0
        self._operations: dict[str, _OperationStats] = {}

    def record(
        self,
        *,
        operation: str,
        latency_ms: float,
        ok: bool,
        error_code: str = "",
    ) -> None:
        key = (operation or "unknown").strip().lower() or "unknown"
        err = (error_code or "").strip()

        with self._lock:
            self._total_calls += 1
            row = self._operations.get(key)
            if row is None:
                row = _OperationStats()
                self._operations[key] = row
            row.count += 1
            row.latency.add(latency_ms)
            if ok:
                row.ok += 1
            else:
                row.error += 1
                if err:
                    row.error_codes[err] = row.error_codes.get(err, 0) + 1

    def snapshot(self) -> dict[str, object]:
        with self._lock:
            operations: dict[str, object] = {}
            for name, row in self._operations.items():
                operations[name] = {
                    "count": row.count,
                    "ok": row.ok,
                    "error": row.error,
                    "success_rate": round(row.ok / row.count, 4) if row.count else 0.0,
                    "latency": row.latency.snapshot(),
                    "error_codes": dict(row.error_codes),
                }
            return {
                "total_calls": self._total_calls,
                "operations": operations,
            }

    def reset(self) -> None:
        with self._lock:
            self._total_calls = 0
            self._operations = {}


_metrics_lock = threading.Lock()
_metrics: EngineMetrics | None = None


def get_engine_metrics() -> EngineMetrics:
    global _metrics
    with _metrics_lock:
        if _metrics is None:
            _metrics = EngineMetrics()
        return _metrics


def observe_operation(
    *,
    operation: str,
    latency_ms: float,
    ok: bool,
    error_code: str = "",
) -> None:
    get_engine_metrics().record(
        operation=operation,
        latency_ms=latency_ms,
        ok=ok,
        error_code=error_code,
    )


__all__ = ["EngineMetrics", "get_engine_metrics", "observe_operation"]
