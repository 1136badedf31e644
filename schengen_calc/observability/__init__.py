"""Observability helpers."""

from schengen_calc.observability.engine_metrics import EngineMetrics, get_engine_metrics, observe_operation

__all__ = ["EngineMetrics", "get_engine_metrics", "observe_operation"]
