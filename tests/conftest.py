"""pytest 全局 fixtures: 测试环境隔离"""

import io

import pytest


@pytest.fixture(autouse=True)
def isolated_engine_env(monkeypatch):
    """默认清除引擎相关环境变量，并重置 metrics / logger 单例"""
    monkeypatch.delenv("SCHENGEN_MEMBERS", raising=False)
    monkeypatch.delenv("SCHENGEN_EXTRA_MEMBERS", raising=False)
    monkeypatch.delenv("SAFE_WINDOW_HORIZON_DAYS", raising=False)
    monkeypatch.delenv("LOW_REMAINING_THRESHOLD", raising=False)

    from schengen_calc.infrastructure.logging import StructuredLogger, reset_logger
    from schengen_calc.observability.engine_metrics import get_engine_metrics
    import schengen_calc.infrastructure.logging as logging_mod

    # Keep structured log lines out of the test output.
    monkeypatch.setattr(logging_mod, "_logger", StructuredLogger(trace_id="test", output=io.StringIO()))
    get_engine_metrics().reset()
    yield
    get_engine_metrics().reset()
    reset_logger()
