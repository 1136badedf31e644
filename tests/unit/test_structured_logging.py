"""StructuredLogger output format."""

import io
import json

from schengen_calc.infrastructure.logging import StructuredLogger


def _lines(buf: io.StringIO) -> list[dict]:
    return [json.loads(line) for line in buf.getvalue().splitlines()]


def test_op_start_and_end():
    buf = io.StringIO()
    logger = StructuredLogger(trace_id="abc", output=buf)
    logger.op_start("compute_status", visits=2)
    logger.op_end("compute_status", ok=True)

    start, end = _lines(buf)
    assert start["event"] == "op_start"
    assert start["visits"] == 2
    assert end["event"] == "op_end"
    assert end["ok"] is True
    assert end["duration_ms"] >= 0
    assert start["trace_id"] == end["trace_id"] == "abc"


def test_dates_are_serialized():
    from datetime import date

    buf = io.StringIO()
    StructuredLogger(trace_id="t", output=buf).summary(next_reset=date(2024, 1, 2))
    assert _lines(buf)[0]["next_reset"] == "2024-01-02"
