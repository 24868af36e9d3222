"""
In-process telemetry for the viewer.

Three things are tracked, none of them shipped anywhere:
- events (dataset loaded, file uploaded), written to the log with counts
  and filenames only, never message text
- counters (loads, rejected uploads, validation errors)
- parse timings in milliseconds, summarised on /health
"""

from __future__ import annotations

import contextlib
import time
from collections import Counter, defaultdict
from collections.abc import Iterator
from typing import Any

from tdviewer.observability.logging import get_logger

logger = get_logger("tdviewer.telemetry")

_counters: Counter[str] = Counter()
_timings_ms: defaultdict[str, list[float]] = defaultdict(list)


def log_event(event_name: str, **fields: Any) -> None:
    logger.info("event=%s %s", event_name, fields)


def counter(name: str, increment: int = 1) -> int:
    """Add to a named counter and return the new total."""
    _counters[name] += increment
    return _counters[name]


def get_counters() -> dict[str, int]:
    return dict(_counters)


@contextlib.contextmanager
def time_block(metric_name: str) -> Iterator[None]:
    """
    Record how long the block took under ``metric_name``.

    The timing is kept even when the block raises, so failed parses show
    up in the stats too.
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000
        _timings_ms[metric_name].append(elapsed_ms)
        logger.debug("timing=%s ms=%.3f", metric_name, elapsed_ms)


def get_latency_stats(metric_name: str) -> dict[str, float]:
    """count, min, max, avg and p95 in milliseconds (all zero before any sample)."""
    samples = sorted(_timings_ms.get(metric_name, ()))
    if not samples:
        return {"count": 0, "min_ms": 0.0, "max_ms": 0.0, "avg_ms": 0.0, "p95_ms": 0.0}

    count = len(samples)
    return {
        "count": count,
        "min_ms": samples[0],
        "max_ms": samples[-1],
        "avg_ms": sum(samples) / count,
        "p95_ms": samples[min(count - 1, int(count * 0.95))],
    }


def reset_telemetry() -> None:
    """Forget all counters and timings (tests call this between cases)."""
    _counters.clear()
    _timings_ms.clear()
