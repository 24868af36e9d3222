"""
Pytest configuration for viewer tests

Provides dataset fixtures shared across unit and integration tests
"""

from __future__ import annotations

import json

import pytest

from tdviewer.observability.telemetry import reset_telemetry
from tests.fixtures.datasets import conversation_record


@pytest.fixture(autouse=True)
def _clean_telemetry():
    reset_telemetry()
    yield
    reset_telemetry()


@pytest.fixture
def mixed_paths() -> list[str | None]:
    """Path hints for 12 records: 4 python, 4 javascript, 2 rust, 1 jupyter, 1 without a hint."""
    return [
        "src/app.py",
        "web/index.js",
        "src/util.py",
        None,
        "lib/main.rs",
        "web/App.jsx",
        "notebooks/eda.ipynb#W1sZmlsZQ==",
        "src/models.py",
        "web/store.js",
        "src/views.py",
        "crates/core.rs",
        "web/api.js",
    ]


@pytest.fixture
def mixed_jsonl(mixed_paths) -> str:
    """
    JSONL text with a blank line after every third record.

    Record i lands on source line i + i // 3.
    """
    lines = []
    for i, path in enumerate(mixed_paths):
        lines.append(json.dumps(conversation_record(path)))
        if i % 3 == 2:
            lines.append("")
    return "\n".join(lines)


@pytest.fixture
def mixed_json(mixed_paths) -> str:
    return json.dumps([conversation_record(p) for p in mixed_paths])
