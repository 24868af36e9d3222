"""Health check endpoint for the viewer API.

- /health - Service status, version and what is currently loaded
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Request

from tdviewer.config import APP_VERSION, SERVICE_NAME
from tdviewer.observability.telemetry import get_counters, get_latency_stats

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(request: Request) -> dict[str, Any]:
    """Health check endpoint.

    Returns service status, version and the size of the loaded dataset.
    """
    state = request.app.state.viewer

    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": APP_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "dataset": {
            "conversations": len(state.dataset),
            "languages": len(state.languages),
            "current_filter": state.current_filter,
        },
        "counters": get_counters(),
        "parse_latency": get_latency_stats("viewer.parse.latency"),
    }
