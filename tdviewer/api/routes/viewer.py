"""
Viewer API endpoints.

Every mutating endpoint applies one controller action and returns the
resulting page view, so the client never has to re-fetch.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse

from tdviewer.api.models import (
    FilterRequest,
    LoadRequest,
    PageRequest,
    PageSizeRequest,
    PageViewResponse,
)
from tdviewer.config import INVALID_FILE_MESSAGE
from tdviewer.dataset.ingestion import DatasetLoadError, is_line_delimited
from tdviewer.dataset.state import ViewerState
from tdviewer.observability.logging import get_logger
from tdviewer.observability.telemetry import counter, log_event
from tdviewer.render.page import render_page

router = APIRouter(tags=["viewer"])
logger = get_logger(__name__)


def get_viewer_state(request: Request) -> ViewerState:
    """Dependency: the process-wide controller attached at startup."""
    return request.app.state.viewer


# ============================================================================
# Page
# ============================================================================


@router.get("/", response_class=HTMLResponse)
async def viewer_page(state: ViewerState = Depends(get_viewer_state)) -> HTMLResponse:
    """Render the current view as a standalone HTML page."""
    return HTMLResponse(render_page(state.get_current_page_view()))


# ============================================================================
# JSON API
# ============================================================================


@router.get("/api/view", response_model=PageViewResponse)
async def get_view(state: ViewerState = Depends(get_viewer_state)) -> PageViewResponse:
    return PageViewResponse.from_view(state.get_current_page_view())


@router.post("/api/load", response_model=PageViewResponse)
async def load_file(
    request: LoadRequest,
    state: ViewerState = Depends(get_viewer_state),
) -> PageViewResponse:
    """
    Load a .json or .jsonl file's text, replacing the current dataset.

    A malformed file is rejected as a whole and the previous dataset stays.
    """
    try:
        dataset = state.load_text(request.content, is_line_delimited(request.filename))
    except DatasetLoadError as e:
        counter("api.load_failures")
        logger.warning("Rejected upload %s: %s", request.filename, e)
        raise HTTPException(status_code=400, detail=INVALID_FILE_MESSAGE) from None
    except Exception as e:
        logger.error("Failed to load %s: %s", request.filename, e)
        raise HTTPException(status_code=500, detail="Failed to load file") from None

    log_event("api.file_loaded", filename=request.filename, conversations=len(dataset))
    return PageViewResponse.from_view(state.get_current_page_view())


@router.post("/api/sample", response_model=PageViewResponse)
async def load_sample(state: ViewerState = Depends(get_viewer_state)) -> PageViewResponse:
    state.load_sample()
    return PageViewResponse.from_view(state.get_current_page_view())


@router.post("/api/filter", response_model=PageViewResponse)
async def set_filter(
    request: FilterRequest,
    state: ViewerState = Depends(get_viewer_state),
) -> PageViewResponse:
    """Filter by language label, or "all"; resets to page 1."""
    state.set_filter(request.criterion)
    return PageViewResponse.from_view(state.get_current_page_view())


@router.post("/api/page", response_model=PageViewResponse)
async def set_page(
    request: PageRequest,
    state: ViewerState = Depends(get_viewer_state),
) -> PageViewResponse:
    """Jump to a page. Pages outside 1..total_pages come back empty, not as errors."""
    state.set_page(request.page)
    return PageViewResponse.from_view(state.get_current_page_view())


@router.post("/api/page-size", response_model=PageViewResponse)
async def set_page_size(
    request: PageSizeRequest,
    state: ViewerState = Depends(get_viewer_state),
) -> PageViewResponse:
    try:
        state.set_page_size(request.items_per_page)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from None
    return PageViewResponse.from_view(state.get_current_page_view())
