"""Facility listing routes (page, HTML fragment, JSON)."""
from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse

from facility_directory.api.deps import get_facility_state
from facility_directory.core.config import settings
from facility_directory.services.facility_filter import filter_facilities
from facility_directory.services.facility_renderer import render_for_state
from facility_directory.services.facility_state import FacilityState
from facility_directory.services.page import render_page

router = APIRouter(tags=["facilities"])

STATUS_HEADER = "X-Dataset-Status"


@router.get("/", response_class=HTMLResponse)
async def index(
    q: str = Query(""),
    state: FacilityState = Depends(get_facility_state),
):
    status, _ = state.snapshot()
    listing = render_for_state(state, q)
    return render_page(
        listing,
        term=q,
        debounce_ms=settings.SEARCH_DEBOUNCE_MS,
        status=status,
    )


@router.get("/unidades/cards", response_class=HTMLResponse)
async def listing_fragment(
    q: str = Query(""),
    state: FacilityState = Depends(get_facility_state),
):
    """Markup that replaces the listing container for search term ``q``.

    The dataset status travels in the X-Dataset-Status header so the page
    knows when to stop polling.
    """
    status, _ = state.snapshot()
    return HTMLResponse(render_for_state(state, q), headers={STATUS_HEADER: status})


@router.get("/unidades")
async def list_facilities(
    q: str = Query(""),
    state: FacilityState = Depends(get_facility_state),
):
    status, records = state.snapshot()
    items = filter_facilities(records, q)
    return {
        "status": status,
        "count": len(items),
        "items": [r.model_dump() for r in items],
    }
