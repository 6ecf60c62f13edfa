"""Page composition routes.

``/page`` returns every section rendered for the current theme and carousel
position; ``/state`` returns only the snapshot the view layer animates from.
"""

from typing import Any

from fastapi import APIRouter, Depends

from src.api.dependencies import get_session
from src.api.schemas import ProgressResponse, ScrollSample, StateResponse
from src.core.portfolio import PortfolioSession

router = APIRouter(tags=["page"])


@router.get("/page")
async def get_page(session: PortfolioSession = Depends(get_session)) -> dict[str, Any]:
    """Render the whole page."""
    return session.render().to_dict()


@router.get("/state", response_model=StateResponse)
async def get_state(
    session: PortfolioSession = Depends(get_session),
) -> StateResponse:
    return StateResponse.from_snapshot(session.snapshot())


@router.post("/scroll", response_model=ProgressResponse)
async def report_scroll(
    sample: ScrollSample,
    session: PortfolioSession = Depends(get_session),
) -> ProgressResponse:
    """Feed one scroll sample into the progress indicator."""
    smoothed = session.update_scroll(
        sample.scroll_top,
        sample.scroll_height,
        sample.viewport_height,
        elapsed=sample.elapsed,
    )
    return ProgressResponse(raw=session.scroll.raw, smoothed=smoothed)
