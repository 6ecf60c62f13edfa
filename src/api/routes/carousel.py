"""Featured-projects carousel routes.

Selecting a project moves the carousel immediately but leaves the
auto-advance timer alone; the next scheduled tick still fires on time.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from src.api.dependencies import get_session
from src.api.schemas import (
    CarouselResponse,
    ErrorResponse,
    ProjectResponse,
    SelectProjectRequest,
    TransitionResponse,
)
from src.core.errors import InvalidArgumentError
from src.core.logging import get_logger
from src.core.portfolio import PortfolioSession

logger = get_logger(__name__)

router = APIRouter(prefix="/carousel", tags=["carousel"])


@router.get("", response_model=CarouselResponse)
async def get_carousel(
    session: PortfolioSession = Depends(get_session),
) -> CarouselResponse:
    carousel = session.carousel
    return CarouselResponse(
        active_index=carousel.active_index,
        direction=carousel.direction,
        total=carousel.total_items,
        running=carousel.is_running,
        interval_seconds=carousel.interval,
        project=ProjectResponse.from_project(carousel.current_item),
    )


@router.post(
    "/select",
    response_model=TransitionResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Index out of range"},
    },
)
async def select_project(
    request: SelectProjectRequest,
    session: PortfolioSession = Depends(get_session),
) -> TransitionResponse:
    """Jump the carousel to the project at ``index``."""
    try:
        transition = session.select_project(request.index)
    except InvalidArgumentError as ex:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=ex.message,
        ) from ex

    logger.info(
        "project_selected",
        previous_index=transition.previous_index,
        active_index=transition.active_index,
        direction=transition.direction,
    )
    return TransitionResponse.from_transition(transition)
