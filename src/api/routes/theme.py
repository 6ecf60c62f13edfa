"""Theme toggle route."""

from fastapi import APIRouter, Depends

from src.api.dependencies import get_session
from src.api.schemas import ThemeResponse
from src.core.logging import get_logger
from src.core.portfolio import PortfolioSession
from src.core.sections import render_theme_toggle

logger = get_logger(__name__)

router = APIRouter(prefix="/theme", tags=["theme"])


def _theme_response(session: PortfolioSession) -> ThemeResponse:
    theme = session.theme.theme
    return ThemeResponse(
        theme=theme,
        is_dark=theme.is_dark,
        toggle_label=render_theme_toggle(theme).label,
    )


@router.get("", response_model=ThemeResponse)
async def get_theme(session: PortfolioSession = Depends(get_session)) -> ThemeResponse:
    return _theme_response(session)


@router.post("/toggle", response_model=ThemeResponse)
async def toggle_theme(
    session: PortfolioSession = Depends(get_session),
) -> ThemeResponse:
    """Switch between the dark and light variants."""
    theme = session.toggle_theme()
    logger.info("theme_toggled", theme=theme)
    return _theme_response(session)
