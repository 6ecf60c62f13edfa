"""The root owner of all UI state for one page.

A ``PortfolioSession`` holds the theme, the carousel controller and the
scroll indicator, and is the only place they are created. Sections read
from it through ``render()``; user interactions go through its methods.
Mounting starts the carousel timer and unmounting cancels it.
"""

import time
from collections.abc import Callable
from dataclasses import dataclass
from types import TracebackType

from src.core.carousel_logic import (
    CarouselController,
    CarouselTransition,
    Direction,
    DirectionPolicy,
    ROTATION_INTERVAL_SECONDS,
)
from src.core.content import DEFAULT_CONTENT, PortfolioContent, Project
from src.core.logging import get_logger
from src.core.scroll import ScrollProgress
from src.core.sections import PageView, compose_page
from src.core.theme import Theme, ThemeState
from src.ports.scheduler import Scheduler

logger = get_logger(__name__)


@dataclass(frozen=True)
class PortfolioSnapshot:
    """The state the view layer needs: what is shown, which way it moved, which theme."""

    active_index: int
    direction: Direction
    is_dark: bool


class PortfolioSession:
    """One mounted portfolio page.

    Example:
        session = PortfolioSession(scheduler=AsyncioScheduler())
        with session:
            session.select_project(1)
            view = session.render()
    """

    def __init__(
        self,
        content: PortfolioContent = DEFAULT_CONTENT,
        scheduler: Scheduler | None = None,
        rotation_seconds: float = ROTATION_INTERVAL_SECONDS,
        direction_policy: DirectionPolicy = DirectionPolicy.CIRCULAR,
        start_dark: bool = True,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._content = content
        self._theme = ThemeState(is_dark=start_dark)
        self._carousel: CarouselController[Project] = CarouselController(
            content.projects,
            scheduler=scheduler,
            interval=rotation_seconds,
            direction_policy=direction_policy,
        )
        self._scroll = ScrollProgress()
        self._clock = clock
        self._scroll_time = clock()

    @property
    def content(self) -> PortfolioContent:
        return self._content

    @property
    def theme(self) -> ThemeState:
        return self._theme

    @property
    def carousel(self) -> CarouselController[Project]:
        return self._carousel

    @property
    def scroll(self) -> ScrollProgress:
        return self._scroll

    @property
    def is_mounted(self) -> bool:
        return self._carousel.is_running

    def mount(self) -> None:
        self._carousel.start()
        logger.info(
            "portfolio_mounted",
            projects=self._carousel.total_items,
            theme=self._theme.theme,
        )

    def unmount(self) -> None:
        self._carousel.stop()
        logger.info("portfolio_unmounted")

    def __enter__(self) -> "PortfolioSession":
        self.mount()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.unmount()

    def toggle_theme(self) -> Theme:
        return self._theme.toggle()

    def select_project(self, index: int) -> CarouselTransition:
        """Jump the carousel to ``index``; see ``CarouselController.go_to``."""
        return self._carousel.go_to(index)

    def update_scroll(
        self,
        scroll_top: float,
        scroll_height: float,
        viewport_height: float,
        elapsed: float | None = None,
    ) -> float:
        """Feed a scroll sample and advance the smoothing.

        Args:
            elapsed: Seconds to advance the spring by. Defaults to the time
                measured on the session clock since the previous sample.

        Returns:
            The smoothed progress value.
        """
        now = self._clock()
        if elapsed is None:
            elapsed = max(0.0, now - self._scroll_time)
        self._scroll_time = now
        self._scroll.update(scroll_top, scroll_height, viewport_height)
        return self._scroll.tick(elapsed)

    def _settle_scroll(self) -> float:
        now = self._clock()
        elapsed = max(0.0, now - self._scroll_time)
        self._scroll_time = now
        return self._scroll.tick(elapsed)

    def snapshot(self) -> PortfolioSnapshot:
        return PortfolioSnapshot(
            active_index=self._carousel.active_index,
            direction=self._carousel.direction,
            is_dark=self._theme.is_dark,
        )

    def render(self) -> PageView:
        """Render the page, letting the progress spring catch up to now."""
        return compose_page(
            self._theme.theme,
            self._carousel.state,
            self._content,
            progress=self._settle_scroll(),
        )
