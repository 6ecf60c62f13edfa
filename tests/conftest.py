"""Shared pytest fixtures for portfolio tests."""

import pytest

from src.core.carousel_logic import CarouselController
from src.core.content import DEFAULT_CONTENT, Project
from src.core.portfolio import PortfolioSession
from tests.mocks.scheduler import FakeScheduler


@pytest.fixture
def fake_scheduler() -> FakeScheduler:
    """Provide a scheduler with a manual clock starting at 0."""
    return FakeScheduler()


@pytest.fixture
def projects() -> tuple[Project, ...]:
    """Provide the three built-in projects."""
    return DEFAULT_CONTENT.projects


@pytest.fixture
def controller(
    projects: tuple[Project, ...], fake_scheduler: FakeScheduler
) -> CarouselController[Project]:
    """Provide a stopped carousel over the built-in projects."""
    return CarouselController(projects, scheduler=fake_scheduler)


@pytest.fixture
def session(fake_scheduler: FakeScheduler) -> PortfolioSession:
    """Provide an unmounted session on the fake scheduler.

    Example:
        def test_rotates(session, fake_scheduler):
            with session:
                fake_scheduler.advance_time(10)
            assert session.carousel.active_index == 1
    """
    return PortfolioSession(
        scheduler=fake_scheduler, clock=lambda: fake_scheduler.now
    )
