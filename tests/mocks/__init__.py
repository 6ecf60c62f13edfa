"""Test doubles for the portfolio ports."""

from tests.mocks.scheduler import FakeScheduler, FakeTimer

__all__ = ["FakeScheduler", "FakeTimer"]
