"""Core business logic and protocols.

This module contains the platform-agnostic portfolio state: the project
carousel, the theme flag, the scroll indicator and the pure section
renderers built on top of them.
"""

from src.core.carousel_logic import (
    ROTATION_INTERVAL_SECONDS,
    CarouselController,
    CarouselState,
    CarouselTransition,
    Direction,
    DirectionPolicy,
    TransitionSource,
    advanced,
    jumped,
    resolve_direction,
)
from src.core.config import PortfolioSettings
from src.core.content import (
    DEFAULT_CONTENT,
    ContactLink,
    ExperienceEntry,
    PortfolioContent,
    Project,
    SectionHeadings,
    content_from_dict,
)
from src.core.errors import (
    ConfigurationError,
    ErrorCategory,
    InvalidArgumentError,
    PortfolioError,
    classify_error,
)
from src.core.health import HealthChecker, HealthReport, ServiceCheck, ServiceStatus
from src.core.logging import (
    bind_contextvars,
    clear_contextvars,
    configure_logging,
    get_logger,
    unbind_contextvars,
)
from src.core.portfolio import PortfolioSession, PortfolioSnapshot
from src.core.scroll import ScrollProgress, SpringSmoother, scroll_fraction
from src.core.sections import PageView, compose_page, palette_for, slide_animation
from src.core.theme import Theme, ThemeState

__all__ = [
    # Carousel
    "ROTATION_INTERVAL_SECONDS",
    "CarouselController",
    "CarouselState",
    "CarouselTransition",
    "Direction",
    "DirectionPolicy",
    "TransitionSource",
    "advanced",
    "jumped",
    "resolve_direction",
    # Configuration
    "PortfolioSettings",
    # Content
    "DEFAULT_CONTENT",
    "ContactLink",
    "ExperienceEntry",
    "PortfolioContent",
    "Project",
    "SectionHeadings",
    "content_from_dict",
    # Error handling
    "ConfigurationError",
    "ErrorCategory",
    "InvalidArgumentError",
    "PortfolioError",
    "classify_error",
    # Health checks
    "HealthChecker",
    "HealthReport",
    "ServiceCheck",
    "ServiceStatus",
    # Logging
    "bind_contextvars",
    "clear_contextvars",
    "configure_logging",
    "get_logger",
    "unbind_contextvars",
    # Session
    "PortfolioSession",
    "PortfolioSnapshot",
    # Scroll indicator
    "ScrollProgress",
    "SpringSmoother",
    "scroll_fraction",
    # Sections
    "PageView",
    "compose_page",
    "palette_for",
    "slide_animation",
    # Theme
    "Theme",
    "ThemeState",
]
