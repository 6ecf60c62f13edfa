"""Dark/light theme state."""

from collections.abc import Callable
from enum import Enum

from src.core.logging import get_logger

logger = get_logger(__name__)


class Theme(Enum):
    DARK = "dark"
    LIGHT = "light"

    @property
    def is_dark(self) -> bool:
        return self is Theme.DARK

    def toggled(self) -> "Theme":
        return Theme.LIGHT if self is Theme.DARK else Theme.DARK

    @classmethod
    def from_flag(cls, is_dark: bool) -> "Theme":
        return cls.DARK if is_dark else cls.LIGHT


ThemeListener = Callable[[Theme], None]


class ThemeState:
    """Single source of truth for which rendering variant every section uses.

    Starts dark unless told otherwise; ``toggle()`` is the only mutation.
    """

    def __init__(self, is_dark: bool = True) -> None:
        self._theme = Theme.from_flag(is_dark)
        self._listeners: list[ThemeListener] = []

    @property
    def theme(self) -> Theme:
        return self._theme

    @property
    def is_dark(self) -> bool:
        return self._theme.is_dark

    def subscribe(self, listener: ThemeListener) -> Callable[[], None]:
        """Register a listener called with the new theme after each toggle."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def toggle(self) -> Theme:
        """Flip between dark and light and return the new theme."""
        self._theme = self._theme.toggled()
        logger.debug("theme_toggled", theme=self._theme)
        for listener in list(self._listeners):
            try:
                listener(self._theme)
            except Exception:
                logger.exception("theme_listener_failed", theme=self._theme)
        return self._theme
