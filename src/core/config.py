"""Settings read from the environment.

Variables:
    PORTFOLIO_ROTATION_SECONDS: Carousel auto-advance interval (default 10).
    PORTFOLIO_DIRECTION_POLICY: "circular" or "linear" (default circular).
    PORTFOLIO_CONTENT_PATH: Optional JSON file replacing the built-in content.
    PORTFOLIO_START_DARK: Initial theme, "true" for dark (default true).
"""

import math
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from src.core.carousel_logic import ROTATION_INTERVAL_SECONDS, DirectionPolicy
from src.core.errors import ConfigurationError

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class PortfolioSettings:
    rotation_seconds: float = ROTATION_INTERVAL_SECONDS
    direction_policy: DirectionPolicy = DirectionPolicy.CIRCULAR
    content_path: Path | None = None
    start_dark: bool = True

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "PortfolioSettings":
        """Build settings from ``environ`` (defaults to ``os.environ``).

        Raises:
            ConfigurationError: If a variable is set to an unusable value.
        """
        env = os.environ if environ is None else environ

        raw_seconds = env.get("PORTFOLIO_ROTATION_SECONDS")
        rotation_seconds = ROTATION_INTERVAL_SECONDS
        if raw_seconds:
            try:
                rotation_seconds = float(raw_seconds)
            except ValueError as ex:
                raise ConfigurationError(
                    f"PORTFOLIO_ROTATION_SECONDS is not a number: {raw_seconds!r}",
                    setting="PORTFOLIO_ROTATION_SECONDS",
                ) from ex
            if not math.isfinite(rotation_seconds) or rotation_seconds <= 0:
                raise ConfigurationError(
                    "PORTFOLIO_ROTATION_SECONDS must be a positive finite number",
                    setting="PORTFOLIO_ROTATION_SECONDS",
                )

        raw_policy = env.get("PORTFOLIO_DIRECTION_POLICY", "circular").lower()
        try:
            policy = DirectionPolicy(raw_policy)
        except ValueError as ex:
            raise ConfigurationError(
                f"Unknown PORTFOLIO_DIRECTION_POLICY: {raw_policy!r}",
                setting="PORTFOLIO_DIRECTION_POLICY",
            ) from ex

        raw_path = env.get("PORTFOLIO_CONTENT_PATH")
        content_path = Path(raw_path) if raw_path else None

        raw_dark = env.get("PORTFOLIO_START_DARK", "true").lower()
        if raw_dark not in _TRUE | _FALSE:
            raise ConfigurationError(
                f"PORTFOLIO_START_DARK must be a boolean, got {raw_dark!r}",
                setting="PORTFOLIO_START_DARK",
            )

        return cls(
            rotation_seconds=rotation_seconds,
            direction_policy=policy,
            content_path=content_path,
            start_dark=raw_dark in _TRUE,
        )
