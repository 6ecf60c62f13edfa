"""Scroll-linked progress indicator.

The raw signal is the fraction of the page scrolled. The bar follows it
through a critically damped spring so fast wheel flicks do not make the
bar jitter. The spring is integrated in closed form, which keeps it stable
for any frame time.
"""

import math

from src.core.errors import InvalidArgumentError

DEFAULT_STIFFNESS = 100.0
DEFAULT_MASS = 1.0
DEFAULT_REST_DELTA = 0.001
DEFAULT_REST_SPEED = 0.01


def _clamp_unit(value: float) -> float:
    return min(1.0, max(0.0, value))


def scroll_fraction(
    scroll_top: float, scroll_height: float, viewport_height: float
) -> float:
    """Fraction of the page scrolled, in [0, 1].

    Args:
        scroll_top: Current vertical offset of the viewport.
        scroll_height: Total height of the scrollable content.
        viewport_height: Visible height.

    Returns:
        0.0 when the content fits in the viewport, otherwise
        ``scroll_top / (scroll_height - viewport_height)`` clamped to [0, 1].

    Raises:
        InvalidArgumentError: If either height is negative.
    """
    if scroll_height < 0 or viewport_height < 0:
        raise InvalidArgumentError(
            "Heights must not be negative",
            argument="scroll_height" if scroll_height < 0 else "viewport_height",
            value=scroll_height if scroll_height < 0 else viewport_height,
        )
    scrollable = scroll_height - viewport_height
    if scrollable <= 0:
        return 0.0
    return _clamp_unit(scroll_top / scrollable)


class SpringSmoother:
    """Critically damped spring pulling a value toward a target.

    With damping ``c = 2 * sqrt(k * m)`` the displacement from the target
    evolves as ``(c1 + c2 * t) * exp(-w * t)`` where ``w = sqrt(k / m)``.
    Once both displacement and speed fall under the rest thresholds the
    value snaps to the target and the spring is at rest.
    """

    def __init__(
        self,
        stiffness: float = DEFAULT_STIFFNESS,
        mass: float = DEFAULT_MASS,
        rest_delta: float = DEFAULT_REST_DELTA,
        rest_speed: float = DEFAULT_REST_SPEED,
        initial: float = 0.0,
    ) -> None:
        if stiffness <= 0 or mass <= 0:
            raise InvalidArgumentError(
                "Spring stiffness and mass must be positive",
                argument="stiffness" if stiffness <= 0 else "mass",
                value=stiffness if stiffness <= 0 else mass,
            )
        self._omega = math.sqrt(stiffness / mass)
        self._damping = 2.0 * math.sqrt(stiffness * mass)
        self._rest_delta = rest_delta
        self._rest_speed = rest_speed
        self._position = _clamp_unit(initial)
        self._velocity = 0.0
        self._target = self._position

    @property
    def damping(self) -> float:
        return self._damping

    @property
    def target(self) -> float:
        return self._target

    @property
    def velocity(self) -> float:
        return self._velocity

    @property
    def value(self) -> float:
        return _clamp_unit(self._position)

    @property
    def at_rest(self) -> bool:
        return self._position == self._target and self._velocity == 0.0

    def set_target(self, target: float) -> None:
        self._target = _clamp_unit(target)

    def step(self, dt: float) -> float:
        """Advance the spring by ``dt`` seconds and return the new value.

        Raises:
            InvalidArgumentError: If ``dt`` is negative.
        """
        if dt < 0:
            raise InvalidArgumentError(
                f"Time step must not be negative, got {dt}", argument="dt", value=dt
            )
        if dt == 0 or self.at_rest:
            return self.value

        w = self._omega
        c1 = self._position - self._target
        c2 = self._velocity + w * c1
        decay = math.exp(-w * dt)
        displacement = (c1 + c2 * dt) * decay
        self._velocity = (c2 - w * (c1 + c2 * dt)) * decay
        self._position = self._target + displacement

        if abs(displacement) < self._rest_delta and abs(self._velocity) < self._rest_speed:
            self._position = self._target
            self._velocity = 0.0
        return self.value


class ScrollProgress:
    """Raw scroll fraction plus its smoothed counterpart."""

    def __init__(self, smoother: SpringSmoother | None = None) -> None:
        self._smoother = smoother or SpringSmoother()
        self._raw = self._smoother.target

    @property
    def raw(self) -> float:
        return self._raw

    @property
    def value(self) -> float:
        return self._smoother.value

    def update(
        self, scroll_top: float, scroll_height: float, viewport_height: float
    ) -> float:
        """Record a new scroll position and return the raw fraction."""
        self._raw = scroll_fraction(scroll_top, scroll_height, viewport_height)
        self._smoother.set_target(self._raw)
        return self._raw

    def tick(self, dt: float) -> float:
        """Advance the smoothing by ``dt`` seconds."""
        return self._smoother.step(dt)
