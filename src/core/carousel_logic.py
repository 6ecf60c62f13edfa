"""Carousel business logic - platform agnostic.

The featured-projects carousel shows one project at a time. It advances on
its own every ``ROTATION_INTERVAL_SECONDS`` and can be jumped to any index
by the user. A manual jump does not reset the auto-advance timer, so the
next scheduled tick may replace the user's choice before a full interval
has passed.

State transitions are pure functions over an immutable ``CarouselState``;
``CarouselController`` owns the current state, the timer handle and the
transition subscribers.
"""

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass, replace
from enum import Enum
from types import TracebackType
from typing import Generic, TypeVar

from src.core.errors import InvalidArgumentError
from src.core.logging import get_logger
from src.ports.scheduler import Scheduler, TimerHandle

logger = get_logger(__name__)

T = TypeVar("T")

ROTATION_INTERVAL_SECONDS = 10.0


class Direction(Enum):
    """Which way the carousel moved, used for slide animation orientation."""

    FORWARD = "forward"
    BACKWARD = "backward"

    @property
    def sign(self) -> int:
        return 1 if self is Direction.FORWARD else -1


class DirectionPolicy(Enum):
    """How a manual jump decides its direction.

    CIRCULAR picks the shorter way around the ring (ties go forward).
    LINEAR compares raw indices.
    """

    CIRCULAR = "circular"
    LINEAR = "linear"


class TransitionSource(Enum):
    AUTO = "auto"
    MANUAL = "manual"


@dataclass(frozen=True)
class CarouselState(Generic[T]):
    """Immutable snapshot of the carousel."""

    items: tuple[T, ...]
    current_index: int = 0
    direction: Direction = Direction.FORWARD

    @property
    def total_items(self) -> int:
        return len(self.items)

    @property
    def current_item(self) -> T:
        return self.items[self.current_index]


@dataclass(frozen=True)
class CarouselTransition:
    """A change of the active index, as reported to subscribers."""

    previous_index: int
    active_index: int
    direction: Direction
    source: TransitionSource

    @property
    def changed(self) -> bool:
        return self.previous_index != self.active_index


TransitionListener = Callable[[CarouselTransition], None]


def resolve_direction(
    previous: int,
    target: int,
    total: int,
    policy: DirectionPolicy = DirectionPolicy.CIRCULAR,
) -> Direction | None:
    """Direction of a jump from ``previous`` to ``target``.

    Returns None when the two indices are equal.
    """
    if previous == target:
        return None
    if policy is DirectionPolicy.LINEAR:
        return Direction.FORWARD if target > previous else Direction.BACKWARD
    forward_steps = (target - previous) % total
    backward_steps = (previous - target) % total
    return Direction.FORWARD if forward_steps <= backward_steps else Direction.BACKWARD


def advanced(state: CarouselState[T]) -> CarouselState[T]:
    """Successor state: one step forward, wrapping at the end."""
    return replace(
        state,
        current_index=(state.current_index + 1) % state.total_items,
        direction=Direction.FORWARD,
    )


def jumped(
    state: CarouselState[T],
    index: int,
    policy: DirectionPolicy = DirectionPolicy.CIRCULAR,
) -> CarouselState[T]:
    """State after jumping to ``index``.

    Raises:
        InvalidArgumentError: If ``index`` is not an int in [0, total_items).
    """
    if isinstance(index, bool) or not isinstance(index, int):
        raise InvalidArgumentError(
            f"Carousel index must be an integer, got {index!r}",
            argument="index",
            value=index,
        )
    if not 0 <= index < state.total_items:
        raise InvalidArgumentError(
            f"Carousel index {index} out of range [0, {state.total_items})",
            argument="index",
            value=index,
        )
    direction = resolve_direction(
        state.current_index, index, state.total_items, policy
    )
    if direction is None:
        return state
    return replace(state, current_index=index, direction=direction)


class CarouselController(Generic[T]):
    """Owns the carousel state and its auto-advance timer.

    The controller is a context manager: entering starts the timer, leaving
    cancels it on every exit path.

    Example:
        controller = CarouselController(projects, scheduler=AsyncioScheduler())
        with controller:
            controller.go_to(2)
            ...
        # timer cancelled here
    """

    def __init__(
        self,
        items: Sequence[T],
        scheduler: Scheduler | None = None,
        interval: float = ROTATION_INTERVAL_SECONDS,
        direction_policy: DirectionPolicy = DirectionPolicy.CIRCULAR,
    ) -> None:
        """Initialize the controller at index 0, moving forward.

        Args:
            items: The ordered, non-empty list of carousel items.
            scheduler: Source of the auto-advance timer. Required for start().
            interval: Seconds between automatic advances.
            direction_policy: How manual jumps pick their direction.

        Raises:
            InvalidArgumentError: If ``items`` is empty or ``interval`` is
                not a positive finite number.
        """
        if not items:
            raise InvalidArgumentError(
                "Carousel needs at least one item", argument="items", value=items
            )
        if not math.isfinite(interval) or interval <= 0:
            raise InvalidArgumentError(
                f"Rotation interval must be a positive finite number, got {interval}",
                argument="interval",
                value=interval,
            )
        self._state: CarouselState[T] = CarouselState(items=tuple(items))
        self._scheduler = scheduler
        self._interval = interval
        self._policy = direction_policy
        self._timer: TimerHandle | None = None
        self._listeners: list[TransitionListener] = []

    @property
    def state(self) -> CarouselState[T]:
        return self._state

    @property
    def active_index(self) -> int:
        return self._state.current_index

    @property
    def direction(self) -> Direction:
        return self._state.direction

    @property
    def current_item(self) -> T:
        return self._state.current_item

    @property
    def total_items(self) -> int:
        return self._state.total_items

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def direction_policy(self) -> DirectionPolicy:
        return self._policy

    @property
    def is_running(self) -> bool:
        return self._timer is not None

    def subscribe(self, listener: TransitionListener) -> Callable[[], None]:
        """Register a listener for index changes.

        A listener that raises is logged and skipped; the others still run
        and the transition is still returned to the caller.

        Returns:
            A callable that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _commit(
        self, new_state: CarouselState[T], source: TransitionSource
    ) -> CarouselTransition:
        transition = CarouselTransition(
            previous_index=self._state.current_index,
            active_index=new_state.current_index,
            direction=new_state.direction,
            source=source,
        )
        self._state = new_state
        if transition.changed:
            for listener in list(self._listeners):
                try:
                    listener(transition)
                except Exception:
                    logger.exception(
                        "carousel_listener_failed", active_index=transition.active_index
                    )
        return transition

    def advance(self) -> CarouselTransition:
        """Move one item forward, wrapping to 0 after the last item."""
        transition = self._commit(advanced(self._state), TransitionSource.AUTO)
        logger.debug(
            "carousel_advanced",
            active_index=transition.active_index,
            total=self.total_items,
        )
        return transition

    def go_to(self, index: int) -> CarouselTransition:
        """Jump to ``index`` without touching the auto-advance timer.

        Raises:
            InvalidArgumentError: If ``index`` is outside [0, total_items).
                The state is left unchanged.
        """
        try:
            new_state = jumped(self._state, index, self._policy)
        except InvalidArgumentError:
            logger.warning(
                "carousel_index_rejected", index=index, total=self.total_items
            )
            raise
        transition = self._commit(new_state, TransitionSource.MANUAL)
        logger.debug(
            "carousel_jumped",
            previous_index=transition.previous_index,
            active_index=transition.active_index,
            direction=transition.direction,
        )
        return transition

    def _on_tick(self) -> None:
        self.advance()

    def start(self) -> None:
        """Start the auto-advance timer.

        Raises:
            RuntimeError: If the controller was built without a scheduler.
        """
        if self._timer is not None:
            logger.warning("carousel_timer_already_running")
            return
        if self._scheduler is None:
            raise RuntimeError("Carousel has no scheduler configured")
        self._timer = self._scheduler.call_every(self._interval, self._on_tick)
        logger.info(
            "carousel_timer_started", interval=self._interval, total=self.total_items
        )

    def stop(self) -> None:
        """Cancel the auto-advance timer. Safe to call more than once."""
        if self._timer is None:
            return
        self._timer.cancel()
        self._timer = None
        logger.info("carousel_timer_stopped", active_index=self.active_index)

    def __enter__(self) -> "CarouselController[T]":
        self.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.stop()
