"""WebSocket support for pushing carousel and theme changes.

The core notifies listeners synchronously from timer callbacks and route
handlers. ``EventBridge`` subscribes to the session and turns each
notification into a broadcast task on the event loop, so connected clients
can start their slide animation as soon as the index changes.

Example:
    manager = ConnectionManager()
    bridge = EventBridge(manager, asyncio.get_running_loop())
    bridge.attach(session)
    ...
    bridge.detach()
"""

import asyncio
import json
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from fastapi import WebSocket

from src.core.carousel_logic import CarouselTransition
from src.core.logging import get_logger
from src.core.portfolio import PortfolioSession, PortfolioSnapshot
from src.core.theme import Theme

logger = get_logger(__name__)


@dataclass
class WebSocketMessage:
    """A message sent over WebSocket.

    Attributes:
        type: One of the ``MessageTypes`` constants.
        payload: The message data.
        timestamp: When the message was created.
    """

    type: str
    payload: dict[str, Any]
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    def to_json(self) -> str:
        return json.dumps(
            {
                "type": self.type,
                "payload": self.payload,
                "timestamp": self.timestamp.isoformat(),
            }
        )


class MessageTypes:
    """WebSocket message type constants."""

    # Outgoing
    STATE = "state"
    CAROUSEL_TRANSITION = "carousel_transition"
    THEME_CHANGED = "theme_changed"
    ERROR = "error"
    PONG = "pong"

    # Incoming
    PING = "ping"
    SELECT_PROJECT = "select_project"
    TOGGLE_THEME = "toggle_theme"


class ConnectionManager:
    """Tracks connected clients and broadcasts to all of them."""

    def __init__(self) -> None:
        self._connections: list[WebSocket] = []
        self._lock = asyncio.Lock()

    async def connect(self, websocket: WebSocket) -> None:
        await websocket.accept()
        async with self._lock:
            self._connections.append(websocket)
        logger.info("websocket_connected", total_connections=len(self._connections))

    async def disconnect(self, websocket: WebSocket) -> None:
        async with self._lock:
            if websocket in self._connections:
                self._connections.remove(websocket)
        logger.info(
            "websocket_disconnected", total_connections=len(self._connections)
        )

    async def broadcast(self, message: WebSocketMessage) -> int:
        """Send ``message`` to every client.

        Clients whose send fails are dropped.

        Returns:
            Number of clients the message reached.
        """
        json_message = message.to_json()
        sent_count = 0
        disconnected: list[WebSocket] = []

        async with self._lock:
            connections = list(self._connections)

        for websocket in connections:
            try:
                await websocket.send_text(json_message)
                sent_count += 1
            except Exception as e:
                logger.warning("websocket_broadcast_failed", error=str(e))
                disconnected.append(websocket)

        for websocket in disconnected:
            await self.disconnect(websocket)

        return sent_count

    def get_connection_count(self) -> int:
        return len(self._connections)


def create_state_event(snapshot: PortfolioSnapshot) -> WebSocketMessage:
    return WebSocketMessage(
        type=MessageTypes.STATE,
        payload={
            "active_index": snapshot.active_index,
            "direction": snapshot.direction.value,
            "is_dark": snapshot.is_dark,
        },
    )


def create_transition_event(transition: CarouselTransition) -> WebSocketMessage:
    return WebSocketMessage(
        type=MessageTypes.CAROUSEL_TRANSITION,
        payload={
            "previous_index": transition.previous_index,
            "active_index": transition.active_index,
            "direction": transition.direction.value,
            "source": transition.source.value,
        },
    )


def create_theme_event(theme: Theme) -> WebSocketMessage:
    return WebSocketMessage(
        type=MessageTypes.THEME_CHANGED,
        payload={"theme": theme.value, "is_dark": theme.is_dark},
    )


def create_error_event(error: str, code: str | None = None) -> WebSocketMessage:
    return WebSocketMessage(
        type=MessageTypes.ERROR,
        payload={"error": error, "code": code},
    )


class EventBridge:
    """Forwards session notifications to WebSocket clients."""

    def __init__(
        self, manager: ConnectionManager, loop: asyncio.AbstractEventLoop
    ) -> None:
        self._manager = manager
        self._loop = loop
        self._pending: set[asyncio.Task[int]] = set()
        self._unsubscribers: list[Callable[[], None]] = []

    def attach(self, session: PortfolioSession) -> None:
        self._unsubscribers.append(session.carousel.subscribe(self.on_transition))
        self._unsubscribers.append(session.theme.subscribe(self.on_theme))

    def detach(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers.clear()

    def _send(self, message: WebSocketMessage) -> None:
        task = self._loop.create_task(self._manager.broadcast(message))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    def on_transition(self, transition: CarouselTransition) -> None:
        self._send(create_transition_event(transition))

    def on_theme(self, theme: Theme) -> None:
        self._send(create_theme_event(theme))

    async def drain(self) -> None:
        """Wait for broadcasts already in flight."""
        if self._pending:
            await asyncio.gather(*self._pending, return_exceptions=True)
