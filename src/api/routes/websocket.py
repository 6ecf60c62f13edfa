"""WebSocket route for live portfolio updates.

Clients receive the current state on connect, then every carousel
transition and theme change as they happen. They may also drive the page:

Incoming message types:
    - ping: server answers with pong
    - select_project: payload {"index": int}
    - toggle_theme: no payload

Outgoing message types:
    - state, carousel_transition, theme_changed, pong, error
"""

import json

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect

from src.api.dependencies import get_connection_manager, get_session
from src.api.websocket import (
    ConnectionManager,
    MessageTypes,
    WebSocketMessage,
    create_error_event,
    create_state_event,
)
from src.core.errors import InvalidArgumentError
from src.core.logging import get_logger
from src.core.portfolio import PortfolioSession

logger = get_logger(__name__)

router = APIRouter(tags=["websocket"])


async def _handle_message(
    websocket: WebSocket, session: PortfolioSession, data: str
) -> None:
    try:
        message = json.loads(data)
    except json.JSONDecodeError:
        error_msg = create_error_event("Invalid JSON message", code="INVALID_JSON")
        await websocket.send_text(error_msg.to_json())
        return

    if not isinstance(message, dict):
        error_msg = create_error_event("Message must be an object", code="INVALID_JSON")
        await websocket.send_text(error_msg.to_json())
        return

    msg_type = message.get("type")
    payload = message.get("payload")
    if not isinstance(payload, dict):
        payload = {}

    if msg_type == MessageTypes.PING:
        pong = WebSocketMessage(type=MessageTypes.PONG, payload={})
        await websocket.send_text(pong.to_json())

    elif msg_type == MessageTypes.SELECT_PROJECT:
        try:
            session.select_project(payload.get("index"))
        except InvalidArgumentError as ex:
            error_msg = create_error_event(ex.message, code=ex.category.name)
            await websocket.send_text(error_msg.to_json())

    elif msg_type == MessageTypes.TOGGLE_THEME:
        session.toggle_theme()

    else:
        logger.warning("unknown_websocket_message", type=msg_type)
        error_msg = create_error_event(
            f"Unknown message type: {msg_type}", code="UNKNOWN_TYPE"
        )
        await websocket.send_text(error_msg.to_json())


@router.websocket("/ws/portfolio")
async def portfolio_websocket(
    websocket: WebSocket,
    session: PortfolioSession = Depends(get_session),
    manager: ConnectionManager = Depends(get_connection_manager),
) -> None:
    await manager.connect(websocket)

    try:
        await websocket.send_text(create_state_event(session.snapshot()).to_json())
        while True:
            data = await websocket.receive_text()
            await _handle_message(websocket, session, data)
    except WebSocketDisconnect:
        await manager.disconnect(websocket)
        logger.info("websocket_client_disconnected")
    except Exception as e:
        await manager.disconnect(websocket)
        logger.exception("websocket_error", error=str(e))
