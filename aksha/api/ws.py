"""WebSocket channel the device shell listens on for SMS hand-offs."""

from __future__ import annotations

import logging
import secrets

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from aksha.core.config import settings
from aksha.core.ws_manager import ws_manager

logger = logging.getLogger(__name__)

router = APIRouter()


@router.websocket("/ws/device")
async def device_socket(websocket: WebSocket):
    """
    Device connects with ?key=<device key>&device_id=<id>.
    Server pushes events: sms.compose
    """
    key = websocket.query_params.get("key")
    if not key:
        await websocket.close(code=4001, reason="Missing device key")
        return
    if not secrets.compare_digest(key.encode(), settings.device_key.encode()):
        await websocket.close(code=4003, reason="Invalid device key")
        return

    device_id = websocket.query_params.get("device_id") or "default"
    await ws_manager.connect(websocket, device_id)
    try:
        while True:
            # Keep connection alive; client can send pings
            data = await websocket.receive_text()
            if data == "ping":
                await websocket.send_text('{"event":"pong"}')
    except WebSocketDisconnect:
        pass
    finally:
        ws_manager.disconnect(websocket, device_id)
