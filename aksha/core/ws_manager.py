"""WebSocket connection manager for device hand-off events."""

import json
import logging
from typing import Any

from fastapi import WebSocket

logger = logging.getLogger(__name__)


class ConnectionManager:
    """Tracks active device shell connections keyed by device_id."""

    def __init__(self) -> None:
        # device_id -> set of active websocket connections
        self._connections: dict[str, set[WebSocket]] = {}

    async def connect(self, websocket: WebSocket, device_id: str) -> None:
        await websocket.accept()
        if device_id not in self._connections:
            self._connections[device_id] = set()
        self._connections[device_id].add(websocket)
        logger.info("WS connected: device=%s (total=%s)", device_id, self.total_connections)

    def disconnect(self, websocket: WebSocket, device_id: str) -> None:
        conns = self._connections.get(device_id)
        if conns:
            conns.discard(websocket)
            if not conns:
                del self._connections[device_id]
        logger.info("WS disconnected: device=%s (total=%s)", device_id, self.total_connections)

    async def send_to_device(self, device_id: str, event: str, data: Any) -> int:
        """Send event to all connections for a device. Returns how many received it."""
        conns = self._connections.get(device_id, set())
        payload = json.dumps({"event": event, "data": data}, default=str)
        delivered = 0
        dead: list[WebSocket] = []
        for ws in list(conns):
            try:
                await ws.send_text(payload)
                delivered += 1
            except Exception:
                dead.append(ws)
        for ws in dead:
            conns.discard(ws)
        if dead:
            logger.info("WS pruned %s dead connection(s): device=%s", len(dead), device_id)
            if not conns and self._connections.get(device_id) is conns:
                del self._connections[device_id]
        return delivered

    async def broadcast(self, event: str, data: Any) -> int:
        """Send event to every connected device."""
        delivered = 0
        for device_id in list(self._connections):
            delivered += await self.send_to_device(device_id, event, data)
        return delivered

    @property
    def total_connections(self) -> int:
        return sum(len(c) for c in self._connections.values())


# Singleton instance used across the app
ws_manager = ConnectionManager()
