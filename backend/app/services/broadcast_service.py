import logging
from typing import Any

from fastapi import WebSocket

logger = logging.getLogger(__name__)


class BroadcastHub:
    """Single fan-out channel to every connected WebSocket client."""

    def __init__(self) -> None:
        self.connections: list[WebSocket] = []

    async def connect(self, websocket: WebSocket) -> None:
        await websocket.accept()
        self.connections.append(websocket)
        logger.debug("Broadcast subscriber connected (%d total)", len(self.connections))

    def disconnect(self, websocket: WebSocket) -> None:
        if websocket in self.connections:
            self.connections.remove(websocket)

    async def publish(self, event: str, data: Any) -> int:
        """Send ``{"event", "data"}`` to all subscribers; returns how many got it."""
        message = {"event": event, "data": data}
        delivered = 0
        for connection in list(self.connections):
            try:
                await connection.send_json(message)
                delivered += 1
            except Exception as e:
                logger.info("Dropping broadcast subscriber: %s", e)
                self.disconnect(connection)
        return delivered


hub = BroadcastHub()


def get_broadcast_hub() -> BroadcastHub:
    return hub
