from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from app.services.broadcast_service import get_broadcast_hub

router = APIRouter()


@router.websocket("/ws")
async def broadcast_socket(websocket: WebSocket) -> None:
    hub = get_broadcast_hub()
    await hub.connect(websocket)
    try:
        # Clients only listen; incoming frames are read to notice disconnects
        while True:
            await websocket.receive_text()
    except WebSocketDisconnect:
        pass
    finally:
        hub.disconnect(websocket)
