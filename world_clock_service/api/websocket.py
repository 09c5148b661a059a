from typing import List, Set

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from shared.core.logging_config import get_logger
from world_clock_service.schemas.snapshot import DisplaySnapshot

logger = get_logger(__name__)


class SnapshotBroadcaster:
    """Pushes each tick's snapshots to every connected socket."""

    def __init__(self) -> None:
        self.active_connections: Set[WebSocket] = set()

    async def connect(self, websocket: WebSocket) -> None:
        await websocket.accept()
        self.active_connections.add(websocket)

    def disconnect(self, websocket: WebSocket) -> None:
        self.active_connections.discard(websocket)

    async def broadcast(self, snapshots: List[DisplaySnapshot]) -> None:
        if not self.active_connections:
            return
        message = {
            "type": "snapshots",
            "data": [snapshot.model_dump(mode="json") for snapshot in snapshots],
        }
        to_remove = []
        for websocket in list(self.active_connections):
            try:
                await websocket.send_json(message)
            except (WebSocketDisconnect, RuntimeError) as e:
                logger.info("Dropping snapshot subscriber: %s", e)
                to_remove.append(websocket)
        for websocket in to_remove:
            self.disconnect(websocket)


router = APIRouter()


@router.websocket("/ws/snapshots")
async def ws_snapshots(websocket: WebSocket) -> None:
    context = websocket.app.state.world_clock
    broadcaster: SnapshotBroadcaster = context.broadcaster

    await broadcaster.connect(websocket)
    try:
        await websocket.send_json(
            {
                "type": "snapshots",
                "data": [
                    snapshot.model_dump(mode="json")
                    for snapshot in context.board.snapshots()
                ],
            }
        )
        while True:
            # Keep alive; incoming messages are ignored
            await websocket.receive_text()
    except WebSocketDisconnect:
        logger.info("Snapshot subscriber disconnected")
    finally:
        broadcaster.disconnect(websocket)
