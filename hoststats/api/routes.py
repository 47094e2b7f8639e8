from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Request, WebSocket, WebSocketDisconnect
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

router = APIRouter()


# ── WebSocket connection manager ──────────────────────


class ConnectionManager:
    """Tracks active WebSocket clients and broadcasts messages."""

    def __init__(self) -> None:
        self.active_connections: list[WebSocket] = []

    async def connect(self, websocket: WebSocket) -> None:
        await websocket.accept()
        self.active_connections.append(websocket)

    def disconnect(self, websocket: WebSocket) -> None:
        if websocket in self.active_connections:
            self.active_connections.remove(websocket)

    async def broadcast(self, data: dict) -> None:
        dead: list[WebSocket] = []
        for ws in self.active_connections:
            try:
                await ws.send_json(data)
            except Exception:
                dead.append(ws)
        for ws in dead:
            self.disconnect(ws)


ws_manager = ConnectionManager()


class IntervalUpdate(BaseModel):
    interval: float = Field(gt=0, description="milliseconds between passes")


# ── REST routes ───────────────────────────────────────


@router.get("/api/stats")
async def get_stats(request: Request) -> list[dict]:
    sampler = request.app.state.sampler
    return [s.model_dump(mode="json") for s in sampler.previous_stats()]


@router.get("/api/stats/latest")
async def get_latest_stats(request: Request) -> dict:
    latest = request.app.state.sampler.cache.latest
    if latest is None:
        raise HTTPException(status_code=404, detail="No stats sampled yet")
    return latest.model_dump(mode="json")


@router.get("/api/interval")
async def get_interval(request: Request) -> dict:
    return {"interval": request.app.state.sampler.interval}


@router.put("/api/interval")
async def set_interval(body: IntervalUpdate, request: Request) -> dict:
    sampler = request.app.state.sampler
    sampler.set_interval(body.interval)
    logger.info("Sampling interval set to %sms", body.interval)
    return {"interval": sampler.interval}


@router.get("/api/status")
async def get_status(request: Request) -> dict:
    state = request.app.state
    sampler = state.sampler
    event_bus = state.event_bus
    return {
        "status": "running",
        "sampler_running": sampler.running,
        "sampler_state": sampler.state.value,
        "interval": sampler.interval,
        "history_size": len(sampler.cache),
        "event_bus_running": event_bus.running,
        "subscribers": event_bus.subscriber_count,
        "pending_events": event_bus.pending,
        "dropped_events": event_bus.dropped,
    }


# ── WebSocket endpoint ────────────────────────────────


@router.websocket("/ws/stats")
async def websocket_stats(websocket: WebSocket) -> None:
    await ws_manager.connect(websocket)
    try:
        while True:
            await websocket.receive_text()
    except WebSocketDisconnect:
        ws_manager.disconnect(websocket)
