from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hoststats.api.routes import router, ws_manager
from hoststats.commands import CommandRunner
from hoststats.config import get_setting, settings
from hoststats.engine import EventBus
from hoststats.engine.sampler import StatsSampler
from hoststats.icons import TextIconRenderer
from hoststats.models import Event

logger = logging.getLogger(__name__)


async def _ws_broadcast(event: Event) -> None:
    """EventBus subscriber — push every stats update to WebSocket clients."""
    await ws_manager.broadcast(
        {"type": event.event_type.value, **event.payload.model_dump(mode="json")}
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    # ── startup ───────────────────────────────────────
    event_bus = EventBus()
    event_bus.subscribe(_ws_broadcast)
    await event_bus.start()

    icon_renderer = TextIconRenderer()
    sampler = StatsSampler(
        runner=CommandRunner(timeout=settings.command_timeout),
        get_setting=get_setting,
        emit_event=event_bus.emit,
        icon_renderer=icon_renderer,
    )
    await sampler.start()

    app.state.event_bus = event_bus
    app.state.sampler = sampler
    app.state.icon_renderer = icon_renderer

    logger.info("%s started", settings.app_name)

    yield

    # ── shutdown ──────────────────────────────────────
    await sampler.stop()
    await event_bus.stop()
    logger.info("%s shut down", settings.app_name)


app = FastAPI(title=settings.app_name, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)
