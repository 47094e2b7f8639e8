"""Tests for hoststats.api routes and WebSocket."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

from hoststats.api.routes import ws_manager
from hoststats.commands import CannedCommandRunner
from hoststats.commands.canned import nettop_text, top_cpu_text, vm_stat_text
from hoststats.config import Settings
from hoststats.engine import EventBus
from hoststats.engine.sampler import StatsSampler
from hoststats.icons import TextIconRenderer
from hoststats.main import _ws_broadcast, app


# ── fixtures ───────────────────────────────────────────


@pytest.fixture
def sampler():
    settings = Settings()
    runner = CannedCommandRunner(
        {
            settings.memory_size_command: str(16 * 1024**3),
            settings.memory_stats_command: vm_stat_text(),
            settings.cpu_usage_command: top_cpu_text(12.3, 4.5, 83.2),
            settings.net_stat_command: nettop_text([(1_000_000, 200_000)]),
        }
    )
    event_bus = EventBus()
    sampler = StatsSampler(
        runner=runner,
        get_setting=lambda key: getattr(settings, key),
        emit_event=event_bus.emit,
        icon_renderer=TextIconRenderer(),
    )

    # Inject minimal app.state so routes work without full lifespan.
    app.state.event_bus = event_bus
    app.state.sampler = sampler
    yield sampler
    del app.state.event_bus
    del app.state.sampler


@pytest.fixture
async def client(sampler):
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


# ── REST tests ─────────────────────────────────────────


class TestStatus:
    @pytest.mark.asyncio
    async def test_status_ok(self, client: AsyncClient):
        resp = await client.get("/api/status")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "running"
        assert data["sampler_running"] is False
        assert data["sampler_state"] == "idle"
        assert data["interval"] == 1000
        assert data["history_size"] == 0
        assert "event_bus_running" in data
        assert "subscribers" in data
        assert "pending_events" in data
        assert data["dropped_events"] == 0


class TestStats:
    @pytest.mark.asyncio
    async def test_get_stats_empty(self, client: AsyncClient):
        resp = await client.get("/api/stats")
        assert resp.status_code == 200
        assert resp.json() == []

    @pytest.mark.asyncio
    async def test_latest_not_found(self, client: AsyncClient):
        resp = await client.get("/api/stats/latest")
        assert resp.status_code == 404

    @pytest.mark.asyncio
    async def test_stats_after_passes(self, client: AsyncClient, sampler: StatsSampler):
        await sampler.update_stats()
        await sampler.update_stats()

        resp = await client.get("/api/stats")
        assert resp.status_code == 200
        stats = resp.json()
        assert len(stats) == 2
        assert stats[0]["cpu"]["used_percentage"] == 16

        resp = await client.get("/api/stats/latest")
        assert resp.status_code == 200
        assert resp.json()["timestamp"] == stats[1]["timestamp"]


class TestInterval:
    @pytest.mark.asyncio
    async def test_get_interval(self, client: AsyncClient):
        resp = await client.get("/api/interval")
        assert resp.status_code == 200
        assert resp.json() == {"interval": 1000}

    @pytest.mark.asyncio
    async def test_set_interval(self, client: AsyncClient, sampler: StatsSampler):
        resp = await client.put("/api/interval", json={"interval": 2000})
        assert resp.status_code == 200
        assert resp.json()["interval"] == 2000
        assert sampler.interval == 2000

    @pytest.mark.asyncio
    async def test_set_interval_rejects_non_positive(self, client: AsyncClient, sampler: StatsSampler):
        resp = await client.put("/api/interval", json={"interval": 0})
        assert resp.status_code == 422
        assert sampler.interval == 1000


# ── WebSocket broadcast ────────────────────────────────


class TestBroadcast:
    @pytest.fixture(autouse=True)
    def _clean_manager(self):
        ws_manager.active_connections.clear()
        yield
        ws_manager.active_connections.clear()

    @pytest.mark.asyncio
    async def test_stats_event_reaches_clients(self, sampler: StatsSampler):
        ws = AsyncMock()
        await ws_manager.connect(ws)
        ws.accept.assert_awaited_once()

        bus = app.state.event_bus
        bus.subscribe(_ws_broadcast)
        await bus.start()
        await sampler.update_stats()
        await bus.stop()

        ws.send_json.assert_awaited_once()
        message = ws.send_json.await_args.args[0]
        assert message["type"] == "stats_updated"
        assert message["interval"] == 1000
        assert len(message["results"]) == 1

    @pytest.mark.asyncio
    async def test_dead_client_dropped(self):
        dead = AsyncMock()
        dead.send_json.side_effect = RuntimeError("closed")
        alive = AsyncMock()
        await ws_manager.connect(dead)
        await ws_manager.connect(alive)

        await ws_manager.broadcast({"type": "stats_updated"})

        assert ws_manager.active_connections == [alive]
        alive.send_json.assert_awaited_once_with({"type": "stats_updated"})
