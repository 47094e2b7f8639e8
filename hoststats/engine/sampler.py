from __future__ import annotations

import asyncio
import logging
from enum import StrEnum
from typing import Any, Awaitable, Callable

from hoststats.collectors import CpuCollector, MemoryCollector, NetworkCollector
from hoststats.commands.runner import Runner
from hoststats.engine.delta_tracker import DeltaTracker
from hoststats.engine.result_cache import ResultCache
from hoststats.icons.renderer import IconRenderer, build_icon_options
from hoststats.models.event import EventType, StatsUpdate
from hoststats.models.result import value_or_none
from hoststats.models.snapshot import Snapshot

logger = logging.getLogger(__name__)

EmitEvent = Callable[[EventType, StatsUpdate], Awaitable[Any]]


class SamplerState(StrEnum):
    IDLE = "idle"
    SAMPLING = "sampling"
    PUBLISHING = "publishing"


class StatsSampler:
    """Samples CPU, memory and network on a fixed interval.

    Each pass runs the three collectors concurrently, records the combined
    snapshot, emits ``stats_updated`` and redraws the icon. The next pass is
    scheduled only after the current one has been published, so passes never
    overlap. A failing metric leaves its snapshot field as ``None``.
    """

    def __init__(
        self,
        runner: Runner,
        get_setting: Callable[[str], Any],
        emit_event: EmitEvent,
        icon_renderer: IconRenderer,
        cache: ResultCache | None = None,
    ) -> None:
        self.get_setting = get_setting
        self.interval: float = 0
        self.set_interval(get_setting("interval"))
        self._emit_event = emit_event
        self.icon_renderer = icon_renderer
        if cache is None:
            cache = ResultCache(get_setting("max_result_cache"))
        self.cache = cache

        self.memory = MemoryCollector(
            runner,
            size_command=get_setting("memory_size_command"),
            stats_command=get_setting("memory_stats_command"),
            page_size=get_setting("page_size"),
        )
        self.cpu = CpuCollector(runner, command=get_setting("cpu_usage_command"))
        self.network = NetworkCollector(
            runner,
            command=get_setting("net_stat_command"),
            interval_ms=lambda: self.interval,
            tracker=DeltaTracker(noise_floor=get_setting("noise_floor")),
        )

        self._state = SamplerState.IDLE
        self._running = False
        self._task: asyncio.Task | None = None

    # ── lifecycle ────────────────────────────────────────

    async def start(self) -> None:
        if self._running:
            return
        self._running = True
        self._task = asyncio.create_task(self._loop())
        logger.info("Sampler started (interval=%dms)", self.interval)

    async def stop(self) -> None:
        if not self._running:
            return
        self._running = False
        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None
        self._state = SamplerState.IDLE
        logger.info("Sampler stopped")

    def set_interval(self, interval: float) -> None:
        """Change the interval; the pass in flight is not affected."""
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self.interval = interval

    # ── sampling ────────────────────────────────────────

    async def get_all(self) -> Snapshot:
        memory, cpu, network = await asyncio.gather(
            self.memory.collect(),
            self.cpu.collect(),
            self.network.collect(),
        )
        return Snapshot(
            memory=value_or_none(memory),
            cpu=value_or_none(cpu),
            network=value_or_none(network),
        )

    async def update_stats(self) -> Snapshot:
        """Run one full pass: sample, record, notify, draw."""
        self._state = SamplerState.SAMPLING
        snapshot = await self.get_all()

        self._state = SamplerState.PUBLISHING
        self.cache.record(snapshot)
        await self._emit_event(
            EventType.STATS_UPDATED,
            StatsUpdate(results=list(self.cache.history()), interval=self.interval),
        )
        self.icon_renderer.draw_icons(build_icon_options(snapshot))

        self._state = SamplerState.IDLE
        return snapshot

    def previous_stats(self) -> tuple[Snapshot, ...]:
        return self.cache.history()

    # ── internals ───────────────────────────────────────

    async def _loop(self) -> None:
        while self._running:
            try:
                await self.update_stats()
            except asyncio.CancelledError:
                raise
            except Exception:
                logger.exception("Sampling pass failed")
                self._state = SamplerState.IDLE
            await asyncio.sleep(self.interval / 1000)

    @property
    def running(self) -> bool:
        return self._running

    @property
    def state(self) -> SamplerState:
        return self._state
