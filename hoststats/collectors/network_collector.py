from __future__ import annotations

import logging
from typing import Callable

from hoststats.collectors.base import MetricCollector
from hoststats.commands.runner import Runner
from hoststats.engine.delta_tracker import DeltaTracker
from hoststats.models.snapshot import NetworkStats
from hoststats.parsers.network import parse_network_totals

logger = logging.getLogger(__name__)

BYTES_PER_MB = 1_000_000


class NetworkCollector(MetricCollector):
    """Upload/download rates from ``nettop`` byte counters.

    ``interval_ms`` is called on every sample so that an interval change
    applies from the next pass on. The tracker only sees successful samples.
    """

    name = "network"

    def __init__(
        self,
        runner: Runner,
        command: str,
        interval_ms: Callable[[], float],
        tracker: DeltaTracker | None = None,
    ) -> None:
        super().__init__(runner)
        self.command = command
        self.interval_ms = interval_ms
        self.tracker = tracker or DeltaTracker()

    async def sample(self) -> NetworkStats:
        totals = parse_network_totals(await self._run(self.command))
        interval = self.interval_ms()
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}ms")
        seconds = interval / 1000
        upload = totals.upload / BYTES_PER_MB / seconds
        download = totals.download / BYTES_PER_MB / seconds
        if not self.tracker.has_baseline:
            logger.debug("Network baseline set (up=%.3f, down=%.3f MB/s)", upload, download)
        return self.tracker.update(upload=upload, download=download)
