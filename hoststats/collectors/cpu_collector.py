from __future__ import annotations

from hoststats.collectors.base import MetricCollector
from hoststats.commands.runner import Runner
from hoststats.models.snapshot import CpuStats
from hoststats.parsers.cpu import parse_cpu


class CpuCollector(MetricCollector):
    """CPU usage from the summary line of ``top``."""

    name = "cpu"

    def __init__(self, runner: Runner, command: str) -> None:
        super().__init__(runner)
        self.command = command

    async def sample(self) -> CpuStats:
        return parse_cpu(await self._run(self.command))
