from __future__ import annotations

from hoststats.collectors.base import MetricCollector
from hoststats.commands.runner import Runner
from hoststats.models.snapshot import MemoryStats
from hoststats.parsers.memory import PAGE_SIZE, parse_memory


class MemoryCollector(MetricCollector):
    """Memory usage from ``sysctl hw.memsize`` and ``vm_stat``."""

    name = "memory"

    def __init__(
        self,
        runner: Runner,
        size_command: str,
        stats_command: str,
        page_size: int = PAGE_SIZE,
    ) -> None:
        super().__init__(runner)
        self.size_command = size_command
        self.stats_command = stats_command
        self.page_size = page_size

    async def sample(self) -> MemoryStats:
        memsize = await self._run(self.size_command)
        vm_stat = await self._run(self.stats_command)
        return parse_memory(vm_stat, memsize, page_size=self.page_size)
