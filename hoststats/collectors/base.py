from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from hoststats.commands.runner import CommandResult, Runner
from hoststats.models.result import MetricResult, Present, Unavailable

logger = logging.getLogger(__name__)


class CommandFailed(Exception):
    def __init__(self, command: str, error: str = "") -> None:
        super().__init__(f"{command!r}: {error}" if error else repr(command))
        self.command = command
        self.error = error


class MetricCollector(ABC):
    """Samples one metric by running diagnostic commands and parsing them.

    Subclasses implement ``sample()``, which may raise ``CommandFailed`` or
    ``ValueError`` (``ParseError``, model validation, a bad interval);
    ``collect()`` turns both into ``Unavailable`` so one broken metric never
    aborts a pass.
    """

    name: str = "base"

    def __init__(self, runner: Runner) -> None:
        self.runner = runner

    async def collect(self) -> MetricResult:
        try:
            return Present(value=await self.sample())
        except CommandFailed as exc:
            logger.warning("Collector [%s] command failed: %s", self.name, exc)
            return Unavailable(reason=str(exc))
        except ValueError as exc:
            logger.warning("Collector [%s] unusable sample: %s", self.name, exc)
            return Unavailable(reason=str(exc))

    @abstractmethod
    async def sample(self):
        """Run the commands and return the parsed metric."""
        ...

    async def _run(self, command: str) -> str:
        result: CommandResult = await self.runner.run(command)
        if not result.ok:
            raise CommandFailed(command, result.error)
        return result.stdout
