from __future__ import annotations

import asyncio
import logging
from typing import Protocol

import psutil
from pydantic import BaseModel

logger = logging.getLogger(__name__)


class CommandResult(BaseModel):
    """Captured output of one diagnostic command."""

    stdout: str = ""
    ok: bool = True
    error: str = ""


class Runner(Protocol):
    async def run(self, command: str) -> CommandResult: ...


class CommandRunner:
    """Runs diagnostic commands through the host shell.

    Failures never raise: a command that cannot start, exits non-zero,
    writes to stderr or outlives ``timeout`` yields ``ok=False``.
    Cancelling a run kills the command and everything it spawned.
    """

    def __init__(self, timeout: float = 10.0) -> None:
        self.timeout = timeout

    async def run(self, command: str) -> CommandResult:
        try:
            proc = await asyncio.create_subprocess_shell(
                command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            logger.warning("Cannot start command %r: %s", command, exc)
            return CommandResult(ok=False, error=str(exc))

        try:
            stdout, stderr = await asyncio.wait_for(
                proc.communicate(), timeout=self.timeout
            )
        except asyncio.TimeoutError:
            logger.warning("Command %r timed out after %.1fs", command, self.timeout)
            self._kill_tree(proc.pid)
            await proc.wait()
            return CommandResult(ok=False, error="timeout")
        except asyncio.CancelledError:
            self._kill_tree(proc.pid)
            await proc.wait()
            raise

        out = stdout.decode(errors="replace")
        err = stderr.decode(errors="replace").strip()
        if proc.returncode != 0 or err:
            logger.debug(
                "Command %r failed (rc=%s): %s", command, proc.returncode, err
            )
            return CommandResult(
                stdout=out, ok=False, error=err or f"exit status {proc.returncode}"
            )
        return CommandResult(stdout=out)

    @staticmethod
    def _kill_tree(pid: int) -> None:
        """Kill a shell and everything it spawned."""
        try:
            parent = psutil.Process(pid)
            procs = parent.children(recursive=True) + [parent]
        except psutil.NoSuchProcess:
            return
        for p in procs:
            try:
                p.kill()
            except (psutil.NoSuchProcess, psutil.AccessDenied):
                continue
