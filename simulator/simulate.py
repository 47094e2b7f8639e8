"""Host stats simulator.

Drives the real sampler against canned macOS command output so the engine,
event bus and icon rendering can be exercised on any host. Each scenario
mutates the canned output between passes.

Usage:
    python simulator/simulate.py                     # run all scenarios
    python simulator/simulate.py --scenario network_burst
    python simulator/simulate.py --passes 20 --interval 500
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import random
import sys
from pathlib import Path

# Allow running from project root
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from hoststats.commands import CannedCommandRunner, CommandResult
from hoststats.commands.canned import nettop_text, top_cpu_text, vm_stat_text
from hoststats.config import Settings
from hoststats.engine import EventBus
from hoststats.engine.sampler import StatsSampler
from hoststats.icons import TextIconRenderer
from hoststats.models import Event

logging.basicConfig(level=logging.INFO, format="%(asctime)s [SIM] %(message)s")
logger = logging.getLogger("simulator")

MEMSIZE = str(16 * 1024**3)


# ── Scenario generators ──────────────────────────────


def idle(settings: Settings, runner: CannedCommandRunner, tick: int) -> None:
    """Quiet machine: low CPU, slowly growing traffic."""
    runner.outputs[settings.cpu_usage_command] = top_cpu_text(
        user=random.uniform(2, 6), system=random.uniform(1, 3), idle=90.0
    )
    base = 1_000_000 + tick * 20_000
    runner.outputs[settings.net_stat_command] = nettop_text([(base, base // 4)])


def busy(settings: Settings, runner: CannedCommandRunner, tick: int) -> None:
    """Sustained CPU load and memory pressure."""
    runner.outputs[settings.cpu_usage_command] = top_cpu_text(
        user=random.uniform(60, 80), system=random.uniform(10, 18), idle=5.0
    )
    runner.outputs[settings.memory_stats_command] = vm_stat_text(
        anonymous=2_400_000 + tick * 10_000, compressed=600_000
    )


def network_burst(settings: Settings, runner: CannedCommandRunner, tick: int) -> None:
    """Several connections pulling data quickly."""
    rows = [
        (5_000_000 + tick * random.randint(800_000, 1_500_000), 200_000 + tick * 90_000)
        for _ in range(4)
    ]
    runner.outputs[settings.net_stat_command] = nettop_text(rows)


def memory_failure(settings: Settings, runner: CannedCommandRunner, tick: int) -> None:
    """``vm_stat`` fails every other pass; the icon drops the MEM entry."""
    if tick % 2:
        runner.outputs[settings.memory_stats_command] = CommandResult(
            ok=False, error="vm_stat: permission denied"
        )
    else:
        runner.outputs[settings.memory_stats_command] = vm_stat_text()


SCENARIOS = {
    "idle": idle,
    "busy": busy,
    "network_burst": network_burst,
    "memory_failure": memory_failure,
}


# ── Main runner ──────────────────────────────────────


def baseline_outputs(settings: Settings) -> dict[str, str | CommandResult]:
    return {
        settings.memory_size_command: MEMSIZE,
        settings.memory_stats_command: vm_stat_text(),
        settings.cpu_usage_command: top_cpu_text(),
        settings.net_stat_command: nettop_text([(1_000_000, 250_000)]),
    }


async def run_scenario(name: str, settings: Settings, passes: int) -> None:
    runner = CannedCommandRunner(baseline_outputs(settings))
    renderer = TextIconRenderer()
    bus = EventBus()

    async def log_update(event: Event) -> None:
        logger.info(
            "%s: %d snapshots, interval=%sms",
            event.event_type, len(event.payload.results), event.payload.interval,
        )

    bus.subscribe(log_update)
    await bus.start()

    sampler = StatsSampler(
        runner=runner,
        get_setting=lambda key: getattr(settings, key),
        emit_event=bus.emit,
        icon_renderer=renderer,
    )
    scenario = SCENARIOS[name]
    for tick in range(passes):
        scenario(settings, runner, tick)
        await sampler.update_stats()
        logger.info("[%s] pass %d/%d  %s", name, tick + 1, passes, renderer.title)
        await asyncio.sleep(sampler.interval / 1000)

    await bus.stop()


async def main() -> None:
    parser = argparse.ArgumentParser(description="Host stats simulator")
    parser.add_argument("--scenario", choices=list(SCENARIOS.keys()), help="Run a single scenario")
    parser.add_argument("--passes", type=int, default=6, help="Sampling passes per scenario")
    parser.add_argument("--interval", type=int, default=1000, help="Interval in milliseconds")
    args = parser.parse_args()

    settings = Settings(interval=args.interval)
    names = [args.scenario] if args.scenario else list(SCENARIOS)
    for name in names:
        logger.info("=== Starting scenario: %s ===", name)
        await run_scenario(name, settings, args.passes)
    logger.info("=== Simulation complete ===")


if __name__ == "__main__":
    asyncio.run(main())
