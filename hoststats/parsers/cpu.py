from __future__ import annotations

import re

from hoststats.models.snapshot import CpuStats
from hoststats.parsers.errors import ParseError

# e.g. "CPU usage: 12.3% user, 4.5% sys, 83.2% idle"
_PERCENT_RE = re.compile(r"(\d+\.\d+)%")


def parse_cpu(text: str) -> CpuStats:
    """Parse the user/sys/idle percentages from ``top``'s CPU line."""
    tokens = _PERCENT_RE.findall(text)
    if len(tokens) < 3:
        raise ParseError(f"expected 3 CPU percentages, got {len(tokens)}: {text.strip()!r}")

    user, system, idle = (int(float(t)) for t in tokens[:3])
    return CpuStats(
        used_percentage=user + system,
        user_percentage=user,
        system_percentage=system,
        idle_percentage=idle,
    )
