from .event import Event, EventType, StatsUpdate
from .icon import IconOption, IconUnit, Indicator
from .result import MetricResult, Present, Unavailable, value_or_none
from .snapshot import CpuStats, MemoryStats, NetworkStats, Snapshot

__all__ = [
    "Event",
    "EventType",
    "StatsUpdate",
    "IconOption",
    "IconUnit",
    "Indicator",
    "MetricResult",
    "Present",
    "Unavailable",
    "value_or_none",
    "CpuStats",
    "MemoryStats",
    "NetworkStats",
    "Snapshot",
]
