from .base import CommandFailed, MetricCollector
from .cpu_collector import CpuCollector
from .memory_collector import MemoryCollector
from .network_collector import NetworkCollector

__all__ = [
    "CommandFailed",
    "MetricCollector",
    "CpuCollector",
    "MemoryCollector",
    "NetworkCollector",
]
