from .cpu import parse_cpu
from .errors import ParseError
from .memory import VmStatPages, parse_memory, parse_total_memory, parse_vm_stat_pages
from .network import NetworkTotals, parse_network_totals

__all__ = [
    "parse_cpu",
    "ParseError",
    "VmStatPages",
    "parse_memory",
    "parse_total_memory",
    "parse_vm_stat_pages",
    "NetworkTotals",
    "parse_network_totals",
]
