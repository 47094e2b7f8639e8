"""Parsing for ``vm_stat`` and ``sysctl -n hw.memsize`` output.

``vm_stat`` prints one counter per line, e.g.::

    Mach Virtual Memory Statistics: (page size of 4096 bytes)
    Pages free:                               12345.
    Pages active:                            456789.
    ...

Counters are read by line position, so a change in the line order of a
future macOS release shows up here as a ``ParseError`` or wrong numbers.
"""

from __future__ import annotations

import re
from typing import NamedTuple

from hoststats.models.snapshot import MemoryStats
from hoststats.parsers.errors import ParseError

UNIT_DIVISOR = 1048576  # bytes per MB
PAGE_SIZE = 4096

_FREE_LINE = 1
_INACTIVE_LINE = 3
_WIRED_LINE = 6
_PURGEABLE_LINE = 7
_ANONYMOUS_LINE = 14
_COMPRESSED_LINE = 16

_INT_RE = re.compile(r"\d+")


class VmStatPages(NamedTuple):
    free: int
    inactive: int
    wired: int
    purgeable: int
    anonymous: int
    compressed: int


def parse_total_memory(text: str) -> int:
    """Return total physical memory in whole megabytes."""
    try:
        total_bytes = int(text.strip())
    except ValueError:
        raise ParseError(f"hw.memsize is not an integer: {text.strip()!r}") from None
    return total_bytes // UNIT_DIVISOR


def _page_count(lines: list[str], index: int) -> int:
    if index >= len(lines):
        raise ParseError(f"vm_stat output has no line {index}")
    match = _INT_RE.search(lines[index])
    if not match:
        raise ParseError(f"vm_stat line {index} has no page count: {lines[index]!r}")
    return int(match.group())


def parse_vm_stat_pages(text: str) -> VmStatPages:
    lines = text.split("\n")
    return VmStatPages(
        free=_page_count(lines, _FREE_LINE),
        inactive=_page_count(lines, _INACTIVE_LINE),
        wired=_page_count(lines, _WIRED_LINE),
        purgeable=_page_count(lines, _PURGEABLE_LINE),
        anonymous=_page_count(lines, _ANONYMOUS_LINE),
        compressed=_page_count(lines, _COMPRESSED_LINE),
    )


def parse_memory(
    vm_stat_text: str,
    memsize_text: str,
    page_size: int = PAGE_SIZE,
) -> MemoryStats:
    total_memory = parse_total_memory(memsize_text)
    if total_memory <= 0:
        raise ParseError("total memory is zero")

    pages = parse_vm_stat_pages(vm_stat_text)

    def to_mb(count: int) -> float:
        return count * page_size / UNIT_DIVISOR

    app_memory = to_mb(pages.anonymous) + to_mb(pages.purgeable)
    used_memory = app_memory + to_mb(pages.wired) + to_mb(pages.compressed)
    free_memory = to_mb(pages.free) + to_mb(pages.inactive)

    used_percentage = int(used_memory / total_memory * 100)
    if used_percentage > 100:
        raise ParseError(
            f"used memory {used_memory:.0f}MB exceeds total {total_memory}MB"
        )

    return MemoryStats(
        used_percentage=used_percentage,
        used_mb=used_memory,
        free_mb=free_memory,
    )
