"""Parsing for ``nettop -x ... -l 1`` output.

Each connection row we care about ends with a fractional column followed by
two integer byte counters, received then sent::

    tcp4 192.168.1.2:52144<->17.57.146.20:5223  en0  Established ... 1.25  482813  93021

The counters are cumulative since the connection opened.
"""

from __future__ import annotations

import re
from typing import NamedTuple

from hoststats.parsers.errors import ParseError

_ROW_RE = re.compile(r"\.\d+[ \t]+(\d+)[ \t]+(\d+)[ \t]*$", re.MULTILINE)


class NetworkTotals(NamedTuple):
    """Summed byte counters across all matched rows."""

    download: float
    upload: float


def parse_network_totals(text: str) -> NetworkTotals:
    rows = _ROW_RE.findall(text)
    if not rows:
        raise ParseError("no nettop rows with byte counters")

    download = 0.0
    upload = 0.0
    for received, sent in rows:
        download += float(received)
        upload += float(sent)
    return NetworkTotals(download=download, upload=upload)
