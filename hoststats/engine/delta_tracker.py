from __future__ import annotations

import math

from hoststats.models.snapshot import NetworkStats


def round_half_up(value: float) -> float:
    """Round to one decimal, ties toward positive infinity (0.25 -> 0.3)."""
    return math.floor(value * 10 + 0.5) / 10


class DeltaTracker:
    """Turns cumulative, interval-normalized throughput into per-pass rates.

    The first observation only establishes a baseline and reports zero.
    Deltas under ``noise_floor`` (including negative ones, e.g. when a
    connection closes and its counters disappear) are reported as 0.
    """

    def __init__(self, noise_floor: float = 0.1) -> None:
        self.noise_floor = noise_floor
        self.last_upload: float | None = None
        self.last_download: float | None = None

    def update(self, upload: float, download: float) -> NetworkStats:
        if not self.has_baseline:
            current_upload = current_download = 0.0
        else:
            current_upload = self._floor(round_half_up(upload - self.last_upload))
            current_download = self._floor(round_half_up(download - self.last_download))

        self.last_upload = upload
        self.last_download = download
        return NetworkStats(upload_mbs=current_upload, download_mbs=current_download)

    @property
    def has_baseline(self) -> bool:
        return self.last_upload is not None and self.last_download is not None

    def _floor(self, value: float) -> float:
        return 0.0 if value < self.noise_floor else value
