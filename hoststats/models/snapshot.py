from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field


class MemoryStats(BaseModel):
    """Physical memory usage, in megabytes."""

    used_percentage: int = Field(ge=0, le=100)
    used_mb: float = Field(ge=0)
    free_mb: float = Field(ge=0)


class CpuStats(BaseModel):
    used_percentage: int = Field(ge=0)
    user_percentage: int = Field(ge=0)
    system_percentage: int = Field(ge=0)
    idle_percentage: int = Field(ge=0)


class NetworkStats(BaseModel):
    """Instantaneous throughput in MB/s."""

    upload_mbs: float = Field(default=0.0, ge=0)
    download_mbs: float = Field(default=0.0, ge=0)


class Snapshot(BaseModel):
    """Result of one sampling pass.

    A metric that could not be obtained is ``None``, never zeroed.
    """

    memory: MemoryStats | None = None
    cpu: CpuStats | None = None
    network: NetworkStats | None = None
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
