from __future__ import annotations

import uuid
from datetime import datetime, timezone
from enum import StrEnum

from pydantic import BaseModel, Field

from hoststats.models.snapshot import Snapshot


class EventType(StrEnum):
    STATS_UPDATED = "stats_updated"


class StatsUpdate(BaseModel):
    """Full history as of one pass, plus the interval it was taken at."""

    results: list[Snapshot]
    interval: float = Field(gt=0)


class Event(BaseModel):
    """Notification emitted by the sampler once a pass has been published."""

    id: str = Field(default_factory=lambda: uuid.uuid4().hex[:12])
    event_type: EventType
    payload: StatsUpdate
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
