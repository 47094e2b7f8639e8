from .delta_tracker import DeltaTracker
from .event_bus import EventBus
from .result_cache import MAX_RESULT_CACHE, ResultCache

# StatsSampler lives in hoststats.engine.sampler; it depends on the
# collectors, which depend on DeltaTracker from this package.

__all__ = [
    "DeltaTracker",
    "EventBus",
    "MAX_RESULT_CACHE",
    "ResultCache",
]
