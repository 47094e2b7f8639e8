from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Present(BaseModel, Generic[T]):
    """A metric that was sampled successfully."""

    value: T


class Unavailable(BaseModel):
    """A metric that could not be sampled this pass."""

    reason: str = ""


MetricResult = Present | Unavailable


def value_or_none(result: MetricResult) -> Any | None:
    if isinstance(result, Present):
        return result.value
    return None
