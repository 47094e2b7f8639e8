from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class Indicator(StrEnum):
    MEMORY = "mem"
    CPU = "cpu"
    DOWNLOAD = "dow"
    UPLOAD = "up"


class IconUnit(StrEnum):
    PERCENTAGE = "percentage"
    MBS = "mbs"


class IconOption(BaseModel):
    """One indicator drawn in the menu-bar icon."""

    indicator: Indicator
    value: float
    unit: IconUnit
