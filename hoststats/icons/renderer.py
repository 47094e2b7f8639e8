from __future__ import annotations

import logging
from typing import Protocol

from hoststats.models.icon import IconOption, IconUnit, Indicator
from hoststats.models.snapshot import Snapshot

logger = logging.getLogger(__name__)

_LABELS = {
    Indicator.MEMORY: "MEM",
    Indicator.CPU: "CPU",
    Indicator.DOWNLOAD: "↓",
    Indicator.UPLOAD: "↑",
}


class IconRenderer(Protocol):
    def draw_icons(self, options: list[IconOption]) -> None: ...


def build_icon_options(snapshot: Snapshot) -> list[IconOption]:
    """Icon entries for a snapshot, in mem/cpu/dow/up order.

    Metrics missing from the snapshot are left out rather than drawn as 0.
    """
    options: list[IconOption] = []
    if snapshot.memory is not None:
        options.append(
            IconOption(
                indicator=Indicator.MEMORY,
                value=snapshot.memory.used_percentage,
                unit=IconUnit.PERCENTAGE,
            )
        )
    if snapshot.cpu is not None:
        options.append(
            IconOption(
                indicator=Indicator.CPU,
                value=snapshot.cpu.used_percentage,
                unit=IconUnit.PERCENTAGE,
            )
        )
    if snapshot.network is not None:
        options.append(
            IconOption(
                indicator=Indicator.DOWNLOAD,
                value=snapshot.network.download_mbs,
                unit=IconUnit.MBS,
            )
        )
        options.append(
            IconOption(
                indicator=Indicator.UPLOAD,
                value=snapshot.network.upload_mbs,
                unit=IconUnit.MBS,
            )
        )
    return options


class TextIconRenderer:
    """Renders icon options as a one-line menu-bar title."""

    def __init__(self) -> None:
        self.title = ""

    def draw_icons(self, options: list[IconOption]) -> None:
        self.title = " ".join(self.format_option(o) for o in options)
        logger.debug("Icon title: %s", self.title)

    @staticmethod
    def format_option(option: IconOption) -> str:
        label = _LABELS[option.indicator]
        if option.unit == IconUnit.PERCENTAGE:
            return f"{label} {int(option.value)}%"
        return f"{label}{option.value:.1f}"
