"""Tests for hoststats.icons — icon options and the text renderer."""

from __future__ import annotations

from hoststats.icons import TextIconRenderer, build_icon_options
from hoststats.models import (
    CpuStats,
    IconOption,
    IconUnit,
    Indicator,
    MemoryStats,
    NetworkStats,
    Snapshot,
)


def _full_snapshot() -> Snapshot:
    return Snapshot(
        memory=MemoryStats(used_percentage=45, used_mb=7372.8, free_mb=2048.0),
        cpu=CpuStats(
            used_percentage=16, user_percentage=12, system_percentage=4, idle_percentage=83
        ),
        network=NetworkStats(upload_mbs=0.1, download_mbs=2.3),
    )


class TestBuildIconOptions:
    def test_all_four_entries_in_order(self):
        options = build_icon_options(_full_snapshot())
        assert options == [
            IconOption(indicator=Indicator.MEMORY, value=45, unit=IconUnit.PERCENTAGE),
            IconOption(indicator=Indicator.CPU, value=16, unit=IconUnit.PERCENTAGE),
            IconOption(indicator=Indicator.DOWNLOAD, value=2.3, unit=IconUnit.MBS),
            IconOption(indicator=Indicator.UPLOAD, value=0.1, unit=IconUnit.MBS),
        ]

    def test_absent_metrics_are_omitted(self):
        snapshot = _full_snapshot().model_copy(update={"memory": None, "network": None})
        options = build_icon_options(snapshot)
        assert [o.indicator for o in options] == [Indicator.CPU]

    def test_empty_snapshot(self):
        assert build_icon_options(Snapshot()) == []

    def test_zero_usage_is_still_drawn(self):
        snapshot = Snapshot(network=NetworkStats())
        options = build_icon_options(snapshot)
        assert [o.value for o in options] == [0.0, 0.0]


class TestTextIconRenderer:
    def test_title(self):
        renderer = TextIconRenderer()
        renderer.draw_icons(build_icon_options(_full_snapshot()))
        assert renderer.title == "MEM 45% CPU 16% ↓2.3 ↑0.1"

    def test_empty_title(self):
        renderer = TextIconRenderer()
        renderer.draw_icons([])
        assert renderer.title == ""
