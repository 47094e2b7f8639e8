from __future__ import annotations

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # --- app ---
    app_name: str = "HostStats"
    debug: bool = False

    # --- sampling ---
    interval: int = Field(default=1000, gt=0)  # milliseconds between sampling passes
    command_timeout: float = 10.0  # seconds before a diagnostic command is killed
    max_result_cache: int = 100
    page_size: int = 4096  # bytes per vm_stat page
    noise_floor: float = 0.1  # MB/s, smaller deltas are reported as 0

    # --- diagnostic commands (macOS) ---
    cpu_usage_command: str = 'top -l 1 -stats "pid,command,cpu" -n 0 |grep CPU'
    memory_stats_command: str = "vm_stat"
    memory_size_command: str = "sysctl -n hw.memsize"
    net_stat_command: str = (
        "nettop -x -k state -k interface -k rx_dupe -k rx_ooo -k re-tx"
        " -k rtt_avg -k rcvsize -k tx_win -k tc_class -k tc_mgt -k cc_algo"
        " -k P -k C -k R -k W -l 1 -t wifi -t wired"
    )

    # --- server ---
    host: str = "127.0.0.1"
    port: int = 8000
    cors_origins: list[str] = ["http://localhost:5173"]

    model_config = {"env_file": ".env", "env_prefix": "HOSTSTATS_"}


settings = Settings()


def get_setting(key: str) -> Any:
    """Look up a single setting by name."""
    if key not in Settings.model_fields:
        raise KeyError(f"Unknown setting: {key}")
    return getattr(settings, key)
