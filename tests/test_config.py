"""Tests for hoststats.config — Settings defaults, env override, get_setting."""

from __future__ import annotations

import pytest


class TestSettings:
    def test_default_values(self):
        from hoststats.config import Settings
        s = Settings()
        assert s.app_name == "HostStats"
        assert s.debug is False
        assert s.interval == 1000
        assert s.command_timeout == 10.0
        assert s.max_result_cache == 100
        assert s.page_size == 4096
        assert s.noise_floor == 0.1
        assert s.port == 8000
        assert "http://localhost:5173" in s.cors_origins

    def test_default_commands(self):
        from hoststats.config import Settings
        s = Settings()
        assert s.memory_stats_command == "vm_stat"
        assert s.memory_size_command == "sysctl -n hw.memsize"
        assert s.cpu_usage_command.endswith("grep CPU")
        assert s.net_stat_command.startswith("nettop -x")

    def test_env_prefix(self):
        from hoststats.config import Settings
        assert Settings.model_config["env_prefix"] == "HOSTSTATS_"

    def test_env_override(self, monkeypatch):
        from hoststats.config import Settings
        monkeypatch.setenv("HOSTSTATS_INTERVAL", "2500")
        assert Settings().interval == 2500

    def test_interval_must_be_positive(self):
        from pydantic import ValidationError

        from hoststats.config import Settings
        with pytest.raises(ValidationError):
            Settings(interval=0)
        with pytest.raises(ValidationError):
            Settings(interval=-500)

    def test_env_interval_must_be_positive(self, monkeypatch):
        from pydantic import ValidationError

        from hoststats.config import Settings
        monkeypatch.setenv("HOSTSTATS_INTERVAL", "0")
        with pytest.raises(ValidationError):
            Settings()


class TestGetSetting:
    def test_known_key(self):
        from hoststats.config import get_setting, settings
        assert get_setting("interval") == settings.interval

    def test_unknown_key(self):
        from hoststats.config import get_setting
        with pytest.raises(KeyError):
            get_setting("no_such_setting")
