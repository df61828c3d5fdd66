"""Tests for environment-driven configuration parsing."""

import importlib

import pytest

from vitals_monitor import config


class TestConfigParsing:
    def test_defaults(self):
        assert config.UPDATE_INTERVAL_MS == 2000
        assert config.HISTORY_CAPACITY == 20
        assert config.ABNORMAL_PROBABILITY == pytest.approx(0.2)

    def test_int_env_override(self, monkeypatch):
        monkeypatch.setenv("VITALS_TEST_INT", "30")
        assert config._int_env("VITALS_TEST_INT", 20) == 30

    def test_int_env_blank_uses_default(self, monkeypatch):
        monkeypatch.setenv("VITALS_TEST_INT", "  ")
        assert config._int_env("VITALS_TEST_INT", 20) == 20

    def test_int_env_rejects_garbage(self, monkeypatch):
        monkeypatch.setenv("VITALS_TEST_INT", "twenty")
        with pytest.raises(ValueError, match="VITALS_TEST_INT"):
            config._int_env("VITALS_TEST_INT", 20)

    def test_int_env_rejects_below_minimum(self, monkeypatch):
        monkeypatch.setenv("VITALS_TEST_INT", "0")
        with pytest.raises(ValueError):
            config._int_env("VITALS_TEST_INT", 20)

    def test_probability_env_bounds(self, monkeypatch):
        monkeypatch.setenv("VITALS_TEST_P", "0.5")
        assert config._probability_env("VITALS_TEST_P", 0.2) == 0.5
        monkeypatch.setenv("VITALS_TEST_P", "1.5")
        with pytest.raises(ValueError):
            config._probability_env("VITALS_TEST_P", 0.2)

    def test_optional_seed(self, monkeypatch):
        monkeypatch.delenv("VITALS_TEST_SEED", raising=False)
        assert config._optional_int_env("VITALS_TEST_SEED") is None
        monkeypatch.setenv("VITALS_TEST_SEED", "0")
        assert config._optional_int_env("VITALS_TEST_SEED") == 0

    def test_int_env_rejects_above_maximum(self, monkeypatch):
        monkeypatch.setenv("VITALS_TEST_PORT", "70000")
        with pytest.raises(ValueError, match="VITALS_TEST_PORT"):
            config._int_env("VITALS_TEST_PORT", 8050, maximum=65535)
        monkeypatch.setenv("VITALS_TEST_PORT", "65535")
        assert config._int_env("VITALS_TEST_PORT", 8050, maximum=65535) == 65535

    @pytest.mark.parametrize("raw,expected", [("1", True), ("Yes", True), ("off", False), ("", False)])
    def test_bool_env(self, monkeypatch, raw, expected):
        monkeypatch.setenv("VITALS_TEST_FLAG", raw)
        assert config._bool_env("VITALS_TEST_FLAG", False) is expected

    def test_bool_env_rejects_garbage(self, monkeypatch):
        monkeypatch.setenv("VITALS_TEST_FLAG", "maybe")
        with pytest.raises(ValueError, match="VITALS_TEST_FLAG"):
            config._bool_env("VITALS_TEST_FLAG", False)

    def test_log_level_env(self, monkeypatch):
        monkeypatch.setenv("VITALS_TEST_LEVEL", "debug")
        assert config._log_level_env("VITALS_TEST_LEVEL", "INFO") == "DEBUG"
        monkeypatch.setenv("VITALS_TEST_LEVEL", "VERBOSE")
        with pytest.raises(ValueError, match="VITALS_TEST_LEVEL"):
            config._log_level_env("VITALS_TEST_LEVEL", "INFO")

    @pytest.mark.parametrize(
        "name,raw",
        [("VITALS_LOG_LEVEL", "VERBOSE"), ("VITALS_DEBUG", "maybe"), ("VITALS_PORT", "70000")],
    )
    def test_module_import_rejects_bad_settings(self, monkeypatch, name, raw):
        monkeypatch.setenv(name, raw)
        try:
            with pytest.raises(ValueError, match=name):
                importlib.reload(config)
        finally:
            monkeypatch.delenv(name)
            importlib.reload(config)
