"""Tests for application settings parsing."""
import logging

from utils.config import Config, DEFAULT_ANNUAL_GOAL


class TestAppSettings:
    def test_defaults_with_empty_source(self):
        settings = Config._build_app_config({})

        assert settings["ANNUAL_GOAL"] == DEFAULT_ANNUAL_GOAL
        assert settings["LOG_LEVEL"] == "INFO"
        assert settings["ENABLE_ADVISORY"] is True
        assert settings["ENABLE_EXPORT"] is True

    def test_annual_goal_override(self):
        assert Config._build_app_config({"ANNUAL_GOAL": "2500000"})["ANNUAL_GOAL"] == 2_500_000.0

    def test_malformed_annual_goal_falls_back_with_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="utils.config"):
            settings = Config._build_app_config({"ANNUAL_GOAL": "2,18 milhões"})

        assert settings["ANNUAL_GOAL"] == DEFAULT_ANNUAL_GOAL
        assert "ANNUAL_GOAL" in caplog.text

    def test_blank_annual_goal_uses_default(self):
        assert Config._build_app_config({"ANNUAL_GOAL": "  "})["ANNUAL_GOAL"] == DEFAULT_ANNUAL_GOAL

    def test_feature_flags(self):
        settings = Config._build_app_config({"ENABLE_ADVISORY": "false", "ENABLE_EXPORT": "yes"})
        assert settings["ENABLE_ADVISORY"] is False
        assert settings["ENABLE_EXPORT"] is True
