"""
Test cases for the configuration management system.
Tests config loading, validation, and access functionality.
"""

import os
import json
from unittest.mock import patch
import pytest

from config_manager import (
    ConfigManager,
    AppConfig,
    PathsConfig,
    RecommendationConfig,
)


class TestConfigManager:
    """Test the ConfigManager class functionality."""

    def test_defaults_when_file_missing(self, tmp_path):
        """Defaults apply when no config file exists."""
        with patch.dict(os.environ, {}, clear=True):
            manager = ConfigManager(str(tmp_path / "missing.json"))

        assert manager._config["app"]["port"] == 22581
        assert manager._config["paths"]["student_data_dir"] == "student_data"
        rec = manager.get_recommendation_config()
        assert rec == RecommendationConfig(
            underexplored_threshold=2,
            consistent_interest_threshold=3,
            balance_min_tasks=5,
            challenge_min_tasks=10,
        )

    def test_load_config_from_file(self, tmp_path):
        """File values are merged over the defaults section by section."""
        config_file = tmp_path / "web_app_config.json"
        config_file.write_text(json.dumps({
            "app": {"host": "localhost", "port": 8080},
            "recommendations": {"challenge_min_tasks": 20},
        }), encoding="utf-8")

        with patch.dict(os.environ, {}, clear=True):
            manager = ConfigManager(str(config_file))

        app_config = manager.get_app_config()
        assert isinstance(app_config, AppConfig)
        assert app_config.host == "localhost"
        assert app_config.port == 8080
        assert app_config.debug is False
        assert manager.get_recommendation_config().challenge_min_tasks == 20
        assert manager.get_recommendation_config().balance_min_tasks == 5

    def test_invalid_json_keeps_defaults(self, tmp_path):
        config_file = tmp_path / "web_app_config.json"
        config_file.write_text("{not json", encoding="utf-8")

        with patch.dict(os.environ, {}, clear=True):
            manager = ConfigManager(str(config_file))

        assert manager.get_app_config().port == 22581

    def test_override_with_env_variables(self, tmp_path):
        """Environment variables override file and defaults."""
        env_vars = {
            "APP_HOST": "127.0.0.1",
            "APP_PORT": "9000",
            "APP_DEBUG": "true",
            "APP_LOG_FILE": "logs/app.log",
            "STUDENT_DATA_DIR": "/var/data/students",
            "UNDEREXPLORED_THRESHOLD": "3",
            "CONSISTENT_INTEREST_THRESHOLD": "4",
            "BALANCE_MIN_TASKS": "6",
            "CHALLENGE_MIN_TASKS": "12",
        }
        with patch.dict(os.environ, env_vars, clear=True):
            manager = ConfigManager(str(tmp_path / "missing.json"))

        app_config = manager.get_app_config()
        assert app_config.host == "127.0.0.1"
        assert app_config.port == 9000
        assert app_config.debug is True
        assert app_config.log_file == "logs/app.log"

        paths = manager.get_paths_config()
        assert isinstance(paths, PathsConfig)
        assert paths.student_data_dir == "/var/data/students"

        assert manager.get_recommendation_config().engine_kwargs() == {
            "underexplored_threshold": 3,
            "consistent_interest_threshold": 4,
            "balance_min_tasks": 6,
            "challenge_min_tasks": 12,
        }

    def test_save_and_reload(self, tmp_path):
        config_file = tmp_path / "web_app_config.json"
        with patch.dict(os.environ, {}, clear=True):
            manager = ConfigManager(str(config_file))
            manager._config["app"]["port"] = 5050
            manager.save_config()

            assert json.loads(config_file.read_text(encoding="utf-8"))["app"]["port"] == 5050

            manager._config["app"]["port"] = 1
            manager.reload()
            assert manager.get_app_config().port == 5050

    def test_get_config_returns_copy(self, tmp_path):
        with patch.dict(os.environ, {}, clear=True):
            manager = ConfigManager(str(tmp_path / "missing.json"))
        raw = manager.get_config()
        raw["new_section"] = {}
        assert "new_section" not in manager.get_config()
