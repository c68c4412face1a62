"""
Configuration management for the Learning Path Digest.
Handles loading, validating, and providing access to application settings.
"""

import os
import json
from pathlib import Path
from typing import Dict, Any, Optional
from dataclasses import dataclass


@dataclass
class AppConfig:
    """Application configuration settings."""
    host: str
    port: int
    debug: bool
    log_file: Optional[str] = None


@dataclass
class PathsConfig:
    """Path configuration settings."""
    student_data_dir: str


@dataclass
class RecommendationConfig:
    """Thresholds used by the recommendation rules."""
    underexplored_threshold: int
    consistent_interest_threshold: int
    balance_min_tasks: int
    challenge_min_tasks: int

    def engine_kwargs(self) -> Dict[str, int]:
        """Keyword arguments accepted by build_default_engine."""
        return {
            "underexplored_threshold": self.underexplored_threshold,
            "consistent_interest_threshold": self.consistent_interest_threshold,
            "balance_min_tasks": self.balance_min_tasks,
            "challenge_min_tasks": self.challenge_min_tasks,
        }


# environment variable -> (section, key, parser)
_ENV_OVERRIDES = {
    "APP_HOST": ("app", "host", str),
    "APP_PORT": ("app", "port", int),
    "APP_DEBUG": ("app", "debug", lambda value: value.lower() == "true"),
    "APP_LOG_FILE": ("app", "log_file", str),
    "STUDENT_DATA_DIR": ("paths", "student_data_dir", str),
    "UNDEREXPLORED_THRESHOLD": ("recommendations", "underexplored_threshold", int),
    "CONSISTENT_INTEREST_THRESHOLD": ("recommendations", "consistent_interest_threshold", int),
    "BALANCE_MIN_TASKS": ("recommendations", "balance_min_tasks", int),
    "CHALLENGE_MIN_TASKS": ("recommendations", "challenge_min_tasks", int),
}


class ConfigManager:
    """Manages application configuration loading and access."""

    def __init__(self, config_file: str = "web_app_config.json"):
        self.config_file = Path(config_file)
        self._config: Optional[Dict[str, Any]] = None
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from file and environment variables."""
        self._config = self._get_default_config()

        if self.config_file.exists():
            try:
                with open(self.config_file, 'r', encoding='utf-8') as f:
                    file_config = json.load(f)
                    self._merge_config(file_config)
            except (json.JSONDecodeError, FileNotFoundError):
                # Keep default config if file is invalid or not found
                pass

        self._override_with_env()

    def _get_default_config(self) -> Dict[str, Any]:
        """Get default configuration."""
        return {
            "app": {
                "host": "0.0.0.0",
                "port": 22581,
                "debug": False,
                "log_file": None
            },
            "paths": {
                "student_data_dir": "student_data"
            },
            "recommendations": {
                "underexplored_threshold": 2,
                "consistent_interest_threshold": 3,
                "balance_min_tasks": 5,
                "challenge_min_tasks": 10
            }
        }

    def _merge_config(self, file_config: Dict[str, Any]) -> None:
        """Merge file configuration with current config."""
        for section, values in file_config.items():
            if section in self._config and isinstance(values, dict):
                self._config[section].update(values)
            else:
                self._config[section] = values

    def _override_with_env(self) -> None:
        """Override configuration with environment variables."""
        for env_name, (section, key, parse) in _ENV_OVERRIDES.items():
            raw = os.getenv(env_name)
            if raw:
                self._config[section][key] = parse(raw)

    def get_app_config(self) -> AppConfig:
        """Get application configuration."""
        app_config = self._config["app"]
        return AppConfig(
            host=app_config["host"],
            port=app_config["port"],
            debug=app_config["debug"],
            log_file=app_config.get("log_file")
        )

    def get_paths_config(self) -> PathsConfig:
        """Get paths configuration."""
        paths_config = self._config["paths"]
        return PathsConfig(
            student_data_dir=paths_config["student_data_dir"]
        )

    def get_recommendation_config(self) -> RecommendationConfig:
        """Get recommendation rule thresholds."""
        rec_config = self._config["recommendations"]
        return RecommendationConfig(
            underexplored_threshold=rec_config["underexplored_threshold"],
            consistent_interest_threshold=rec_config["consistent_interest_threshold"],
            balance_min_tasks=rec_config["balance_min_tasks"],
            challenge_min_tasks=rec_config["challenge_min_tasks"]
        )

    def get_config(self) -> Dict[str, Any]:
        """Get raw configuration dictionary."""
        return self._config.copy()

    def reload(self) -> None:
        """Reload configuration from file."""
        self._load_config()

    def save_config(self) -> None:
        """Save current configuration to file."""
        with open(self.config_file, 'w', encoding='utf-8') as f:
            json.dump(self._config, f, indent=2, ensure_ascii=False)


# Global configuration instance
config_manager = ConfigManager()


def get_app_config() -> AppConfig:
    """Get application configuration."""
    return config_manager.get_app_config()


def get_paths_config() -> PathsConfig:
    """Get paths configuration."""
    return config_manager.get_paths_config()


def get_recommendation_config() -> RecommendationConfig:
    """Get recommendation configuration."""
    return config_manager.get_recommendation_config()


def save_config() -> None:
    """Save configuration to file."""
    config_manager.save_config()
