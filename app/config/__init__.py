"""Configuration package for environment-driven settings of the finance tracker."""

from .settings import AppSettings, SettingsLoadError, config_load_database_url, config_load_settings

__all__ = ["AppSettings", "SettingsLoadError", "config_load_settings", "config_load_database_url"]
