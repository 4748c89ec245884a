"""Configuration package for runtime settings and startup validation."""

from .settings import AppSettings, SettingsLoadError, config_load_settings

__all__ = ["AppSettings", "SettingsLoadError", "config_load_settings"]
