"""Configuration for Git Web Links."""

from git_web_links.config.settings import Settings, SettingsProvider, get_settings

__all__ = ["Settings", "SettingsProvider", "get_settings"]
