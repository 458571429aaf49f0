"""Configuration package for quest_api."""

from quest_api.configs.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
