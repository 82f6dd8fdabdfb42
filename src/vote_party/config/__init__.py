"""Configuration and dependency wiring."""

from vote_party.config.container import Container, create_container
from vote_party.config.settings import Settings, clear_settings_cache, get_settings

__all__ = [
    "Settings",
    "get_settings",
    "clear_settings_cache",
    "Container",
    "create_container",
]
