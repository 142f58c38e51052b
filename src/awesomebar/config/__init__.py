"""Configuration system for awesomebar."""

from .models import DEFAULT_HISTORY_SUGGESTION_LIMIT, ProviderConfig
from .settings import Settings, load_settings

__all__ = ["DEFAULT_HISTORY_SUGGESTION_LIMIT", "ProviderConfig", "Settings", "load_settings"]
