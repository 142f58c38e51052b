"""Suggestion providers."""

from .base import BaseSuggestionProvider
from .history import HistoryStorageSuggestionProvider
from .post_processor import SuggestionPostProcessor

__all__ = ["BaseSuggestionProvider", "HistoryStorageSuggestionProvider", "SuggestionPostProcessor"]
