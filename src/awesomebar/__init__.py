"""
awesomebar - history-backed url suggestions for browser address bars.

Turns partial input into a ranked, deduplicated list of previously visited
urls, warms up a connection to the best match and reports clicks as
interaction facts.
"""

__version__ = "0.1.0"

from .config import DEFAULT_HISTORY_SUGGESTION_LIMIT, ProviderConfig, Settings, load_settings
from .engine import BaseEngine, HttpxEngine
from .entities import SearchResult, Suggestion
from .errors import AwesomeBarError, ConfigurationError, HistoryQueryError, SpeculativeConnectError
from .facts import (
    Action,
    AwesomeBarFacts,
    CollectingFactProcessor,
    Component,
    Fact,
    FactDispatcher,
    FactProcessor,
    LoggingFactProcessor,
)
from .logging_config import setup_logging
from .provider import BaseSuggestionProvider, HistoryStorageSuggestionProvider, SuggestionPostProcessor
from .session import BaseLoadUrlUseCase, LoadUrlFlags
from .storage import BaseHistoryStorage, InMemoryHistoryStorage

__all__ = [
    # Version
    "__version__",
    # Entities
    "SearchResult",
    "Suggestion",
    # Providers
    "BaseSuggestionProvider",
    "HistoryStorageSuggestionProvider",
    "SuggestionPostProcessor",
    # Collaborators
    "BaseHistoryStorage",
    "InMemoryHistoryStorage",
    "BaseEngine",
    "HttpxEngine",
    "BaseLoadUrlUseCase",
    "LoadUrlFlags",
    # Facts
    "Action",
    "AwesomeBarFacts",
    "CollectingFactProcessor",
    "Component",
    "Fact",
    "FactDispatcher",
    "FactProcessor",
    "LoggingFactProcessor",
    # Config
    "DEFAULT_HISTORY_SUGGESTION_LIMIT",
    "ProviderConfig",
    "Settings",
    "load_settings",
    "setup_logging",
    # Errors
    "AwesomeBarError",
    "ConfigurationError",
    "HistoryQueryError",
    "SpeculativeConnectError",
]
