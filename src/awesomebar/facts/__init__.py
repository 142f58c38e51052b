from .awesomebar_facts import AwesomeBarFacts, emit_history_suggestion_clicked_fact
from .dispatcher import FactDispatcher
from .fact import Action, Component, Fact
from .processor import CollectingFactProcessor, FactProcessor, LoggingFactProcessor

__all__ = [
    "Action",
    "AwesomeBarFacts",
    "CollectingFactProcessor",
    "Component",
    "Fact",
    "FactDispatcher",
    "FactProcessor",
    "LoggingFactProcessor",
    "emit_history_suggestion_clicked_fact",
]
