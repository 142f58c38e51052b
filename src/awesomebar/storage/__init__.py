from .base import BaseHistoryStorage
from .in_memory import InMemoryHistoryStorage

__all__ = ["BaseHistoryStorage", "InMemoryHistoryStorage"]
