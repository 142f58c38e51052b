"""Data entities exchanged between history stores, providers and callers."""

from .search_result import SearchResult
from .suggestion import Suggestion

__all__ = ["SearchResult", "Suggestion"]
