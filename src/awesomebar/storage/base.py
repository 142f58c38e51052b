from abc import ABC, abstractmethod
from collections.abc import Sequence

from awesomebar.entities.search_result import SearchResult


class BaseHistoryStorage(ABC):
    """Read side of a browsing history store."""

    @abstractmethod
    async def get_suggestions(self, query: str, limit: int) -> Sequence[SearchResult]:
        """
        Find history entries matching a partial input.

        Args:
            query: The text typed so far.
            limit: Size hint. Implementations should return at most this many
                results, but callers must not rely on it.

        Returns:
            Matching search results, in the store's own order.
        """
        pass
