from dataclasses import dataclass

from loguru import logger

from awesomebar.entities.search_result import SearchResult
from awesomebar.errors import HistoryQueryError

from .base import BaseHistoryStorage


@dataclass
class _HistoryEntry:
    url: str
    title: str | None = None
    visit_count: int = 0


class InMemoryHistoryStorage(BaseHistoryStorage):
    """
    A simple in-memory history store.
    Matches the query case-insensitively against url and title and scores
    each entry by its visit count.
    """

    def __init__(self):
        self._entries: dict[str, _HistoryEntry] = {}
        self._closed = False

    def record_visit(self, url: str, title: str | None = None) -> None:
        entry = self._entries.setdefault(url, _HistoryEntry(url=url))
        entry.visit_count += 1
        if title:
            entry.title = title

    async def get_suggestions(self, query: str, limit: int) -> list[SearchResult]:
        if self._closed:
            raise HistoryQueryError("History storage is closed", details={"query": query})

        needle = query.lower()
        matches = []
        for entry in self._entries.values():
            if needle in entry.url.lower() or (entry.title and needle in entry.title.lower()):
                matches.append(
                    SearchResult(id=entry.url, url=entry.url, score=entry.visit_count, title=entry.title)
                )

        matches.sort(key=lambda r: r.score, reverse=True)
        logger.debug(f"History query '{query}' matched {len(matches)} entries, returning {min(len(matches), limit)}")
        return matches[:limit]

    def close(self) -> None:
        self._closed = True
