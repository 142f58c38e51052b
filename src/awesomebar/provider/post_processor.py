from collections.abc import Iterable

from awesomebar.entities.search_result import SearchResult


class SuggestionPostProcessor:
    """
    Turns raw history matches into a ranked candidate list:
    1. Deduplication by id, keeping the best score
    2. Sorting by descending score
    3. Truncation

    The pipeline is idempotent: running it on its own output returns the
    same list.
    """

    def run(self, results: Iterable[SearchResult], limit: int | None = None) -> list[SearchResult]:
        """
        Apply all post-processing steps.

        Args:
            results: Raw matches in arrival order.
            limit: Maximum number of results to keep, None keeps all.

        Returns:
            Processed list of results.
        """
        unique = self._deduplicate(results)
        ranked = self._sort_by_score(unique)
        return self._truncate(ranked, limit)

    def _deduplicate(self, results: Iterable[SearchResult]) -> list[SearchResult]:
        """
        Keep one result per id.

        The first result seen for an id wins ties; a strictly higher score
        replaces it. A replaced entry keeps the position of the first result
        seen for its id.
        """
        best: dict[str, SearchResult] = {}
        for result in results:
            current = best.get(result.id)
            if current is None or result.score > current.score:
                best[result.id] = result
        return list(best.values())

    def _sort_by_score(self, results: list[SearchResult]) -> list[SearchResult]:
        # sorted() is stable with reverse=True, so ties keep insertion order
        return sorted(results, key=lambda r: r.score, reverse=True)

    def _truncate(self, results: list[SearchResult], limit: int | None) -> list[SearchResult]:
        if limit is None:
            return results
        return results[:limit]
