import pytest

from awesomebar.entities.search_result import SearchResult
from awesomebar.provider.post_processor import SuggestionPostProcessor


def result(id: str, score: float, url: str | None = None) -> SearchResult:
    return SearchResult(id=id, url=url or f"http://{id}/", score=score)


class TestSuggestionPostProcessor:

    @pytest.fixture
    def processor(self):
        return SuggestionPostProcessor()

    def test_keeps_highest_score_per_id(self, processor):
        results = [result("moz", 1), result("moz", 3), result("moz", 2)]

        processed = processor.run(results)

        assert len(processed) == 1
        assert processed[0].score == 3

    def test_first_result_wins_tie(self, processor):
        first = result("moz", 2, url="http://first/")
        second = result("moz", 2, url="http://second/")

        processed = processor.run([first, second])

        assert processed == [first]

    def test_sorted_by_descending_score(self, processor):
        results = [result("a", 2), result("b", 5), result("c", 3)]

        processed = processor.run(results)

        assert [r.score for r in processed] == [5, 3, 2]

    def test_ties_keep_first_insertion_order(self, processor):
        # "b" is upgraded to 4 after "c" arrives but keeps its earlier slot
        results = [result("a", 1), result("b", 1), result("c", 4), result("b", 4), result("d", 4)]

        processed = processor.run(results)

        assert [r.id for r in processed] == ["b", "c", "d", "a"]

    def test_truncates_after_sorting(self, processor):
        results = [result(f"id{i}", i) for i in range(10)]

        processed = processor.run(results, limit=3)

        assert [r.score for r in processed] == [9, 8, 7]

    def test_no_limit_keeps_all(self, processor):
        results = [result(f"id{i}", 1) for i in range(30)]

        assert len(processor.run(results)) == 30

    def test_empty_input(self, processor):
        assert processor.run([], limit=5) == []

    def test_run_is_idempotent(self, processor):
        results = [
            result("pocket", 5),
            result("moz", 1), result("moz", 2), result("moz", 3),
            result("example", 2),
            result("other", 2),
        ]

        once = processor.run(results, limit=3)
        twice = processor.run(once, limit=3)

        assert once == twice
        assert [r.id for r in once] == ["pocket", "moz", "example"]

    def test_accepts_any_iterable(self, processor):
        processed = processor.run((r for r in [result("a", 1), result("a", 2)]))

        assert [r.score for r in processed] == [2]

    def test_non_finite_scores_never_reach_ranking(self, processor):
        with pytest.raises(ValueError):
            processor.run([result("a", 1), result("n", float("nan")), result("b", 5)])
