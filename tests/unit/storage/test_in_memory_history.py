import pytest

from awesomebar.errors import HistoryQueryError
from awesomebar.storage.in_memory import InMemoryHistoryStorage


@pytest.fixture
def storage():
    storage = InMemoryHistoryStorage()
    storage.record_visit("http://www.mozilla.com/", title="Mozilla")
    storage.record_visit("http://www.mozilla.com/")
    storage.record_visit("http://www.mozilla.com/")
    storage.record_visit("http://www.getpocket.com/", title="Pocket")
    storage.record_visit("http://www.getpocket.com/")
    storage.record_visit("http://www.example.com/")
    return storage


class TestInMemoryHistoryStorage:

    @pytest.mark.asyncio
    async def test_matches_url_and_scores_by_visits(self, storage):
        results = await storage.get_suggestions("www", 10)

        assert [(r.url, r.score) for r in results] == [
            ("http://www.mozilla.com/", 3),
            ("http://www.getpocket.com/", 2),
            ("http://www.example.com/", 1),
        ]
        assert all(r.id == r.url for r in results)

    @pytest.mark.asyncio
    async def test_matches_title_case_insensitively(self, storage):
        results = await storage.get_suggestions("POCK", 10)

        assert len(results) == 1
        assert results[0].title == "Pocket"

    @pytest.mark.asyncio
    async def test_title_is_kept_from_earlier_visit(self, storage):
        results = await storage.get_suggestions("mozilla", 10)

        assert results[0].title == "Mozilla"

    @pytest.mark.asyncio
    async def test_respects_limit(self, storage):
        results = await storage.get_suggestions("www", 2)

        assert len(results) == 2

    @pytest.mark.asyncio
    async def test_no_match(self, storage):
        assert await storage.get_suggestions("nothing", 10) == []

    @pytest.mark.asyncio
    async def test_closed_storage_raises(self, storage):
        storage.close()

        with pytest.raises(HistoryQueryError) as exc_info:
            await storage.get_suggestions("www", 10)

        assert exc_info.value.details == {"query": "www"}
