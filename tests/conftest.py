"""Pytest configuration and global fixtures for awesomebar tests."""

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from awesomebar.engine.base import BaseEngine
from awesomebar.entities.search_result import SearchResult
from awesomebar.facts import CollectingFactProcessor, FactDispatcher
from awesomebar.session.use_cases import BaseLoadUrlUseCase
from awesomebar.storage.base import BaseHistoryStorage


# ==================== Collaborator Fixtures ====================

@pytest.fixture
def history():
    """History store mock; set ``history.get_suggestions.return_value`` per test."""
    storage = MagicMock(spec=BaseHistoryStorage)
    storage.get_suggestions = AsyncMock(return_value=[])
    return storage


@pytest.fixture
def engine():
    return MagicMock(spec=BaseEngine)


@pytest.fixture
def load_url_use_case():
    return MagicMock(spec=BaseLoadUrlUseCase)


@pytest.fixture
def fact_collector():
    return CollectingFactProcessor()


@pytest.fixture
def fact_dispatcher(fact_collector):
    return FactDispatcher([fact_collector])


@pytest.fixture
def many_results():
    """Build ``n`` distinct-id results with equal score."""
    def build(n: int, score: float = 10) -> list[SearchResult]:
        return [
            SearchResult(id=f"id{i}", url=f"http://www.mozilla.com/{i}/", score=score)
            for i in range(1, n + 1)
        ]
    return build


# ==================== Pytest Configuration ====================

def pytest_configure(config):
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")


def pytest_collection_modifyitems(config, items):
    for item in items:
        rel_path = Path(item.fspath).relative_to(Path(__file__).parent)
        if "unit" in rel_path.parts:
            item.add_marker(pytest.mark.unit)
        elif "integration" in rel_path.parts:
            item.add_marker(pytest.mark.integration)
