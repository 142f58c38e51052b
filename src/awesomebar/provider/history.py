"""Suggestion provider backed by browsing history."""

from collections.abc import Callable
from functools import partial

from loguru import logger

from awesomebar.config.models import DEFAULT_HISTORY_SUGGESTION_LIMIT, ProviderConfig
from awesomebar.engine.base import BaseEngine
from awesomebar.entities.search_result import SearchResult
from awesomebar.entities.suggestion import Suggestion
from awesomebar.facts.awesomebar_facts import emit_history_suggestion_clicked_fact
from awesomebar.facts.dispatcher import FactDispatcher
from awesomebar.observability import trace_span
from awesomebar.session.use_cases import BaseLoadUrlUseCase
from awesomebar.storage.base import BaseHistoryStorage

from .base import BaseSuggestionProvider
from .post_processor import SuggestionPostProcessor


class HistoryStorageSuggestionProvider(BaseSuggestionProvider):
    """Suggests previously visited urls matching the user's input.

    Each call to ``on_input_changed`` queries the history store once,
    dedupes the matches by id, sorts them by score and keeps at most
    ``max_number_of_suggestions``. The best match is handed to the engine
    for a speculative connect.

    Input handling: only the empty string counts as empty. Whitespace-only
    text is sent to the history store as a literal query.

    Concurrent calls are independent and in-flight queries are never
    cancelled. Callers that issue a query per keystroke must discard
    responses for text that is no longer current.

    Args:
        history_storage: Store queried for matches.
        load_url_use_case: Invoked when a suggestion is selected.
        engine: Optional engine used to warm up the top suggestion.
        fact_dispatcher: Receives interaction facts on click.
        max_number_of_suggestions: Upper bound on returned suggestions.
        provider_id: Stable provider identifier.
    """

    def __init__(
        self,
        history_storage: BaseHistoryStorage,
        load_url_use_case: BaseLoadUrlUseCase,
        engine: BaseEngine | None = None,
        fact_dispatcher: FactDispatcher | None = None,
        max_number_of_suggestions: int = DEFAULT_HISTORY_SUGGESTION_LIMIT,
        provider_id: str | None = None,
    ):
        super().__init__(provider_id)
        self.history_storage = history_storage
        self.load_url_use_case = load_url_use_case
        self._engine = engine
        self.fact_dispatcher = fact_dispatcher or FactDispatcher()
        self.config = ProviderConfig.create(max_number_of_suggestions=max_number_of_suggestions)
        self.post_processor = SuggestionPostProcessor()
        self._warm_up = self._resolve_warm_up(engine)

    @classmethod
    def from_config(
        cls,
        config: ProviderConfig,
        history_storage: BaseHistoryStorage,
        load_url_use_case: BaseLoadUrlUseCase,
        **kwargs,
    ) -> "HistoryStorageSuggestionProvider":
        return cls(
            history_storage,
            load_url_use_case,
            max_number_of_suggestions=config.max_number_of_suggestions,
            **kwargs,
        )

    @property
    def engine(self) -> BaseEngine | None:
        return self._engine

    @property
    def max_number_of_suggestions(self) -> int:
        return self.config.max_number_of_suggestions

    @trace_span("awesomebar.history.on_input_changed", attributes={"component": "feature_awesomebar"})
    async def on_input_changed(self, text: str) -> list[Suggestion]:
        if not text:
            return []

        limit = self.max_number_of_suggestions
        results = await self.history_storage.get_suggestions(text, limit)
        ranked = self.post_processor.run(results, limit)
        logger.debug(f"History suggestions for {len(text)}-char input: {len(ranked)} kept")

        if ranked:
            self._warm_up(ranked[0].url)

        return [self._to_suggestion(result) for result in ranked]

    def _to_suggestion(self, result: SearchResult) -> Suggestion:
        return Suggestion(
            id=result.id,
            url=result.url,
            description=result.url,
            title=result.title,
            edit_suggestion=result.url,
            score=result.score,
            provider_id=self.id,
            on_suggestion_clicked=self._emit_clicked_fact,
            on_suggestion_selected=partial(self.load_url_use_case, result.url),
        )

    def _emit_clicked_fact(self) -> None:
        emit_history_suggestion_clicked_fact(self.fact_dispatcher)

    @staticmethod
    def _resolve_warm_up(engine: BaseEngine | None) -> Callable[[str], None]:
        if engine is None:
            return _skip_warm_up

        def warm_up(url: str) -> None:
            try:
                engine.speculative_connect(url)
            except Exception as e:
                logger.debug(f"Speculative connect to {url} failed: {e}")

        return warm_up


def _skip_warm_up(url: str) -> None:
    pass
