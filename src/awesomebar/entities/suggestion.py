"""Suggestion entity presented to the caller."""

from collections.abc import Callable

from pydantic import BaseModel


class Suggestion(BaseModel):
    """A ranked, presentable suggestion derived from a search result.

    Attributes:
        id: Identity of the source search result
        url: The suggested url
        description: Secondary text, the url for history suggestions
        title: Primary text, if known
        edit_suggestion: Text to place into the input field when the user
            wants to edit the suggestion
        score: Ranking score copied from the search result
        provider_id: Id of the provider that produced this suggestion
        on_suggestion_clicked: Emits the interaction fact for this suggestion
        on_suggestion_selected: Performs the primary action (loads the url)
    """

    id: str
    url: str
    description: str | None = None
    title: str | None = None
    edit_suggestion: str | None = None
    score: float = 0.0
    provider_id: str | None = None
    on_suggestion_clicked: Callable[[], None] | None = None
    on_suggestion_selected: Callable[[], None] | None = None

    model_config = {
        "frozen": True,
    }
