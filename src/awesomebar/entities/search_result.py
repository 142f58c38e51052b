"""SearchResult entity representing a history store match."""

from pydantic import BaseModel, Field


class SearchResult(BaseModel):
    """Represents a history match with a ranking score.

    Attributes:
        id: Stable identity used for deduplication
        url: The visited url
        score: Ranking score, higher is better
        title: Page title, if the store knows it
    """

    id: str
    url: str
    score: float = Field(allow_inf_nan=False)
    title: str | None = None

    model_config = {
        "frozen": True,  # Results are immutable
    }
