"""Configuration models for suggestion providers.

Provider configuration is immutable: it is fixed when the provider is
constructed and never changes per query.
"""

from pydantic import BaseModel, Field, ValidationError

from awesomebar.errors import ConfigurationError

DEFAULT_HISTORY_SUGGESTION_LIMIT = 20


class ProviderConfig(BaseModel):
    """Configuration for a history suggestion provider.

    Attributes:
        max_number_of_suggestions: Upper bound on returned suggestions, also
            passed to the history store as the query size hint.
    """

    max_number_of_suggestions: int = Field(default=DEFAULT_HISTORY_SUGGESTION_LIMIT, ge=1)

    model_config = {
        "frozen": True,
    }

    @classmethod
    def create(cls, **values) -> "ProviderConfig":
        """Build a config, reporting invalid values as ConfigurationError."""
        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigurationError(
                "Invalid suggestion provider configuration",
                details={"values": values},
                original_error=e,
            ) from e

    @classmethod
    def from_settings(cls, settings) -> "ProviderConfig":
        return cls.create(max_number_of_suggestions=settings.AWESOMEBAR_MAX_SUGGESTIONS)
