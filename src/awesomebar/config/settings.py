import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from awesomebar.errors import ConfigurationError

from .models import DEFAULT_HISTORY_SUGGESTION_LIMIT

# This file: src/awesomebar/config/settings.py
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent
ENV_PATH = PROJECT_ROOT / ".env"

if ENV_PATH.exists():
    load_dotenv(ENV_PATH)
else:
    load_dotenv()


class Settings(BaseModel):
    """Global Application Settings"""

    ENV: str = Field(default="development", description="Environment: development, production, testing")
    LOG_LEVEL: str = Field(default="INFO", description="Log level")

    AWESOMEBAR_MAX_SUGGESTIONS: int = Field(
        default=DEFAULT_HISTORY_SUGGESTION_LIMIT,
        ge=1,
        description="Maximum number of history suggestions per query",
    )

    # Tracing
    OTEL_EXPORTER_OTLP_ENDPOINT: Optional[str] = Field(default=None, description="OTLP endpoint for traces")

    model_config = {
        "frozen": True,
    }


def load_settings() -> Settings:
    """Load settings from environment variables."""
    try:
        return Settings(
            ENV=os.getenv("ENV", "development"),
            LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO"),
            AWESOMEBAR_MAX_SUGGESTIONS=os.getenv(
                "AWESOMEBAR_MAX_SUGGESTIONS", str(DEFAULT_HISTORY_SUGGESTION_LIMIT)
            ),
            OTEL_EXPORTER_OTLP_ENDPOINT=os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT"),
        )
    except ValidationError as e:
        raise ConfigurationError("Invalid environment settings", original_error=e) from e
