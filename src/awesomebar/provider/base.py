"""Base suggestion provider interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING
from uuid import uuid4

if TYPE_CHECKING:
    from ..entities.suggestion import Suggestion


class BaseSuggestionProvider(ABC):
    """Base class for awesomebar suggestion providers.

    A provider is notified when the user starts typing, on every text
    change, and when input is cancelled. Only ``on_input_changed`` has to
    be implemented.
    """

    def __init__(self, provider_id: str | None = None):
        """
        Args:
            provider_id: Stable identifier; a random one is generated if omitted.
        """
        self.id = provider_id or str(uuid4())

    @property
    def should_clear_suggestions(self) -> bool:
        """Whether a new result set replaces this provider's previous suggestions."""
        return True

    def on_input_started(self) -> list[Suggestion]:
        """Suggestions to show before the user has typed anything."""
        return []

    @abstractmethod
    async def on_input_changed(self, text: str) -> list[Suggestion]:
        """
        Produce suggestions for the current input.

        Args:
            text: The full input text.

        Returns:
            Ordered suggestions, best first.
        """
        pass

    def on_input_cancelled(self) -> None:
        """Called when the user leaves the input without committing."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id='{self.id}')"
