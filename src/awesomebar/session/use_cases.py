from abc import ABC, abstractmethod
from enum import IntFlag


class LoadUrlFlags(IntFlag):
    """Flags passed along with a url load request."""
    NONE = 0
    BYPASS_CACHE = 1
    BYPASS_PROXY = 2
    EXTERNAL = 4
    ALLOW_POPUPS = 8


class BaseLoadUrlUseCase(ABC):
    """Loads a url in the current session."""

    @abstractmethod
    def __call__(self, url: str, flags: LoadUrlFlags = LoadUrlFlags.NONE) -> None:
        pass
