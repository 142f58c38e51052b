from abc import ABC, abstractmethod


class BaseEngine(ABC):
    """Network engine capabilities used by suggestion providers."""

    @abstractmethod
    def speculative_connect(self, url: str) -> None:
        """
        Warm up a connection to a url the user is likely to visit.

        Fire-and-forget: returns immediately and never reports the outcome.
        """
        pass
