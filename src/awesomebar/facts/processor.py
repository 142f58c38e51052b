from abc import ABC, abstractmethod

from loguru import logger

from .fact import Fact


class FactProcessor(ABC):
    """Receives facts delivered by a FactDispatcher."""

    @abstractmethod
    def process(self, fact: Fact) -> None:
        """Handle a single fact."""
        pass


class LoggingFactProcessor(FactProcessor):
    """Fact processor that logs every fact using loguru."""

    def process(self, fact: Fact) -> None:
        logger.info(
            f"[Fact] {fact.component.value}/{fact.action.value}: item='{fact.item}' value={fact.value}"
        )


class CollectingFactProcessor(FactProcessor):
    """Fact processor that keeps every fact it receives, in order."""

    def __init__(self):
        self.facts: list[Fact] = []

    def process(self, fact: Fact) -> None:
        self.facts.append(fact)
