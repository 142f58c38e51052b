from loguru import logger

from .fact import Fact
from .processor import FactProcessor


class FactDispatcher:
    """Delivers facts synchronously to the processors registered with it.

    A dispatcher is owned by whoever wires the providers together and is
    passed to them explicitly, so registrations are scoped to that owner.
    """

    def __init__(self, processors: list[FactProcessor] | None = None):
        self.processors: list[FactProcessor] = list(processors or [])

    def register(self, processor: FactProcessor) -> None:
        self.processors.append(processor)

    def unregister(self, processor: FactProcessor) -> None:
        if processor in self.processors:
            self.processors.remove(processor)

    def clear(self) -> None:
        self.processors.clear()

    def emit(self, fact: Fact) -> None:
        """Deliver a fact to every processor registered at call time, in order."""
        for processor in list(self.processors):
            try:
                processor.process(fact)
            except Exception as e:
                logger.error(f"Error in fact processor {processor}: {e}")
