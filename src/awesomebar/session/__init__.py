from .use_cases import BaseLoadUrlUseCase, LoadUrlFlags

__all__ = ["BaseLoadUrlUseCase", "LoadUrlFlags"]
