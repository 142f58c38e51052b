from .base import BaseEngine
from .httpx_engine import HttpxEngine

__all__ = ["BaseEngine", "HttpxEngine"]
