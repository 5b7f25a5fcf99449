"""Core interfaces."""

from lansky.core.interfaces.llm import (
    HealthStatus,
    ILLMProvider,
    ImageEditResponse,
    LLMProvider,
    LLMResponse,
)
from lansky.core.interfaces.storage import IKeyValueStore

__all__ = [
    "IKeyValueStore",
    "ILLMProvider",
    "LLMProvider",
    "LLMResponse",
    "ImageEditResponse",
    "HealthStatus",
]
