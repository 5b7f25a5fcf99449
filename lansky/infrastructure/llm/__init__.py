"""Hosted model providers."""

from lansky.infrastructure.llm.base import BaseLLMProvider, CircuitBreakerState
from lansky.infrastructure.llm.factory import check_llm_health, get_llm_provider
from lansky.infrastructure.llm.gemini import GeminiProvider, get_gemini_provider

__all__ = [
    "BaseLLMProvider",
    "CircuitBreakerState",
    "GeminiProvider",
    "get_gemini_provider",
    "get_llm_provider",
    "check_llm_health",
]
