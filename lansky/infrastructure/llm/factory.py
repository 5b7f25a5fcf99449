"""
Model provider factory.

Creates the provider named by configuration.
"""

from typing import Any

from lansky.config import get_logger, get_settings
from lansky.core.interfaces import ILLMProvider

logger = get_logger(__name__)


def get_llm_provider(provider_type: str | None = None) -> ILLMProvider:
    """
    Get a provider instance.

    Args:
        provider_type: provider name (default from settings)
    """
    provider_type = provider_type or get_settings().ai.provider

    if provider_type == "gemini":
        from lansky.infrastructure.llm.gemini import get_gemini_provider

        return get_gemini_provider()

    raise ValueError(f"Unknown LLM provider: {provider_type}")


async def check_llm_health() -> dict[str, Any]:
    """Health of the configured provider, as a plain dict."""
    settings = get_settings()
    try:
        health = await get_llm_provider().check_health()
    except ValueError as e:
        logger.warning("llm_health_check_failed", error=str(e))
        return {"available": False, "provider": settings.ai.provider, "error": str(e)}
    return health.__dict__
