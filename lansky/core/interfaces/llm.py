"""
Abstract interfaces for hosted generative model providers.

Defines the contract the advisor and the image editor depend on.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from lansky.core.entities.image import ImagePayload


class LLMProvider(str, Enum):
    """Supported provider types."""

    GEMINI = "gemini"


@dataclass
class LLMResponse:
    """Response from text generation."""

    text: str
    model: str
    finish_reason: str | None = None
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0
    error: str | None = None


@dataclass
class ImageEditResponse:
    """Response from an image edit request.

    ``image`` is None when the model answered without producing an image.
    """

    image: ImagePayload | None
    model: str
    text: str | None = None


@dataclass
class HealthStatus:
    """Provider health status."""

    available: bool
    provider: str
    model: str | None = None
    error: str | None = None
    response_time_ms: float | None = None


class ILLMProvider(ABC):
    """
    Abstract interface for generative model providers.

    Implementations: GeminiProvider
    """

    @abstractmethod
    async def generate(
        self,
        prompt: str,
        system_prompt: str | None = None,
        temperature: float | None = None,
    ) -> LLMResponse:
        """
        Generate text completion.

        Args:
            prompt: User prompt
            system_prompt: Optional system instruction
            temperature: Sampling temperature

        Returns:
            LLMResponse with generated text (possibly empty)
        """
        pass

    @abstractmethod
    async def edit_image(self, image: ImagePayload, prompt: str) -> ImageEditResponse:
        """
        Edit an image following a free-text instruction.

        Returns:
            ImageEditResponse whose image is None when nothing was produced

        Raises:
            LLMError: on transport or provider failure
        """
        pass

    @abstractmethod
    async def check_health(self) -> HealthStatus:
        """Check if the provider is reachable and configured."""
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """
        Synchronous availability check (cached).

        Returns:
            True if provider is ready
        """
        pass
