"""
Gemini provider over the public ``generateContent`` REST endpoint.

Used for the business advisor (text model) and the product photo editor
(image model).
"""

import time
from typing import Any

import httpx

from lansky.config import get_logger, get_settings
from lansky.core.entities.image import DEFAULT_IMAGE_MIME, ImagePayload
from lansky.core.exceptions import (
    LLMResponseError,
    LLMUnavailableError,
    ModelNotFoundError,
)
from lansky.core.interfaces import HealthStatus, ImageEditResponse, LLMResponse
from lansky.infrastructure.llm.base import BaseLLMProvider

logger = get_logger(__name__)


def _first_candidate_parts(result: dict) -> tuple[list[dict], str | None]:
    """
    Extract the first candidate's parts and finish reason.

    Raises:
        LLMResponseError: if the candidate, its content or a part is not an object
    """
    candidates = result.get("candidates") or []
    if not isinstance(candidates, list):
        raise LLMResponseError("candidates is not a list", repr(candidates))
    if not candidates:
        return [], None

    candidate = candidates[0]
    if not isinstance(candidate, dict):
        raise LLMResponseError("candidate is not an object", repr(candidate))
    content = candidate.get("content") or {}
    parts = (content.get("parts") or []) if isinstance(content, dict) else None
    if not isinstance(parts, list) or not all(isinstance(p, dict) for p in parts):
        raise LLMResponseError("content parts are malformed", repr(content))
    return parts, candidate.get("finishReason")


def _part_text(part: dict) -> str:
    text = part.get("text")
    if text is None:
        return ""
    if not isinstance(text, str):
        raise LLMResponseError("part text is not a string", repr(part))
    return text


def _inline_data(part: dict) -> dict | None:
    # REST responses use camelCase, some proxies return snake_case
    return part.get("inlineData") or part.get("inline_data")


class GeminiProvider(BaseLLMProvider):
    """HTTP client for the hosted Gemini models."""

    provider_name = "gemini"

    def __init__(self) -> None:
        super().__init__()
        ai = get_settings().ai
        self.api_key = ai.api_key
        self.base_url = f"{ai.host.rstrip('/')}/{ai.api_version}"
        self.model = ai.model_name
        self.image_model = ai.image_model
        self.timeout = ai.timeout
        self.temperature = ai.temperature

    def _headers(self) -> dict[str, str]:
        if not self.api_key:
            raise LLMUnavailableError(self.provider_name, "AI_API_KEY is not configured")
        return {"x-goog-api-key": self.api_key, "Content-Type": "application/json"}

    async def _generate_content(self, model: str, payload: dict) -> dict:
        """POST to ``models/{model}:generateContent`` and return the JSON body."""
        url = f"{self.base_url}/models/{model}:generateContent"
        headers = self._headers()

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(url, json=payload, headers=headers)
        except httpx.TimeoutException as e:
            raise TimeoutError(str(e)) from e
        except httpx.TransportError as e:
            raise ConnectionError(str(e)) from e

        if response.status_code == 404:
            raise ModelNotFoundError(model, self.provider_name)

        if response.status_code != 200:
            raise LLMUnavailableError(
                self.provider_name,
                f"HTTP {response.status_code}: {response.text[:200]}",
            )

        try:
            body = response.json()
        except ValueError as e:
            raise LLMResponseError("Response is not JSON", response.text) from e

        if not isinstance(body, dict):
            raise LLMResponseError("Response is not a JSON object", response.text)
        return body

    async def generate(
        self,
        prompt: str,
        system_prompt: str | None = None,
        temperature: float | None = None,
    ) -> LLMResponse:
        """Generate text. An empty reply is returned as empty text."""
        payload: dict[str, Any] = {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}

        if system_prompt:
            payload["systemInstruction"] = {"parts": [{"text": system_prompt}]}

        temperature = temperature if temperature is not None else self.temperature
        if temperature is not None:
            payload["generationConfig"] = {"temperature": temperature}

        async def _do_generate() -> LLMResponse:
            start_time = time.time()
            result = await self._generate_content(self.model, payload)
            elapsed = time.time() - start_time

            parts, finish_reason = _first_candidate_parts(result)
            text = "".join(_part_text(p) for p in parts if not p.get("thought"))
            usage = result.get("usageMetadata")
            if not isinstance(usage, dict):
                usage = {}

            logger.info(
                "gemini_generate",
                model=self.model,
                prompt_len=len(prompt),
                response_len=len(text),
                finish_reason=finish_reason,
                elapsed_ms=int(elapsed * 1000),
            )

            return LLMResponse(
                text=text,
                model=self.model,
                finish_reason=finish_reason,
                prompt_tokens=usage.get("promptTokenCount", 0),
                completion_tokens=usage.get("candidatesTokenCount", 0),
                total_tokens=usage.get("totalTokenCount", 0),
            )

        return await self._with_resilience(_do_generate)

    async def edit_image(self, image: ImagePayload, prompt: str) -> ImageEditResponse:
        """Send the image and instruction; return the first image part, if any."""
        payload = {
            "contents": [
                {
                    "role": "user",
                    "parts": [
                        {"inlineData": {"mimeType": image.mime_type, "data": image.to_base64()}},
                        {"text": prompt},
                    ],
                }
            ]
        }

        async def _do_edit() -> ImageEditResponse:
            start_time = time.time()
            result = await self._generate_content(self.image_model, payload)
            elapsed = time.time() - start_time

            parts, finish_reason = _first_candidate_parts(result)
            edited: ImagePayload | None = None
            for part in parts:
                inline = _inline_data(part)
                if isinstance(inline, dict) and inline.get("data"):
                    mime_type = inline.get("mimeType") or inline.get("mime_type") or DEFAULT_IMAGE_MIME
                    try:
                        edited = ImagePayload.from_base64(inline["data"], mime_type)
                    except ValueError as e:
                        raise LLMResponseError(str(e)) from e
                    break

            text = "".join(_part_text(p) for p in parts) or None

            logger.info(
                "gemini_edit_image",
                model=self.image_model,
                produced_image=edited is not None,
                finish_reason=finish_reason,
                elapsed_ms=int(elapsed * 1000),
            )

            return ImageEditResponse(image=edited, model=self.image_model, text=text)

        return await self._with_resilience(_do_edit)

    async def check_health(self) -> HealthStatus:
        """Check that the key is configured and the text model is reachable."""
        if not self.api_key:
            status = HealthStatus(
                available=False,
                provider=self.provider_name,
                model=self.model,
                error="AI_API_KEY is not configured",
            )
            self._update_health_cache(status)
            return status

        start_time = time.time()
        try:
            async with httpx.AsyncClient(timeout=10) as client:
                response = await client.get(
                    f"{self.base_url}/models/{self.model}",
                    headers={"x-goog-api-key": self.api_key},
                )
        except httpx.HTTPError as e:
            status = HealthStatus(
                available=False,
                provider=self.provider_name,
                model=self.model,
                error=f"Cannot reach {self.base_url}: {e}",
            )
            self._update_health_cache(status)
            return status

        if response.status_code != 200:
            status = HealthStatus(
                available=False,
                provider=self.provider_name,
                model=self.model,
                error=f"HTTP {response.status_code}",
            )
        else:
            status = HealthStatus(
                available=True,
                provider=self.provider_name,
                model=self.model,
                response_time_ms=(time.time() - start_time) * 1000,
            )
        self._update_health_cache(status)
        return status


# Singleton
_gemini_provider: GeminiProvider | None = None


def get_gemini_provider() -> GeminiProvider:
    """Get or create the Gemini provider singleton."""
    global _gemini_provider
    if _gemini_provider is None:
        _gemini_provider = GeminiProvider()
    return _gemini_provider


def reset_gemini_provider() -> None:
    global _gemini_provider
    _gemini_provider = None
