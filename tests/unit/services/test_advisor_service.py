"""Tests for BusinessAdvisorService."""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from lansky.core.entities import LedgerState
from lansky.core.exceptions import CircuitBreakerOpenError, LLMTimeoutError, LLMUnavailableError
from lansky.core.interfaces import LLMResponse
from lansky.core.services import ledger_commands as commands
from lansky.core.services.advisor import (
    ADVISOR_ERROR_MESSAGE,
    EMPTY_ADVICE_MESSAGE,
    BusinessAdvisorService,
    build_advisor_prompt,
)
from lansky.infrastructure.llm.gemini import GeminiProvider


@pytest.fixture
def advisor(mock_llm):
    return BusinessAdvisorService(mock_llm)


class TestBusinessAdvisorService:
    async def test_returns_model_text(self, advisor, mock_llm):
        advice = await advisor.get_advice_for_summary("Total Sales: 2")
        assert advice == "**Raise prices**"

        prompt = mock_llm.generate.call_args.args[0]
        assert "Total Sales: 2" in prompt
        assert "reselling business advisor" in prompt

    async def test_empty_reply_gives_fallback(self, advisor, mock_llm):
        mock_llm.generate.return_value = LLMResponse(text="   ", model="test-model")
        assert await advisor.get_advice_for_summary("x") == EMPTY_ADVICE_MESSAGE

    @pytest.mark.parametrize(
        "error",
        [
            LLMUnavailableError("gemini", "AI_API_KEY is not configured"),
            LLMTimeoutError(120),
            CircuitBreakerOpenError("gemini", 30),
            ConnectionError("refused"),
        ],
    )
    async def test_failures_give_error_message(self, advisor, mock_llm, error):
        mock_llm.generate.side_effect = error
        assert await advisor.get_advice_for_summary("x") == ADVISOR_ERROR_MESSAGE

    async def test_get_advice_summarizes_state(self, advisor, mock_llm):
        state = commands.seed_demo_data(LedgerState())
        await advisor.get_advice(state)

        prompt = mock_llm.generate.call_args.args[0]
        assert "Total Revenue: $140.00" in prompt
        assert "Active Inventory: 3 items" in prompt


def test_prompt_embeds_summary():
    assert "Business Data Summary:\nhello" in build_advisor_prompt("hello")


class TestAdvisorOverGemini:
    """Malformed model replies end in a fallback message, never an exception."""

    @pytest.fixture
    def gemini_advisor(self, monkeypatch):
        monkeypatch.setenv("AI_API_KEY", "test-key")
        return BusinessAdvisorService(GeminiProvider())

    @staticmethod
    def _patched_reply(body):
        client = AsyncMock()
        client.post.return_value = httpx.Response(200, json=body)
        client_cls = MagicMock()
        client_cls.return_value.__aenter__.return_value = client
        client_cls.return_value.__aexit__.return_value = None
        return patch("lansky.infrastructure.llm.gemini.httpx.AsyncClient", client_cls)

    async def test_list_body(self, gemini_advisor):
        with self._patched_reply([{"error": "x"}]):
            assert await gemini_advisor.get_advice_for_summary("x") == ADVISOR_ERROR_MESSAGE

    async def test_null_text_part(self, gemini_advisor):
        with self._patched_reply({"candidates": [{"content": {"parts": [{"text": None}]}}]}):
            assert await gemini_advisor.get_advice_for_summary("x") == EMPTY_ADVICE_MESSAGE

    async def test_unexpected_provider_exception(self, advisor, mock_llm):
        mock_llm.generate.side_effect = AttributeError("'list' object has no attribute 'get'")
        assert await advisor.get_advice_for_summary("x") == ADVISOR_ERROR_MESSAGE
