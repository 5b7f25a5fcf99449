"""Tests for the circuit breaker and the provider factory."""

import time

import pytest

from lansky.core.exceptions import CircuitBreakerOpenError
from lansky.infrastructure.llm.base import CircuitBreakerState
from lansky.infrastructure.llm.factory import get_llm_provider
from lansky.infrastructure.llm.gemini import GeminiProvider, reset_gemini_provider


class TestCircuitBreakerState:
    def test_opens_at_threshold(self):
        breaker = CircuitBreakerState(provider="gemini", failure_threshold=2)
        breaker.record_failure()
        assert not breaker.is_open
        breaker.record_failure()
        assert breaker.is_open

        with pytest.raises(CircuitBreakerOpenError):
            breaker.check()

    def test_half_open_after_cooldown(self):
        breaker = CircuitBreakerState(failure_threshold=1, cooldown_seconds=10)
        breaker.record_failure()
        breaker.last_failure_time = time.time() - 11

        breaker.check()  # trial call allowed
        assert breaker.cooldown_remaining == 0

    def test_success_closes(self):
        breaker = CircuitBreakerState(failure_threshold=1)
        breaker.record_failure()
        breaker.record_success()
        assert not breaker.is_open
        assert breaker.failures == 0


class TestFactory:
    def test_gemini_by_default(self):
        reset_gemini_provider()
        try:
            provider = get_llm_provider()
            assert isinstance(provider, GeminiProvider)
            assert get_llm_provider("gemini") is provider
        finally:
            reset_gemini_provider()

    def test_unknown_provider(self):
        with pytest.raises(ValueError):
            get_llm_provider("openai")
