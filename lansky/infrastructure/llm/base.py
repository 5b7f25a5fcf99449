"""
Base provider with retry and circuit breaker.

Transport failures (timeouts, refused connections) are retried per the
``AI_MAX_RETRIES`` setting and counted by the circuit breaker. Provider
errors such as bad responses pass through untouched.
"""

import time
from abc import ABC
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, TypeVar, cast

from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from lansky.config import get_logger, get_settings
from lansky.core.exceptions import (
    CircuitBreakerOpenError,
    LLMTimeoutError,
    LLMUnavailableError,
)
from lansky.core.interfaces import HealthStatus, ILLMProvider

logger = get_logger(__name__)

T = TypeVar("T")


@dataclass
class CircuitBreakerState:
    """Consecutive-failure counter that blocks calls during a cooldown."""

    provider: str = "llm"
    failures: int = 0
    last_failure_time: float = 0.0
    is_open: bool = False
    cooldown_seconds: int = 60
    failure_threshold: int = 3

    def record_failure(self) -> None:
        self.failures += 1
        self.last_failure_time = time.time()

        if self.failures >= self.failure_threshold and not self.is_open:
            self.is_open = True
            logger.warning(
                "circuit_breaker_opened",
                provider=self.provider,
                failures=self.failures,
                cooldown=self.cooldown_seconds,
            )

    def record_success(self) -> None:
        if self.is_open:
            logger.info("circuit_breaker_closed", provider=self.provider)
        self.failures = 0
        self.is_open = False

    def check(self) -> None:
        """
        Raise CircuitBreakerOpenError while the cooldown is running.

        Once the cooldown has elapsed one trial call is let through.
        """
        if not self.is_open:
            return

        remaining = self.cooldown_remaining
        if remaining > 0:
            raise CircuitBreakerOpenError(self.provider, remaining)

        logger.info("circuit_breaker_half_open", provider=self.provider)

    @property
    def cooldown_remaining(self) -> int:
        if not self.is_open:
            return 0
        elapsed = time.time() - self.last_failure_time
        return max(0, int(self.cooldown_seconds - elapsed))


class BaseLLMProvider(ILLMProvider, ABC):
    """
    Shared resilience for hosted model providers.

    Subclasses wrap each HTTP exchange in ``_with_resilience`` and raise
    the builtin TimeoutError / ConnectionError for transport failures.
    """

    provider_name = "llm"

    def __init__(self) -> None:
        ai = get_settings().ai
        self.circuit_breaker = CircuitBreakerState(
            provider=self.provider_name,
            failure_threshold=ai.failure_threshold,
            cooldown_seconds=ai.cooldown_seconds,
        )
        self._health_cache: HealthStatus | None = None
        self._health_cache_time: float = 0.0
        self._health_cache_ttl: float = 30.0

    def _get_retry_decorator(self) -> Any:
        ai = get_settings().ai
        return retry(
            stop=stop_after_attempt(max(1, ai.max_retries)),
            wait=wait_exponential(
                multiplier=ai.retry_delay,
                min=ai.retry_delay,
                max=ai.retry_delay * (ai.retry_multiplier**3),
            ),
            retry=retry_if_exception_type((TimeoutError, ConnectionError)),
            before_sleep=self._log_retry,
            reraise=True,
        )

    @staticmethod
    def _log_retry(retry_state: RetryCallState) -> None:
        logger.warning(
            "llm_retry",
            attempt=retry_state.attempt_number,
            error=str(retry_state.outcome.exception()) if retry_state.outcome else None,
        )

    async def _with_resilience(
        self,
        operation: Callable[..., Awaitable[T]],
        *args: Any,
        **kwargs: Any,
    ) -> T:
        """
        Run operation behind the circuit breaker, with retries.

        Raises:
            CircuitBreakerOpenError: if the circuit is open
            LLMTimeoutError: if every attempt timed out
            LLMUnavailableError: if the provider could not be reached
        """
        self.circuit_breaker.check()

        try:
            retry_decorator = self._get_retry_decorator()
            result = await retry_decorator(operation)(*args, **kwargs)
        except TimeoutError as e:
            self.circuit_breaker.record_failure()
            raise LLMTimeoutError(get_settings().ai.timeout) from e
        except (ConnectionError, OSError) as e:
            self.circuit_breaker.record_failure()
            raise LLMUnavailableError(self.provider_name, str(e)) from e
        except Exception as e:
            # Provider errors do not trip the circuit
            logger.error("llm_error", error=str(e), error_type=type(e).__name__)
            raise

        self.circuit_breaker.record_success()
        return cast(T, result)

    def is_available(self) -> bool:
        """Cached availability: False while the circuit is open."""
        if self.circuit_breaker.is_open:
            return False

        now = time.time()
        if self._health_cache and (now - self._health_cache_time) < self._health_cache_ttl:
            return self._health_cache.available

        return True

    def _update_health_cache(self, status: HealthStatus) -> None:
        self._health_cache = status
        self._health_cache_time = time.time()
