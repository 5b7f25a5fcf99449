"""Generate Advice Use Case: business advice for the current ledger."""

from dataclasses import dataclass

from lansky.application.ledger_store import LedgerStore
from lansky.config import get_logger
from lansky.core.interfaces import ILLMProvider
from lansky.core.services.advisor import BusinessAdvisorService
from lansky.core.services.in_flight import InFlightGuard, get_in_flight_guard
from lansky.core.services.metrics import build_advice_summary

logger = get_logger(__name__)

ADVICE_OPERATION = "advice"


@dataclass
class AdviceResult:
    """Advice text and the summary it was generated from."""

    advice: str
    summary: str


class GenerateAdviceUseCase:
    """
    Ask the advisor model about the current ledger.

    Only one advice request may be pending at a time.
    """

    def __init__(
        self,
        store: LedgerStore | None = None,
        llm: ILLMProvider | None = None,
        guard: InFlightGuard | None = None,
    ):
        self._store = store
        self._llm = llm
        self._guard = guard or get_in_flight_guard()

    async def _get_store(self) -> LedgerStore:
        if self._store is None:
            from lansky.application.ledger_store import get_ledger_store

            self._store = await get_ledger_store()
        return self._store

    def _get_llm(self) -> ILLMProvider:
        if self._llm is None:
            from lansky.infrastructure.llm import get_llm_provider

            self._llm = get_llm_provider()
        return self._llm

    async def execute(self) -> AdviceResult:
        """
        Raises:
            RequestInFlightError: if another advice request is pending
        """
        async with self._guard.hold(ADVICE_OPERATION):
            state = (await self._get_store()).state
            summary = build_advice_summary(state.sales, state.expenses, state.inventory)
            logger.info("advice_requested", sales=len(state.sales))

            advisor = BusinessAdvisorService(self._get_llm())
            advice = await advisor.get_advice_for_summary(summary)

        return AdviceResult(advice=advice, summary=summary)
