"""
Business advisor service.

Turns an aggregate ledger summary into strategic advice from the hosted
text model. Failures never propagate: the caller always gets a string.
"""

from lansky.config import get_logger
from lansky.core.entities.ledger import LedgerState
from lansky.core.interfaces.llm import ILLMProvider
from lansky.core.services.metrics import build_advice_summary

logger = get_logger(__name__)

EMPTY_ADVICE_MESSAGE = "I couldn't generate advice at this moment. Please try again with more data."

ADVISOR_ERROR_MESSAGE = (
    "An error occurred while contacting the AI Advisor. "
    "Ensure your data is populated and try again."
)

ADVISOR_PROMPT = """You are a world-class e-commerce and reselling business advisor.
Analyze the following business financial summary and provide 3-5 high-impact, actionable insights
to increase profit margins and efficiency. Use a professional yet encouraging tone.

Business Data Summary:
{summary}

Format the response in clear Markdown with bold headers."""


def build_advisor_prompt(summary: str) -> str:
    return ADVISOR_PROMPT.format(summary=summary)


class BusinessAdvisorService:
    """Requests advice from the text model for a ledger snapshot."""

    def __init__(self, llm: ILLMProvider):
        self._llm = llm

    async def get_advice_for_summary(self, summary: str) -> str:
        """
        Ask the model for advice on a plain-text summary.

        Returns the model's markdown, or a fixed fallback message when the
        reply is empty or the request fails.
        """
        try:
            response = await self._llm.generate(build_advisor_prompt(summary))
        except Exception as e:
            logger.error(
                "advisor_request_failed",
                error=str(e),
                error_type=type(e).__name__,
            )
            return ADVISOR_ERROR_MESSAGE

        text = (response.text or "").strip()
        if not text:
            logger.warning("advisor_empty_response", model=response.model)
            return EMPTY_ADVICE_MESSAGE

        logger.info("advisor_advice_generated", model=response.model, length=len(text))
        return text

    async def get_advice(self, state: LedgerState) -> str:
        summary = build_advice_summary(state.sales, state.expenses, state.inventory)
        return await self.get_advice_for_summary(summary)
