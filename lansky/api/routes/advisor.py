"""AI business advisor endpoint."""

from fastapi import APIRouter, Depends

from lansky.api.dependencies import get_generate_advice_use_case
from lansky.application.dto.responses import AdviceResponse, ErrorResponse
from lansky.application.use_cases import GenerateAdviceUseCase

router = APIRouter(prefix="/api/advisor", tags=["advisor"])


@router.post(
    "/advice",
    response_model=AdviceResponse,
    responses={409: {"model": ErrorResponse}},
)
async def get_advice(
    use_case: GenerateAdviceUseCase = Depends(get_generate_advice_use_case),
) -> AdviceResponse:
    """
    Strategic advice for the current ledger.

    Model failures are reported in the advice text, not as an HTTP error.
    """
    result = await use_case.execute()
    return AdviceResponse(advice=result.advice, summary=result.summary)
