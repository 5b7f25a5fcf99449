"""
Dependency injection for FastAPI.

Route handlers receive the store, use cases and providers through these
getters so tests can swap them with ``app.dependency_overrides``.
"""

import secrets
from functools import lru_cache

from fastapi import Depends, Header

from lansky.application.ledger_store import LedgerStore, get_ledger_store
from lansky.application.use_cases import (
    EditProductImageUseCase,
    ExportLedgerUseCase,
    GenerateAdviceUseCase,
    RecordSaleUseCase,
)
from lansky.config import Settings, get_logger, get_settings
from lansky.core.exceptions import AdminAccessDeniedError
from lansky.core.interfaces import ILLMProvider
from lansky.infrastructure.llm import get_llm_provider

logger = get_logger(__name__)


@lru_cache
def get_app_settings() -> Settings:
    """Get cached application settings."""
    return get_settings()


# Store dependency
async def get_store() -> LedgerStore:
    """Get the loaded ledger store."""
    return await get_ledger_store()


# LLM dependency
def get_llm() -> ILLMProvider:
    """Get the configured model provider."""
    return get_llm_provider()


# Use case dependencies
def get_record_sale_use_case(store: LedgerStore = Depends(get_store)) -> RecordSaleUseCase:
    return RecordSaleUseCase(store=store)


def get_generate_advice_use_case(
    store: LedgerStore = Depends(get_store),
    llm: ILLMProvider = Depends(get_llm),
) -> GenerateAdviceUseCase:
    return GenerateAdviceUseCase(store=store, llm=llm)


def get_edit_product_image_use_case(
    llm: ILLMProvider = Depends(get_llm),
) -> EditProductImageUseCase:
    return EditProductImageUseCase(llm=llm)


def get_export_ledger_use_case(store: LedgerStore = Depends(get_store)) -> ExportLedgerUseCase:
    return ExportLedgerUseCase(store=store)


# Admin gate
def require_admin(
    x_admin_token: str | None = Header(default=None),
    settings: Settings = Depends(get_app_settings),
) -> None:
    """
    Allow the request only with the configured admin token.

    Raises:
        AdminAccessDeniedError: when no token is configured, or the header
            is missing or wrong
    """
    expected = settings.admin.token
    if not expected:
        raise AdminAccessDeniedError("admin console is disabled (ADMIN_TOKEN not set)")
    if not x_admin_token or not secrets.compare_digest(
        x_admin_token.encode(), expected.encode()
    ):
        logger.warning("admin_access_denied")
        raise AdminAccessDeniedError("invalid or missing X-Admin-Token")
