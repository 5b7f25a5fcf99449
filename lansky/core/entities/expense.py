"""Expense domain entity."""

import datetime

from pydantic import Field

from lansky.core.entities.base import LedgerEntity, Quarter


class Expense(LedgerEntity):
    """A deductible business expense."""

    id: str
    date: datetime.date
    category: str
    amount: float = Field(ge=0)
    description: str
    quarter: Quarter
