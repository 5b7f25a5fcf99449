"""Tests for RecordSaleUseCase."""

from datetime import date

import pytest

from lansky.application.dto.requests import SellItemRequest
from lansky.application.use_cases.record_sale import RecordSaleUseCase
from lansky.core.entities import ItemStatus
from lansky.core.exceptions import InventoryItemNotFoundError, ValidationError


@pytest.fixture
def sell_request():
    return SellItemRequest(date=date(2024, 2, 10), platform="eBay", sale_price=25, fees=2.5, shipping_paid=5)


@pytest.fixture
async def stocked_store(ledger_store, widget_purchase):
    await ledger_store.add_inventory_item(**widget_purchase)
    return ledger_store


class TestRecordSaleUseCase:
    async def test_sale_recorded(self, stocked_store, sell_request):
        use_case = RecordSaleUseCase(store=stocked_store)

        sale = await use_case.execute("id-1", sell_request)

        assert sale.net_profit == 7.5
        assert sale.quarter == "Q1"
        assert stocked_store.state.find_item("id-1").status == ItemStatus.SOLD

    async def test_unknown_item(self, stocked_store, sell_request):
        use_case = RecordSaleUseCase(store=stocked_store)
        with pytest.raises(InventoryItemNotFoundError):
            await use_case.execute("missing", sell_request)

    async def test_already_sold(self, stocked_store, sell_request):
        use_case = RecordSaleUseCase(store=stocked_store)
        await use_case.execute("id-1", sell_request)

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute("id-1", sell_request)
        assert "already sold" in exc_info.value.message
        assert len(stocked_store.state.sales) == 1
