"""Fixed demo dataset used for onboarding walkthroughs."""

from datetime import date

from lansky.core.entities.expense import Expense
from lansky.core.entities.inventory import InventoryItem, ItemStatus
from lansky.core.entities.sale import Sale


def generate_seed_data() -> tuple[list[InventoryItem], list[Sale], list[Expense]]:
    """Return (inventory, sales, expenses) for the demo workspace."""
    inventory = [
        InventoryItem(id="1", item_name="Vintage Denim Jacket", purchase_price=15, purchase_date=date(2023, 11, 15), status=ItemStatus.SOLD),
        InventoryItem(id="2", item_name="Limited Edition Sneakers", purchase_price=85, purchase_date=date(2023, 12, 5), status=ItemStatus.AVAILABLE),
        InventoryItem(id="3", item_name="Retro Gaming Console", purchase_price=40, purchase_date=date(2024, 1, 10), status=ItemStatus.SOLD),
        InventoryItem(id="4", item_name="Classic Camera", purchase_price=55, purchase_date=date(2024, 1, 20), status=ItemStatus.AVAILABLE),
        InventoryItem(id="5", item_name="Designer Handbag", purchase_price=120, purchase_date=date(2024, 2, 1), status=ItemStatus.AVAILABLE),
    ]

    sales = [
        Sale(
            id="s1",
            inventory_item_id="1",
            date=date(2024, 1, 5),
            item_name="Vintage Denim Jacket",
            platform="eBay",
            purchase_price=15,
            sale_price=45,
            fees=5.85,
            shipping_paid=10,
            net_profit=14.15,
            quarter="Q1",
        ),
        Sale(
            id="s2",
            inventory_item_id="3",
            date=date(2024, 2, 12),
            item_name="Retro Gaming Console",
            platform="Poshmark",
            purchase_price=40,
            sale_price=95,
            fees=19,
            shipping_paid=0,
            net_profit=36,
            quarter="Q1",
        ),
    ]

    expenses = [
        Expense(id="e1", date=date(2024, 1, 2), category="Packaging/Boxes", amount=25.50, description="Bulk bubble mailers", quarter="Q1"),
        Expense(id="e2", date=date(2024, 2, 15), category="Inventory Software", amount=15.00, description="Monthly subscription", quarter="Q1"),
    ]

    return inventory, sales, expenses
