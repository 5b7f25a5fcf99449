"""Ledger defaults shared by entities, services and the API."""

DEFAULT_APP_NAME = "Lansky"

DEFAULT_PLATFORMS = ["eBay", "Poshmark", "Mercari", "Facebook", "Whatnot", "Other"]

DEFAULT_EXPENSE_CATEGORIES = [
    "Office Supplies",
    "Packaging/Boxes",
    "Gas & Mileage",
    "Inventory Software",
    "Advertising",
    "Thrift/Sourcing Costs",
    "Other",
]

DEFAULT_PRIMARY_COLOR = "#1e3a8a"

ACCENT_COLORS = [
    {"name": "Power Blue", "value": "#1e3a8a"},
    {"name": "Deep Indigo", "value": "#312e81"},
    {"name": "Royal Purple", "value": "#581c87"},
    {"name": "Crimson Rose", "value": "#881337"},
    {"name": "Forest Emerald", "value": "#064e3b"},
    {"name": "Burnt Amber", "value": "#78350f"},
]

# Persisted document keys
SALES_KEY = "sales"
EXPENSES_KEY = "expenses"
INVENTORY_KEY = "inventory"
SETTINGS_KEY = "settings"

LEDGER_KEYS = (SALES_KEY, EXPENSES_KEY, INVENTORY_KEY, SETTINGS_KEY)

LEDGER_EXPORT_FILENAME = "lansky_ledger_export.csv"
SALES_EXPORT_FILENAME_TEMPLATE = "lansky_ledger_full_export_{year}.csv"

DEFAULT_LOGO_SVG = """
<svg width="60" height="60" viewBox="0 0 100 100" fill="none" xmlns="http://www.w3.org/2000/svg">
  <path d="M50 5L85 22.5V50C85 72.5 50 95 50 95C50 95 15 72.5 15 50V22.5L50 5Z" fill="currentColor" fill-opacity="0.05" stroke="currentColor" stroke-width="2"/>
  <rect x="35" y="45" width="8" height="30" rx="4" fill="currentColor" fill-opacity="0.2" />
  <rect x="47" y="35" width="8" height="40" rx="4" fill="currentColor" fill-opacity="0.5" />
  <rect x="59" y="25" width="8" height="50" rx="4" fill="#0066FF" />
  <path d="M35 75H55" stroke="currentColor" stroke-width="8" stroke-linecap="round" />
  <circle cx="50" cy="15" r="2" fill="currentColor" />
</svg>
"""
