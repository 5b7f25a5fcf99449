"""API route modules."""

from lansky.api.routes.admin import router as admin_router
from lansky.api.routes.advisor import router as advisor_router
from lansky.api.routes.dashboard import router as dashboard_router
from lansky.api.routes.expenses import router as expenses_router
from lansky.api.routes.health import router as health_router
from lansky.api.routes.image_editor import router as image_editor_router
from lansky.api.routes.inventory import router as inventory_router
from lansky.api.routes.sales import router as sales_router
from lansky.api.routes.settings import router as settings_router
from lansky.api.routes.taxes import router as taxes_router

__all__ = [
    "health_router",
    "dashboard_router",
    "inventory_router",
    "sales_router",
    "expenses_router",
    "taxes_router",
    "advisor_router",
    "image_editor_router",
    "settings_router",
    "admin_router",
]
