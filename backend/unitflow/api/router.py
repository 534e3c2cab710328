from fastapi import APIRouter
from unitflow.api.endpoints import suppliers, purchase_orders, inventory, customers, sales, dashboard, targets

api_router = APIRouter(prefix="/api/v1")

api_router.include_router(suppliers.router)
api_router.include_router(purchase_orders.router)
api_router.include_router(inventory.router)
api_router.include_router(customers.router)
api_router.include_router(sales.router)
api_router.include_router(dashboard.router)
api_router.include_router(targets.router)
