from unitflow.schemas.supplier import (
    SupplierCreate, SupplierUpdate, SupplierResponse, SupplierWithStats
)
from unitflow.schemas.purchase_order import (
    PurchaseOrderCreate, PurchaseOrderUpdate, PurchaseOrderResponse, PurchaseOrderWithDetails
)
from unitflow.schemas.inventory import (
    InventoryItemCreate, InventoryItemUpdate, InventoryItemResponse, InventoryItemWithDetails
)
from unitflow.schemas.sale import SaleCreate, SaleResponse, SaleWithDetails
from unitflow.schemas.customer import (
    CustomerCreate, CustomerUpdate, CustomerResponse, CustomerProfile
)
from unitflow.schemas.target import (
    TargetType, VisualType, TargetCreate, TargetUpdate, Target, TargetProgress
)
from unitflow.schemas.dashboard import (
    DateRange, SummaryStats, ModelPerformance, SupplierPerformance, CustomerPerformance,
    ModelStock, InventorySnapshot, Dashboard
)

__all__ = [
    # Supplier
    "SupplierCreate", "SupplierUpdate", "SupplierResponse", "SupplierWithStats",
    # Purchase order
    "PurchaseOrderCreate", "PurchaseOrderUpdate", "PurchaseOrderResponse", "PurchaseOrderWithDetails",
    # Inventory
    "InventoryItemCreate", "InventoryItemUpdate", "InventoryItemResponse", "InventoryItemWithDetails",
    # Sale
    "SaleCreate", "SaleResponse", "SaleWithDetails",
    # Customer
    "CustomerCreate", "CustomerUpdate", "CustomerResponse", "CustomerProfile",
    # Target
    "TargetType", "VisualType", "TargetCreate", "TargetUpdate", "Target", "TargetProgress",
    # Dashboard
    "DateRange", "SummaryStats", "ModelPerformance", "SupplierPerformance", "CustomerPerformance",
    "ModelStock", "InventorySnapshot", "Dashboard",
]
