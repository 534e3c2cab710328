from unitflow.models.supplier import Supplier, SupplierType
from unitflow.models.purchase_order import PurchaseOrder, PurchaseOrderStatus
from unitflow.models.inventory import InventoryItem, ItemStatus, ModelFamily, ConditionGrade
from unitflow.models.customer import Customer, CustomerType, CustomerSource
from unitflow.models.sale import Sale, PaymentMethod, SaleChannel

__all__ = [
    "Supplier",
    "SupplierType",
    "PurchaseOrder",
    "PurchaseOrderStatus",
    "InventoryItem",
    "ItemStatus",
    "ModelFamily",
    "ConditionGrade",
    "Customer",
    "CustomerType",
    "CustomerSource",
    "Sale",
    "PaymentMethod",
    "SaleChannel",
]
