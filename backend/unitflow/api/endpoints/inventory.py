from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session, joinedload
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from typing import List, Optional
from datetime import date
import enum
import logging

from unitflow.core.database import get_db
from unitflow.models.supplier import Supplier
from unitflow.models.purchase_order import PurchaseOrder
from unitflow.models.inventory import InventoryItem, ItemStatus, compose_item_id
from unitflow.schemas.inventory import (
    InventoryItemCreate, InventoryItemUpdate, InventoryItemResponse, InventoryItemWithDetails
)

router = APIRouter(prefix="/inventory", tags=["Inventory"])

logger = logging.getLogger(__name__)


class InventoryTab(str, enum.Enum):
    IN_STOCK = "in_stock"  # Everything that has not been sold
    SOLD = "sold"
    ALL = "all"


def _with_details(item: InventoryItem, today: Optional[date] = None) -> InventoryItemWithDetails:
    response = InventoryItemWithDetails.model_validate(item)
    response.supplier_name = item.supplier.supplier_name if item.supplier else None
    response.supplier_code = item.supplier.supplier_code if item.supplier else None
    response.po_number = item.purchase_order.po_number if item.purchase_order else None
    response.model_label = item.model_label
    response.days_in_stock = item.age_in_days(today)
    return response


def _require_purchase_order(po_id: int, db: Session) -> PurchaseOrder:
    po = db.query(PurchaseOrder).filter(PurchaseOrder.id == po_id).first()
    if not po:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Purchase order does not exist"
        )
    return po


# ============== INVENTORY ITEMS ==============

@router.get("/items", response_model=List[InventoryItemWithDetails])
def list_inventory_items(
    tab: InventoryTab = InventoryTab.IN_STOCK,
    status_filter: Optional[ItemStatus] = Query(None, alias="status"),
    search: Optional[str] = None,
    supplier_id: Optional[int] = None,
    po_id: Optional[int] = None,
    skip: int = Query(0, ge=0),
    limit: int = Query(1000, ge=1, le=5000),
    db: Session = Depends(get_db)
):
    """
    List inventory items, newest first.

    The in_stock tab shows every unit that is not sold (reserved, returned, DOA...)
    and can be narrowed with a status filter. The sold tab shows sold units only.
    """
    query = db.query(InventoryItem).options(
        joinedload(InventoryItem.supplier),
        joinedload(InventoryItem.purchase_order),
    )

    if tab == InventoryTab.IN_STOCK:
        query = query.filter(InventoryItem.status != ItemStatus.SOLD.value)
        if status_filter:
            query = query.filter(InventoryItem.status == status_filter.value)
    elif tab == InventoryTab.SOLD:
        query = query.filter(InventoryItem.status == ItemStatus.SOLD.value)
    elif status_filter:
        query = query.filter(InventoryItem.status == status_filter.value)

    if search:
        query = query.filter(or_(
            InventoryItem.item_id.ilike(f"%{search}%"),
            InventoryItem.serial_number.ilike(f"%{search}%"),
            InventoryItem.model_family.ilike(f"%{search}%"),
        ))
    if supplier_id:
        query = query.filter(InventoryItem.supplier_id == supplier_id)
    if po_id:
        query = query.filter(InventoryItem.po_id == po_id)

    items = query.order_by(InventoryItem.created_at.desc(), InventoryItem.id.desc()).offset(skip).limit(limit).all()

    today = date.today()
    return [_with_details(item, today) for item in items]


@router.get("/items/{item_id}", response_model=InventoryItemWithDetails)
def get_inventory_item(
    item_id: int,
    db: Session = Depends(get_db)
):
    item = db.query(InventoryItem).filter(InventoryItem.id == item_id).first()
    if not item:
        raise HTTPException(status_code=404, detail="Inventory item not found")
    return _with_details(item)


@router.post("/items", response_model=InventoryItemResponse, status_code=status.HTTP_201_CREATED)
def create_inventory_item(
    item_data: InventoryItemCreate,
    db: Session = Depends(get_db)
):
    """Add a unit; its item id is the supplier code followed by the supplier's item number"""
    supplier = db.query(Supplier).filter(Supplier.id == item_data.supplier_id).first()
    if not supplier:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Please select a valid supplier"
        )

    if not item_data.supplier_item_number.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Supplier item number is required"
        )

    if item_data.po_id:
        _require_purchase_order(item_data.po_id, db)

    new_item_id = compose_item_id(supplier.supplier_code, item_data.supplier_item_number)
    existing = db.query(InventoryItem).filter(InventoryItem.item_id == new_item_id).first()
    if existing:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Item ID {new_item_id} already exists"
        )

    item = InventoryItem(item_id=new_item_id, **item_data.model_dump())
    db.add(item)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.error(f"Error adding item {new_item_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Item ID {new_item_id} already exists"
        )
    db.refresh(item)
    return item


@router.put("/items/{item_id}", response_model=InventoryItemResponse)
def update_inventory_item(
    item_id: int,
    item_data: InventoryItemUpdate,
    db: Session = Depends(get_db)
):
    item = db.query(InventoryItem).filter(InventoryItem.id == item_id).first()
    if not item:
        raise HTTPException(status_code=404, detail="Inventory item not found")

    update_data = item_data.model_dump(exclude_unset=True)

    new_status = update_data.pop("status", None)
    if new_status and new_status != item.status:
        if new_status == ItemStatus.SOLD.value:
            logger.warning(f"Refused to mark item {item.item_id} sold without a sale")
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Record a sale to mark an item as sold"
            )
        if item.status == ItemStatus.SOLD.value or item.sales:
            logger.warning(f"Refused status change on sold item {item.item_id}")
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Delete the sale to put a sold item back in stock"
            )
        update_data["status"] = new_status

    if update_data.get("po_id"):
        _require_purchase_order(update_data["po_id"], db)

    for key, value in update_data.items():
        setattr(item, key, value)

    db.commit()
    db.refresh(item)
    return item


@router.delete("/items/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_inventory_item(
    item_id: int,
    db: Session = Depends(get_db)
):
    """Permanently delete a unit. Sold units are kept for sales history."""
    item = db.query(InventoryItem).filter(InventoryItem.id == item_id).first()
    if not item:
        raise HTTPException(status_code=404, detail="Inventory item not found")

    if not item.is_deletable():
        logger.warning(f"Refused to delete sold item {item.item_id}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Cannot delete an item that has been sold"
        )

    item_code = item.item_id
    db.delete(item)
    db.commit()
    logger.info(f"Deleted inventory item {item_code}")
