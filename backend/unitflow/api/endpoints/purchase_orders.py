from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from unitflow.core.database import get_db
from unitflow.models.supplier import Supplier
from unitflow.models.purchase_order import PurchaseOrder, PurchaseOrderStatus
from unitflow.schemas.purchase_order import (
    PurchaseOrderCreate, PurchaseOrderUpdate, PurchaseOrderResponse, PurchaseOrderWithDetails
)

router = APIRouter(prefix="/purchase-orders", tags=["Purchase Orders"])


def _with_details(po: PurchaseOrder) -> PurchaseOrderWithDetails:
    response = PurchaseOrderWithDetails.model_validate(po)
    response.supplier_name = po.supplier.supplier_name if po.supplier else None
    response.item_count = po.item_count
    response.items_cost = po.items_cost
    return response


def _require_supplier(supplier_id: int, db: Session) -> Supplier:
    supplier = db.query(Supplier).filter(Supplier.id == supplier_id).first()
    if not supplier:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Supplier does not exist"
        )
    return supplier


@router.get("", response_model=List[PurchaseOrderWithDetails])
def list_purchase_orders(
    supplier_id: Optional[int] = None,
    status_filter: Optional[PurchaseOrderStatus] = Query(None, alias="status"),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    db: Session = Depends(get_db)
):
    """List purchase orders, newest order date first"""
    query = db.query(PurchaseOrder)

    if supplier_id:
        query = query.filter(PurchaseOrder.supplier_id == supplier_id)
    if status_filter:
        query = query.filter(PurchaseOrder.status == status_filter.value)

    pos = query.order_by(PurchaseOrder.order_date.desc(), PurchaseOrder.id.desc()).offset(skip).limit(limit).all()
    return [_with_details(po) for po in pos]


@router.get("/{po_id}", response_model=PurchaseOrderWithDetails)
def get_purchase_order(
    po_id: int,
    db: Session = Depends(get_db)
):
    po = db.query(PurchaseOrder).filter(PurchaseOrder.id == po_id).first()
    if not po:
        raise HTTPException(status_code=404, detail="Purchase order not found")
    return _with_details(po)


@router.post("", response_model=PurchaseOrderResponse, status_code=status.HTTP_201_CREATED)
def create_purchase_order(
    po_data: PurchaseOrderCreate,
    db: Session = Depends(get_db)
):
    """Create a purchase order for a supplier"""
    _require_supplier(po_data.supplier_id, db)

    existing = db.query(PurchaseOrder).filter(PurchaseOrder.po_number == po_data.po_number).first()
    if existing:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="PO number already exists"
        )

    po = PurchaseOrder(**po_data.model_dump())
    db.add(po)
    db.commit()
    db.refresh(po)
    return po


@router.put("/{po_id}", response_model=PurchaseOrderResponse)
def update_purchase_order(
    po_id: int,
    po_data: PurchaseOrderUpdate,
    db: Session = Depends(get_db)
):
    po = db.query(PurchaseOrder).filter(PurchaseOrder.id == po_id).first()
    if not po:
        raise HTTPException(status_code=404, detail="Purchase order not found")

    update_data = po_data.model_dump(exclude_unset=True)

    if update_data.get("supplier_id"):
        _require_supplier(update_data["supplier_id"], db)

    if update_data.get("po_number") and update_data["po_number"] != po.po_number:
        existing = db.query(PurchaseOrder).filter(PurchaseOrder.po_number == update_data["po_number"]).first()
        if existing:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="PO number already exists"
            )

    for key, value in update_data.items():
        setattr(po, key, value)

    db.commit()
    db.refresh(po)
    return po
