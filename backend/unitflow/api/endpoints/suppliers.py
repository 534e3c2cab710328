from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from sqlalchemy import func, or_
from typing import List, Optional

from unitflow.core.database import get_db
from unitflow.models.supplier import Supplier
from unitflow.models.inventory import InventoryItem, ItemStatus
from unitflow.models.purchase_order import PurchaseOrder
from unitflow.schemas.supplier import SupplierCreate, SupplierUpdate, SupplierResponse, SupplierWithStats

router = APIRouter(prefix="/suppliers", tags=["Suppliers"])


@router.get("", response_model=List[SupplierResponse])
def list_suppliers(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    search: Optional[str] = None,
    active_only: bool = False,
    db: Session = Depends(get_db)
):
    """List suppliers, searchable by name or code"""
    query = db.query(Supplier)

    if active_only:
        query = query.filter(Supplier.is_active == True)

    if search:
        query = query.filter(or_(
            Supplier.supplier_name.ilike(f"%{search}%"),
            Supplier.supplier_code.ilike(f"%{search}%"),
        ))

    return query.order_by(Supplier.supplier_name).offset(skip).limit(limit).all()


@router.get("/{supplier_id}", response_model=SupplierWithStats)
def get_supplier(
    supplier_id: int,
    db: Session = Depends(get_db)
):
    """Get supplier details with stats"""
    supplier = db.query(Supplier).filter(Supplier.id == supplier_id).first()
    if not supplier:
        raise HTTPException(status_code=404, detail="Supplier not found")

    response = SupplierWithStats.model_validate(supplier)
    response.item_count = db.query(func.count(InventoryItem.id)).filter(
        InventoryItem.supplier_id == supplier_id
    ).scalar() or 0
    response.in_stock_count = db.query(func.count(InventoryItem.id)).filter(
        InventoryItem.supplier_id == supplier_id,
        InventoryItem.status == ItemStatus.IN_STOCK.value
    ).scalar() or 0
    response.purchase_order_count = db.query(func.count(PurchaseOrder.id)).filter(
        PurchaseOrder.supplier_id == supplier_id
    ).scalar() or 0

    return response


@router.post("", response_model=SupplierResponse, status_code=status.HTTP_201_CREATED)
def create_supplier(
    supplier_data: SupplierCreate,
    db: Session = Depends(get_db)
):
    """Create a new supplier"""
    data = supplier_data.model_dump()
    data["supplier_code"] = data["supplier_code"].strip().upper()

    existing = db.query(Supplier).filter(Supplier.supplier_code == data["supplier_code"]).first()
    if existing:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Supplier code already exists"
        )

    supplier = Supplier(**data)
    db.add(supplier)
    db.commit()
    db.refresh(supplier)
    return supplier


@router.put("/{supplier_id}", response_model=SupplierResponse)
def update_supplier(
    supplier_id: int,
    supplier_data: SupplierUpdate,
    db: Session = Depends(get_db)
):
    """Update a supplier"""
    supplier = db.query(Supplier).filter(Supplier.id == supplier_id).first()
    if not supplier:
        raise HTTPException(status_code=404, detail="Supplier not found")

    update_data = supplier_data.model_dump(exclude_unset=True)

    if update_data.get("supplier_code"):
        update_data["supplier_code"] = update_data["supplier_code"].strip().upper()
        if update_data["supplier_code"] != supplier.supplier_code:
            has_items = db.query(InventoryItem.id).filter(InventoryItem.supplier_id == supplier_id).first()
            if has_items:
                # Item ids embed the supplier code
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail="Cannot change the code of a supplier that already has items"
                )
            existing = db.query(Supplier).filter(Supplier.supplier_code == update_data["supplier_code"]).first()
            if existing:
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail="Supplier code already exists"
                )

    for key, value in update_data.items():
        setattr(supplier, key, value)

    db.commit()
    db.refresh(supplier)
    return supplier
