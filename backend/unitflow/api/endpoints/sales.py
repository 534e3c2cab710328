from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session, joinedload
from sqlalchemy.exc import SQLAlchemyError
from typing import List, Optional
from datetime import datetime
import logging

from unitflow.core.database import get_db
from unitflow.models.inventory import InventoryItem, ItemStatus
from unitflow.models.customer import Customer
from unitflow.models.sale import Sale
from unitflow.schemas.dashboard import DateRange
from unitflow.schemas.sale import SaleCreate, SaleResponse, SaleWithDetails
from unitflow.services.metrics import date_range_start

router = APIRouter(prefix="/sales", tags=["Sales"])

logger = logging.getLogger(__name__)


def sale_with_details(sale: Sale) -> SaleWithDetails:
    response = SaleWithDetails.model_validate(sale)
    if sale.item:
        response.item_code = sale.item.item_id
        response.model_label = sale.item.model_label
        response.purchase_cost = sale.item.purchase_cost
    response.customer_name = sale.customer.name if sale.customer else None
    return response


@router.get("", response_model=List[SaleWithDetails])
def list_sales(
    date_range: DateRange = DateRange.ALL,
    customer_id: Optional[int] = None,
    skip: int = Query(0, ge=0),
    limit: int = Query(1000, ge=1, le=5000),
    db: Session = Depends(get_db)
):
    """List sales, most recent first"""
    query = db.query(Sale).options(
        joinedload(Sale.item),
        joinedload(Sale.customer),
    )

    start = date_range_start(date_range)
    if start:
        query = query.filter(Sale.sale_date >= start)
    if customer_id:
        query = query.filter(Sale.customer_id == customer_id)

    sales = query.order_by(Sale.sale_date.desc(), Sale.id.desc()).offset(skip).limit(limit).all()
    return [sale_with_details(s) for s in sales]


@router.get("/{sale_id}", response_model=SaleWithDetails)
def get_sale(
    sale_id: int,
    db: Session = Depends(get_db)
):
    sale = db.query(Sale).filter(Sale.id == sale_id).first()
    if not sale:
        raise HTTPException(status_code=404, detail="Sale not found")
    return sale_with_details(sale)


@router.post("", response_model=SaleResponse, status_code=status.HTTP_201_CREATED)
def create_sale(
    sale_data: SaleCreate,
    db: Session = Depends(get_db)
):
    """
    Record a sale and mark the unit as sold.
    Both writes go out in one commit so the item can never be left out of step with its sale.
    """
    item = db.query(InventoryItem).filter(InventoryItem.id == sale_data.item_id).first()
    if not item:
        raise HTTPException(status_code=404, detail="Inventory item not found")

    if item.status != ItemStatus.IN_STOCK.value:
        logger.warning(f"Refused sale of item {item.item_id} with status {item.status}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Item {item.item_id} is not available for sale (status: {item.status})"
        )

    if sale_data.customer_id:
        customer = db.query(Customer).filter(Customer.id == sale_data.customer_id).first()
        if not customer:
            raise HTTPException(status_code=404, detail="Customer not found")

    sale = Sale(**sale_data.model_dump())
    db.add(sale)

    item.status = ItemStatus.SOLD.value
    item.sold_date = datetime.utcnow()

    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error recording sale for item {item.item_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Error adding sale"
        )

    db.refresh(sale)
    logger.info(f"Recorded sale {sale.id} of item {item.item_id} for ${sale.sale_price:.2f}")
    return sale


@router.delete("/{sale_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_sale(
    sale_id: int,
    db: Session = Depends(get_db)
):
    """Delete a sale and put its unit back in stock"""
    sale = db.query(Sale).filter(Sale.id == sale_id).first()
    if not sale:
        raise HTTPException(status_code=404, detail="Sale not found")

    item = sale.item
    if item:
        item.status = ItemStatus.IN_STOCK.value
        item.sold_date = None

    db.delete(sale)

    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error deleting sale {sale_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Error deleting sale"
        )

    logger.info(f"Deleted sale {sale_id}; item {item.item_id if item else 'N/A'} back in stock")
