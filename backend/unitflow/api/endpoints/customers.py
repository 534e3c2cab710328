from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from sqlalchemy import or_
from typing import List, Optional

from unitflow.core.database import get_db
from unitflow.models.customer import Customer, CustomerType
from unitflow.models.sale import Sale
from unitflow.schemas.customer import CustomerCreate, CustomerUpdate, CustomerResponse, CustomerProfile
from unitflow.api.endpoints.sales import sale_with_details

router = APIRouter(prefix="/customers", tags=["Customers"])


@router.get("", response_model=List[CustomerResponse])
def list_customers(
    search: Optional[str] = None,
    customer_type: Optional[CustomerType] = None,
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    db: Session = Depends(get_db)
):
    """List customers, newest first"""
    query = db.query(Customer)

    if search:
        query = query.filter(or_(
            Customer.name.ilike(f"%{search}%"),
            Customer.phone.ilike(f"%{search}%"),
            Customer.email.ilike(f"%{search}%"),
        ))
    if customer_type:
        query = query.filter(Customer.customer_type == customer_type.value)

    return query.order_by(Customer.created_at.desc(), Customer.id.desc()).offset(skip).limit(limit).all()


@router.get("/{customer_id}", response_model=CustomerProfile)
def get_customer_profile(
    customer_id: int,
    db: Session = Depends(get_db)
):
    """Customer details with purchase history and lifetime totals"""
    customer = db.query(Customer).filter(Customer.id == customer_id).first()
    if not customer:
        raise HTTPException(status_code=404, detail="Customer not found")

    sales = db.query(Sale).filter(
        Sale.customer_id == customer_id
    ).order_by(Sale.sale_date.desc(), Sale.id.desc()).all()

    history = [sale_with_details(s) for s in sales]

    profile = CustomerProfile.model_validate(customer)
    profile.sales = history
    profile.purchase_count = len(sales)
    profile.total_spent = sum(s.sale_price for s in sales)
    profile.total_profit = sum(s.profit for s in sales if s.profit is not None)
    profile.last_purchase_date = sales[0].sale_date if sales else None
    return profile


@router.post("", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
def create_customer(
    customer_data: CustomerCreate,
    db: Session = Depends(get_db)
):
    if not customer_data.name.strip() or not customer_data.phone.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Please fill in name and phone"
        )

    customer = Customer(**customer_data.model_dump())
    db.add(customer)
    db.commit()
    db.refresh(customer)
    return customer


@router.put("/{customer_id}", response_model=CustomerResponse)
def update_customer(
    customer_id: int,
    customer_data: CustomerUpdate,
    db: Session = Depends(get_db)
):
    customer = db.query(Customer).filter(Customer.id == customer_id).first()
    if not customer:
        raise HTTPException(status_code=404, detail="Customer not found")

    update_data = customer_data.model_dump(exclude_unset=True)
    for key, value in update_data.items():
        setattr(customer, key, value)

    db.commit()
    db.refresh(customer)
    return customer
