from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session, joinedload
from datetime import date

from unitflow.core.database import get_db
from unitflow.core.targets import TargetStore, get_target_store
from unitflow.models.inventory import InventoryItem
from unitflow.models.sale import Sale
from unitflow.schemas.dashboard import DateRange, Dashboard
from unitflow.services import metrics

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


def load_sales(db: Session, date_range: DateRange, today: date):
    """Sales in the range with their item (and its supplier) and customer joined"""
    query = db.query(Sale).options(
        joinedload(Sale.item).joinedload(InventoryItem.supplier),
        joinedload(Sale.customer),
    )

    start = metrics.date_range_start(date_range, today)
    if start:
        query = query.filter(Sale.sale_date >= start)

    return query.order_by(Sale.sale_date.desc(), Sale.id.desc()).all()


@router.get("", response_model=Dashboard)
def get_dashboard(
    date_range: DateRange = DateRange.MONTH,
    db: Session = Depends(get_db),
    store: TargetStore = Depends(get_target_store)
):
    """Sales performance for the selected range plus a snapshot of current stock"""
    today = date.today()
    sales = load_sales(db, date_range, today)
    items = db.query(InventoryItem).all()

    stats = metrics.summary_stats(sales)

    return Dashboard(
        date_range=date_range,
        start_date=metrics.date_range_start(date_range, today),
        stats=stats,
        top_models=metrics.top_models_by_profit(sales),
        top_suppliers=metrics.top_suppliers_by_profit(sales),
        top_customers=metrics.top_customers(sales),
        inventory=metrics.inventory_snapshot(items, today),
        targets=[
            metrics.target_progress(t, stats, today)
            for t in store.list_targets() if not t.completed
        ],
    )
