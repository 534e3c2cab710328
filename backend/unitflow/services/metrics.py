"""
Dashboard aggregation over sales and inventory rows.

Everything here is pure: the endpoints load the rows, these functions group
and reduce them in memory. Sales are expected to carry their joined item
(``sale.item``, possibly None) and customer (``sale.customer``, possibly None).
"""
from datetime import date
from typing import Dict, Iterable, List, Optional

from dateutil.relativedelta import relativedelta

from unitflow.models.inventory import ItemStatus, model_label
from unitflow.schemas.dashboard import (
    DateRange, SummaryStats, ModelPerformance, SupplierPerformance,
    CustomerPerformance, ModelStock, InventorySnapshot,
)
from unitflow.schemas.target import Target, TargetProgress

TOP_N = 5

AGING_BUCKETS = ("0-30", "31-60", "61-90", "90+")


def _margin(profit: float, revenue: float) -> float:
    return (profit / revenue) * 100 if revenue > 0 else 0.0


def date_range_start(date_range: DateRange, today: Optional[date] = None) -> Optional[date]:
    """First sale date included in the range, None for all time"""
    today = today or date.today()
    date_range = DateRange(date_range)

    if date_range == DateRange.TODAY:
        return today
    if date_range == DateRange.WEEK:
        return today - relativedelta(days=7)
    if date_range == DateRange.MONTH:
        # Same day last month, clamped to the end of a shorter month
        return today - relativedelta(months=1)
    if date_range == DateRange.LAST_MONTH:
        return today.replace(day=1) - relativedelta(months=1)
    return None


def filter_sales_by_range(sales: Iterable, date_range: DateRange, today: Optional[date] = None) -> List:
    start = date_range_start(date_range, today)
    if start is None:
        return list(sales)
    return [s for s in sales if s.sale_date >= start]


def summary_stats(sales: Iterable) -> SummaryStats:
    total_revenue = 0.0
    total_profit = 0.0
    units_sold = 0

    for sale in sales:
        units_sold += 1
        total_revenue += sale.sale_price
        # Sales whose item row is gone count towards revenue only
        if sale.item is not None:
            total_profit += sale.sale_price - sale.item.purchase_cost

    return SummaryStats(
        total_revenue=total_revenue,
        total_profit=total_profit,
        units_sold=units_sold,
        avg_margin=_margin(total_profit, total_revenue),
    )


def top_models_by_profit(sales: Iterable, limit: int = TOP_N) -> List[ModelPerformance]:
    model_stats: Dict[str, dict] = {}

    for sale in sales:
        if sale.item is None:
            continue
        model = model_label(sale.item.model_family, sale.item.screen_size)
        if model not in model_stats:
            model_stats[model] = {'units': 0, 'revenue': 0.0, 'profit': 0.0}

        model_stats[model]['units'] += 1
        model_stats[model]['revenue'] += sale.sale_price
        model_stats[model]['profit'] += sale.sale_price - sale.item.purchase_cost

    # sorted() is stable, so ties keep first-seen order
    ranked = sorted(model_stats.items(), key=lambda x: x[1]['profit'], reverse=True)
    return [
        ModelPerformance(
            model=model,
            units=data['units'],
            revenue=data['revenue'],
            profit=data['profit'],
            margin=_margin(data['profit'], data['revenue']),
        )
        for model, data in ranked[:limit]
    ]


def top_suppliers_by_profit(sales: Iterable, limit: int = TOP_N) -> List[SupplierPerformance]:
    supplier_stats: Dict[str, dict] = {}

    for sale in sales:
        item = sale.item
        if item is None or item.supplier is None:
            continue
        supplier_name = item.supplier.supplier_name
        if supplier_name not in supplier_stats:
            supplier_stats[supplier_name] = {'units': 0, 'revenue': 0.0, 'profit': 0.0, 'total_days': 0}

        stats = supplier_stats[supplier_name]
        stats['units'] += 1
        stats['revenue'] += sale.sale_price
        stats['profit'] += sale.sale_price - item.purchase_cost
        stats['total_days'] += (sale.sale_date - item.purchase_date).days

    ranked = sorted(supplier_stats.items(), key=lambda x: x[1]['profit'], reverse=True)
    return [
        SupplierPerformance(
            supplier_name=name,
            units=data['units'],
            revenue=data['revenue'],
            profit=data['profit'],
            margin=_margin(data['profit'], data['revenue']),
            avg_days_to_sell=round(data['total_days'] / data['units']) if data['units'] > 0 else 0,
        )
        for name, data in ranked[:limit]
    ]


def top_customers(sales: Iterable, limit: int = TOP_N) -> List[CustomerPerformance]:
    customer_stats: Dict[str, dict] = {}

    for sale in sales:
        if sale.customer is None:
            continue
        name = sale.customer.name
        profit = sale.sale_price - sale.item.purchase_cost if sale.item is not None else 0.0

        if name not in customer_stats:
            customer_stats[name] = {'purchases': 0, 'spent': 0.0, 'profit': 0.0, 'last_purchase': sale.sale_date}

        stats = customer_stats[name]
        stats['purchases'] += 1
        stats['spent'] += sale.sale_price
        stats['profit'] += profit
        if sale.sale_date > stats['last_purchase']:
            stats['last_purchase'] = sale.sale_date

    ranked = sorted(customer_stats.items(), key=lambda x: x[1]['profit'], reverse=True)
    return [
        CustomerPerformance(customer_name=name, **data)
        for name, data in ranked[:limit]
    ]


def aging_bucket(days: int) -> str:
    if days <= 30:
        return "0-30"
    if days <= 60:
        return "31-60"
    if days <= 90:
        return "61-90"
    return "90+"


def inventory_snapshot(items: Iterable, today: Optional[date] = None) -> InventorySnapshot:
    today = today or date.today()
    in_stock = [item for item in items if item.status == ItemStatus.IN_STOCK.value]

    buckets = {bucket: 0 for bucket in AGING_BUCKETS}
    model_counts: Dict[str, dict] = {}

    for item in in_stock:
        buckets[aging_bucket((today - item.purchase_date).days)] += 1

        model = model_label(item.model_family, item.screen_size)
        if model not in model_counts:
            model_counts[model] = {'count': 0, 'value': 0.0}
        model_counts[model]['count'] += 1
        model_counts[model]['value'] += item.purchase_cost

    return InventorySnapshot(
        total_units=len(in_stock),
        total_value=sum(item.purchase_cost for item in in_stock),
        aging_buckets=buckets,
        model_counts=[
            ModelStock(model=model, count=data['count'], value=data['value'])
            for model, data in sorted(model_counts.items(), key=lambda x: x[1]['count'], reverse=True)
        ],
    )


def target_current_value(target_type: str, stats: SummaryStats) -> float:
    values = {
        'revenue': stats.total_revenue,
        'profit': stats.total_profit,
        'units': float(stats.units_sold),
        'margin': stats.avg_margin,
    }
    return values.get(target_type, 0.0)


def target_progress(target: Target, stats: SummaryStats, today: Optional[date] = None) -> TargetProgress:
    today = today or date.today()
    current = target_current_value(target.type, stats)
    percentage = (current / target.target_value) * 100 if target.target_value else 0.0
    days_remaining = (target.deadline - today).days

    return TargetProgress(
        **target.model_dump(),
        current_value=current,
        percentage=percentage,
        remaining=target.target_value - current,
        days_remaining=days_remaining,
        is_expired=days_remaining < 0,
        is_urgent=0 <= days_remaining <= 7,
    )
