"""
Unit tests for dashboard aggregation.
Sales and items are transient model instances; nothing touches the database.
"""
from datetime import date, datetime, timedelta

import pytest

from unitflow.models import Supplier, InventoryItem, Customer, Sale
from unitflow.schemas.dashboard import DateRange, SummaryStats
from unitflow.schemas.target import Target
from unitflow.services import metrics

TODAY = date(2024, 6, 15)


def make_item(cost, model="MacBook Pro", size="14", status="in_stock", purchased=None, supplier=None):
    return InventoryItem(
        model_family=model,
        screen_size=size,
        purchase_cost=cost,
        purchase_date=purchased or TODAY - timedelta(days=10),
        status=status,
        supplier=supplier,
    )


def make_sale(price, item=None, customer=None, sold=None):
    return Sale(sale_price=price, sale_date=sold or TODAY, item=item, customer=customer)


# ============== date ranges ==============

class TestDateRangeStart:

    def test_today(self):
        assert metrics.date_range_start(DateRange.TODAY, TODAY) == TODAY

    def test_week(self):
        assert metrics.date_range_start(DateRange.WEEK, TODAY) == date(2024, 6, 8)

    def test_month(self):
        assert metrics.date_range_start(DateRange.MONTH, TODAY) == date(2024, 5, 15)

    def test_month_clamps_to_shorter_month(self):
        assert metrics.date_range_start(DateRange.MONTH, date(2024, 3, 31)) == date(2024, 2, 29)

    def test_last_month_starts_on_first_day(self):
        assert metrics.date_range_start(DateRange.LAST_MONTH, TODAY) == date(2024, 5, 1)

    def test_last_month_across_year_boundary(self):
        assert metrics.date_range_start(DateRange.LAST_MONTH, date(2024, 1, 20)) == date(2023, 12, 1)

    def test_all_time_has_no_start(self):
        assert metrics.date_range_start(DateRange.ALL, TODAY) is None

    def test_accepts_plain_string(self):
        assert metrics.date_range_start("week", TODAY) == date(2024, 6, 8)

    def test_filter_sales_by_range(self):
        recent = make_sale(100, sold=TODAY - timedelta(days=3))
        old = make_sale(100, sold=TODAY - timedelta(days=30))
        assert metrics.filter_sales_by_range([recent, old], DateRange.WEEK, TODAY) == [recent]
        assert len(metrics.filter_sales_by_range([recent, old], DateRange.ALL, TODAY)) == 2


# ============== summary stats ==============

class TestSummaryStats:

    def test_revenue_profit_and_margin(self):
        sales = [make_sale(1000, make_item(700)), make_sale(500, make_item(500))]
        stats = metrics.summary_stats(sales)

        assert stats.total_revenue == 1500
        assert stats.total_profit == 300
        assert stats.units_sold == 2
        assert stats.avg_margin == pytest.approx(20.0)

    def test_no_sales(self):
        stats = metrics.summary_stats([])
        assert stats.total_revenue == 0
        assert stats.total_profit == 0
        assert stats.units_sold == 0
        assert stats.avg_margin == 0

    def test_sale_without_item_counts_revenue_only(self):
        sales = [make_sale(1000, make_item(600)), make_sale(400)]
        stats = metrics.summary_stats(sales)

        assert stats.total_revenue == 1400
        assert stats.total_profit == 400
        assert stats.units_sold == 2

    def test_profit_equals_revenue_minus_present_costs(self):
        items = [make_item(700), make_item(350), None, make_item(1200)]
        prices = [950, 300, 200, 1500]
        sales = [make_sale(p, i) for p, i in zip(prices, items)]
        stats = metrics.summary_stats(sales)

        costs = sum(i.purchase_cost for i in items if i is not None)
        revenue_with_items = sum(p for p, i in zip(prices, items) if i is not None)
        assert stats.total_profit == pytest.approx(revenue_with_items - costs)
        assert stats.total_revenue == sum(prices)

    def test_zero_revenue_means_zero_margin(self):
        stats = metrics.summary_stats([make_sale(0, make_item(100))])
        assert stats.total_revenue == 0
        assert stats.avg_margin == 0

    def test_loss_gives_negative_margin(self):
        stats = metrics.summary_stats([make_sale(800, make_item(1000))])
        assert stats.total_profit == -200
        assert stats.avg_margin == pytest.approx(-25.0)


# ============== top models ==============

class TestTopModels:

    def test_groups_by_model_and_screen_size(self):
        sales = [
            make_sale(1200, make_item(900, "MacBook Pro", "14")),
            make_sale(1300, make_item(900, "MacBook Pro", "14")),
            make_sale(900, make_item(800, "MacBook Air", "13")),
        ]
        top = metrics.top_models_by_profit(sales)

        assert [m.model for m in top] == ['MacBook Pro 14"', 'MacBook Air 13"']
        pro = top[0]
        assert pro.units == 2
        assert pro.revenue == 2500
        assert pro.profit == 700
        assert pro.margin == pytest.approx(28.0)

    def test_never_more_than_five(self):
        sales = [make_sale(1000 + i, make_item(900, "MacBook Pro", str(i))) for i in range(8)]
        top = metrics.top_models_by_profit(sales)

        assert len(top) == 5
        profits = [m.profit for m in top]
        assert profits == sorted(profits, reverse=True)
        assert profits[0] == 107

    def test_ties_keep_first_seen_order(self):
        sales = [
            make_sale(1100, make_item(1000, "MacBook Air", "13")),
            make_sale(1100, make_item(1000, "MacBook Pro", "16")),
        ]
        top = metrics.top_models_by_profit(sales)
        assert [m.model for m in top] == ['MacBook Air 13"', 'MacBook Pro 16"']

    def test_skips_sales_without_item(self):
        assert metrics.top_models_by_profit([make_sale(500)]) == []


# ============== top suppliers ==============

class TestTopSuppliers:

    def test_profit_and_days_to_sell(self):
        fb = Supplier(supplier_code="FB", supplier_name="Facebook")
        wh = Supplier(supplier_code="WH", supplier_name="Wholesale")
        sales = [
            make_sale(1200, make_item(1000, purchased=TODAY - timedelta(days=10), supplier=fb)),
            make_sale(1100, make_item(1000, purchased=TODAY - timedelta(days=21), supplier=fb)),
            make_sale(1500, make_item(1000, purchased=TODAY - timedelta(days=4), supplier=wh)),
        ]
        top = metrics.top_suppliers_by_profit(sales)

        assert [s.supplier_name for s in top] == ["Wholesale", "Facebook"]
        assert top[0].profit == 500
        assert top[0].avg_days_to_sell == 4
        assert top[1].units == 2
        assert top[1].profit == 300
        assert top[1].avg_days_to_sell == 16  # round(31 / 2)
        assert top[1].margin == pytest.approx(300 / 2300 * 100)

    def test_skips_items_without_supplier(self):
        assert metrics.top_suppliers_by_profit([make_sale(1000, make_item(500))]) == []


# ============== top customers ==============

class TestTopCustomers:

    def test_groups_by_customer_name(self):
        alice = Customer(name="Alice")
        bob = Customer(name="Bob")
        sales = [
            make_sale(1000, make_item(800), alice, sold=TODAY - timedelta(days=5)),
            make_sale(1500, make_item(1000), alice, sold=TODAY - timedelta(days=1)),
            make_sale(900, make_item(850), bob),
            make_sale(700, make_item(100)),  # anonymous sale
        ]
        top = metrics.top_customers(sales)

        assert [c.customer_name for c in top] == ["Alice", "Bob"]
        assert top[0].purchases == 2
        assert top[0].spent == 2500
        assert top[0].profit == 700
        assert top[0].last_purchase == TODAY - timedelta(days=1)

    def test_missing_item_adds_no_profit(self):
        carol = Customer(name="Carol")
        top = metrics.top_customers([make_sale(600, None, carol)])
        assert top[0].spent == 600
        assert top[0].profit == 0

    def test_limit_five(self):
        sales = [make_sale(1000 + i, make_item(900), Customer(name=f"C{i}")) for i in range(7)]
        assert len(metrics.top_customers(sales)) == 5


# ============== inventory snapshot ==============

class TestInventorySnapshot:

    def test_only_in_stock_items_count(self):
        items = [
            make_item(1000),
            make_item(800, status="sold"),
            make_item(600, status="reserved"),
        ]
        snapshot = metrics.inventory_snapshot(items, TODAY)

        assert snapshot.total_units == 1
        assert snapshot.total_value == 1000

    @pytest.mark.parametrize("days,bucket", [
        (0, "0-30"), (30, "0-30"), (31, "31-60"), (60, "31-60"),
        (61, "61-90"), (90, "61-90"), (91, "90+"), (400, "90+"),
    ])
    def test_aging_bucket_edges(self, days, bucket):
        assert metrics.aging_bucket(days) == bucket

    def test_buckets_partition_in_stock_items(self):
        ages = [1, 15, 30, 31, 45, 75, 90, 91, 200, 365]
        items = [make_item(500, purchased=TODAY - timedelta(days=d)) for d in ages]
        items.append(make_item(500, status="sold", purchased=TODAY - timedelta(days=5)))
        snapshot = metrics.inventory_snapshot(items, TODAY)

        assert snapshot.aging_buckets == {"0-30": 3, "31-60": 2, "61-90": 2, "90+": 3}
        assert sum(snapshot.aging_buckets.values()) == snapshot.total_units == len(ages)

    def test_empty_inventory_has_all_buckets(self):
        snapshot = metrics.inventory_snapshot([], TODAY)
        assert snapshot.aging_buckets == {"0-30": 0, "31-60": 0, "61-90": 0, "90+": 0}
        assert snapshot.model_counts == []

    def test_model_counts_sorted_by_count(self):
        items = [
            make_item(800, "MacBook Air", "13"),
            make_item(1200, "MacBook Pro", "16"),
            make_item(1100, "MacBook Pro", "16"),
        ]
        snapshot = metrics.inventory_snapshot(items, TODAY)

        assert snapshot.model_counts[0].model == 'MacBook Pro 16"'
        assert snapshot.model_counts[0].count == 2
        assert snapshot.model_counts[0].value == 2300
        assert snapshot.model_counts[1].model == 'MacBook Air 13"'


# ============== target progress ==============

class TestTargetProgress:

    def make_target(self, type_, value, deadline):
        return Target(
            id="1",
            type=type_,
            title="Monthly goal",
            target_value=value,
            deadline=deadline,
            created_at=datetime(2024, 6, 1),
        )

    def test_profit_target(self):
        stats = SummaryStats(total_revenue=5000, total_profit=1500, units_sold=4, avg_margin=30.0)
        progress = metrics.target_progress(self.make_target("profit", 2000, date(2024, 6, 30)), stats, TODAY)

        assert progress.current_value == 1500
        assert progress.percentage == pytest.approx(75.0)
        assert progress.remaining == 500
        assert progress.days_remaining == 15
        assert progress.is_expired is False
        assert progress.is_urgent is False

    def test_units_and_margin_targets(self):
        stats = SummaryStats(total_revenue=5000, total_profit=1500, units_sold=4, avg_margin=30.0)
        units = metrics.target_progress(self.make_target("units", 8, date(2024, 6, 20)), stats, TODAY)
        margin = metrics.target_progress(self.make_target("margin", 25, date(2024, 6, 20)), stats, TODAY)

        assert units.current_value == 4
        assert units.percentage == pytest.approx(50.0)
        assert units.is_urgent is True
        assert margin.percentage == pytest.approx(120.0)

    def test_expired_target(self):
        stats = SummaryStats()
        progress = metrics.target_progress(self.make_target("revenue", 1000, date(2024, 6, 10)), stats, TODAY)
        assert progress.days_remaining == -5
        assert progress.is_expired is True
        assert progress.is_urgent is False
