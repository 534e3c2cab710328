import os

# Configure before the app module is imported; it creates tables on import
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from unitflow.main import app
from unitflow.core.database import Base, get_db
from unitflow.core.targets import TargetStore, get_target_store
from unitflow.models.supplier import Supplier
from unitflow.models.purchase_order import PurchaseOrder
from unitflow.models.inventory import InventoryItem
from unitflow.models.customer import Customer

# Create in-memory SQLite database for testing
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def target_store(tmp_path):
    """Goal tracker file isolated per test."""
    return TargetStore(str(tmp_path / "targets.json"))


@pytest.fixture(scope="function")
def client(db_session, target_store):
    """Create a test client with database and target store overrides."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_target_store] = lambda: target_store
    test_client = TestClient(app)
    yield test_client
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def item_factory(db_session):
    """Insert inventory items directly, bypassing the API."""
    def make_item(supplier, number, **overrides):
        fields = dict(
            item_id=f"{supplier.supplier_code}{number}",
            supplier_id=supplier.id,
            supplier_item_number=number,
            model_family="MacBook Pro",
            screen_size="14",
            chip="M1 Pro",
            ram_gb=16,
            storage_gb=512,
            year=2021,
            condition_grade="A",
            condition_summary="Like new",
            purchase_cost=1000.0,
            purchase_date=date.today() - timedelta(days=10),
            status="in_stock",
        )
        fields.update(overrides)
        item = InventoryItem(**fields)
        db_session.add(item)
        db_session.commit()
        db_session.refresh(item)
        return item

    return make_item


@pytest.fixture(scope="function")
def test_supplier(db_session):
    """Create a test supplier."""
    supplier = Supplier(
        supplier_code="FB",
        supplier_name="Facebook Marketplace",
        supplier_type="marketplace",
        contact_name="John Contact",
        contact_phone="555-1234",
        is_active=True,
    )
    db_session.add(supplier)
    db_session.commit()
    db_session.refresh(supplier)
    return supplier


@pytest.fixture(scope="function")
def second_supplier(db_session):
    supplier = Supplier(
        supplier_code="WH",
        supplier_name="Wholesale Direct",
        supplier_type="wholesaler",
        is_active=True,
    )
    db_session.add(supplier)
    db_session.commit()
    db_session.refresh(supplier)
    return supplier


@pytest.fixture(scope="function")
def test_purchase_order(db_session, test_supplier):
    po = PurchaseOrder(
        po_number="PO-2024-001",
        supplier_id=test_supplier.id,
        order_date=date.today() - timedelta(days=12),
        status="pending",
        total_amount=2500.0,
    )
    db_session.add(po)
    db_session.commit()
    db_session.refresh(po)
    return po


@pytest.fixture(scope="function")
def test_inventory_item(item_factory, test_supplier):
    """Create an in-stock MacBook Pro 14 bought for $1000."""
    return item_factory(test_supplier, "0001", serial_number="C02XYZ123")


@pytest.fixture(scope="function")
def test_customer(db_session):
    customer = Customer(
        name="Marie Tremblay",
        phone="514-555-0101",
        email="marie@example.com",
        customer_type="retail",
        source="instagram",
    )
    db_session.add(customer)
    db_session.commit()
    db_session.refresh(customer)
    return customer
