from datetime import date, timedelta

from fastapi.testclient import TestClient

from unitflow.models.sale import Sale


# ============== CUSTOMER CRUD ==============

def test_create_customer(client: TestClient, db_session):
    response = client.post(
        "/api/v1/customers",
        json={
            "name": "Luc Gagnon",
            "phone": "438-555-0199",
            "email": "luc@gmail.com",
            "customer_type": "wholesale",
            "source": "referral",
            "ig_handle": "@lucg",
        },
    )

    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Luc Gagnon"
    assert data["customer_type"] == "wholesale"
    assert data["source"] == "referral"
    assert data["ig_handle"] == "@lucg"


def test_create_customer_defaults(client: TestClient, db_session):
    response = client.post("/api/v1/customers", json={"name": "Sam", "phone": "555-0000"})

    assert response.status_code == 201
    assert response.json()["customer_type"] == "retail"
    assert response.json()["source"] == "other"


def test_create_customer_blank_name_or_phone(client: TestClient, db_session):
    """Name and phone are both required."""
    response = client.post("/api/v1/customers", json={"name": "  ", "phone": "555-0000"})
    assert response.status_code == 400
    assert response.json()["detail"] == "Please fill in name and phone"

    response = client.post("/api/v1/customers", json={"name": "Sam", "phone": ""})
    assert response.status_code == 400


def test_create_customer_invalid_email(client: TestClient, db_session):
    response = client.post(
        "/api/v1/customers",
        json={"name": "Sam", "phone": "555-0000", "email": "not-an-email"},
    )
    assert response.status_code == 422


def test_list_customers_search(client: TestClient, db_session, test_customer):
    client.post("/api/v1/customers", json={"name": "Luc Gagnon", "phone": "438-555-0199"})

    response = client.get("/api/v1/customers")
    assert len(response.json()) == 2

    response = client.get("/api/v1/customers?search=tremblay")
    assert [c["name"] for c in response.json()] == ["Marie Tremblay"]

    response = client.get("/api/v1/customers?search=438")
    assert [c["name"] for c in response.json()] == ["Luc Gagnon"]


def test_list_customers_by_type(client: TestClient, db_session, test_customer):
    client.post(
        "/api/v1/customers",
        json={"name": "Dealer Inc", "phone": "555-1111", "customer_type": "dealer"},
    )

    response = client.get("/api/v1/customers?customer_type=dealer")
    assert [c["name"] for c in response.json()] == ["Dealer Inc"]


def test_update_customer(client: TestClient, db_session, test_customer):
    response = client.put(
        f"/api/v1/customers/{test_customer.id}",
        json={"customer_type": "friend_family", "notes": "Cousin"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["customer_type"] == "friend_family"
    assert data["notes"] == "Cousin"
    assert data["phone"] == "514-555-0101"


def test_update_nonexistent_customer(client: TestClient, db_session):
    response = client.put("/api/v1/customers/99999", json={"notes": "x"})
    assert response.status_code == 404


# ============== CUSTOMER PROFILE ==============

def test_customer_profile_totals(client: TestClient, db_session, test_supplier, test_customer, item_factory):
    """Profile carries purchase history and lifetime spend and profit."""
    first = item_factory(test_supplier, "0001", purchase_cost=1000.0)
    second = item_factory(test_supplier, "0002", purchase_cost=700.0)
    last_week = date.today() - timedelta(days=7)

    db_session.add_all([
        Sale(item_id=first.id, customer_id=test_customer.id, sale_price=1300.0,
             sale_date=last_week, payment_method="cash", channel="walk-in"),
        Sale(item_id=second.id, customer_id=test_customer.id, sale_price=900.0,
             sale_date=date.today(), payment_method="interac", channel="instagram"),
    ])
    db_session.commit()

    response = client.get(f"/api/v1/customers/{test_customer.id}")

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Marie Tremblay"
    assert data["purchase_count"] == 2
    assert data["total_spent"] == 2200.0
    assert data["total_profit"] == 500.0
    assert data["last_purchase_date"] == date.today().isoformat()
    assert [s["item_code"] for s in data["sales"]] == ["FB0002", "FB0001"]


def test_customer_profile_without_purchases(client: TestClient, db_session, test_customer):
    response = client.get(f"/api/v1/customers/{test_customer.id}")

    assert response.status_code == 200
    data = response.json()
    assert data["purchase_count"] == 0
    assert data["total_spent"] == 0
    assert data["last_purchase_date"] is None
    assert data["sales"] == []


def test_get_nonexistent_customer(client: TestClient, db_session):
    response = client.get("/api/v1/customers/99999")
    assert response.status_code == 404
