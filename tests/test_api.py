import uuid
from datetime import date, timedelta

import pytest

TODAY = date.today()


def create_property(client, landlord_id="landlord-1", units=None):
    response = client.post("/api/properties", json={
        "landlord_id": landlord_id,
        "name": "Sunrise Apartments",
        "location": "Kilimani, Nairobi",
        "units": units if units is not None else [
            {"id": "U1", "name": "A1", "unit_type": "1 Bedroom", "rent": 10000},
            {"id": "U2", "name": "A2", "unit_type": "Bedsitter", "rent": 8000},
        ],
    })
    assert response.status_code == 201, response.text
    return response.json()


def tenant_body(property_id, unit_id, **overrides):
    body = {
        "name": "Jane Wanjiku",
        "email": "jane@example.com",
        "phone": "0712345678",
        "lease_start": (TODAY - timedelta(days=30)).isoformat(),
        "lease_end": (TODAY + timedelta(days=335)).isoformat(),
        "property_id": property_id,
        "unit_id": unit_id,
    }
    body.update(overrides)
    return body


def units_by_id(client, property_id):
    prop = client.get(f"/api/properties/detail/{property_id}").json()
    return {u["id"]: u for u in prop["units"]}


@pytest.fixture()
def p1(client):
    return create_property(client)


def test_root_and_health(client):
    assert client.get("/").json()["success"] is True
    assert client.get("/health").status_code == 200


def test_create_and_list_properties(client, p1):
    assert p1["occupancy_rate"] == 0
    assert [u["id"] for u in p1["units"]] == ["U1", "U2"]
    assert all(u["tenant_id"] is None for u in p1["units"])

    listed = client.get("/api/properties/landlord-1").json()
    assert [p["id"] for p in listed] == [p1["id"]]
    assert client.get("/api/properties/nobody").json() == []


def test_create_property_missing_fields_is_400(client):
    response = client.post("/api/properties", json={"landlord_id": "landlord-1", "units": [{"name": "A", "rent": -1}]})
    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert {e["field"] for e in body["errors"]} == {"name", "location", "units[0].rent"}


def test_property_with_no_units_has_zero_occupancy(client):
    prop = create_property(client, units=[])
    assert prop["occupancy_rate"] == 0


def test_update_unknown_property_is_404(client):
    response = client.put(f"/api/properties/{uuid.uuid4()}", json={"name": "x"})
    assert response.status_code == 404
    assert response.json()["detail"] == "Property not found"


def test_tenant_lifecycle_end_to_end(client, p1):
    response = client.post("/api/tenants", json=tenant_body(p1["id"], "U1"))
    assert response.status_code == 201, response.text
    t1 = response.json()
    assert t1["lease_status"] == "Active"

    units = units_by_id(client, p1["id"])
    assert units["U1"]["tenant_id"] == t1["id"]
    assert units["U1"]["is_occupied"] is True
    assert client.get(f"/api/properties/detail/{p1['id']}").json()["occupancy_rate"] == 0.5

    response = client.put(f"/api/tenants/{t1['id']}", json={"unit_id": "U2"})
    assert response.status_code == 200, response.text
    units = units_by_id(client, p1["id"])
    assert units["U1"]["tenant_id"] is None
    assert units["U2"]["tenant_id"] == t1["id"]

    response = client.post("/api/tenants", json=tenant_body(p1["id"], "U2", email="t2@example.com"))
    assert response.status_code == 409
    assert units_by_id(client, p1["id"])["U2"]["tenant_id"] == t1["id"]

    response = client.delete(f"/api/tenants/{t1['id']}")
    assert response.status_code == 200
    assert response.json()["success"] is True
    assert units_by_id(client, p1["id"])["U2"]["tenant_id"] is None
    assert client.get("/api/tenants").json() == []


def test_create_tenant_validation_errors_are_400(client, p1):
    response = client.post("/api/tenants", json=tenant_body(
        p1["id"], "U1",
        email="jane-at-example",
        lease_end=(TODAY - timedelta(days=60)).isoformat(),
    ))
    assert response.status_code == 400
    assert {e["field"] for e in response.json()["errors"]} == {"email", "lease_end"}

    response = client.post("/api/tenants", json={"name": "Jane"})
    assert response.status_code == 400

    response = client.post("/api/tenants", json=tenant_body(p1["id"], "U1", lease_start="not-a-date"))
    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "lease_start"

    assert all(u["tenant_id"] is None for u in units_by_id(client, p1["id"]).values())


def test_create_tenant_on_unknown_unit_is_404(client, p1):
    response = client.post("/api/tenants", json=tenant_body(p1["id"], "U9"))
    assert response.status_code == 404


def test_tenant_not_found(client):
    missing = uuid.uuid4()
    assert client.get(f"/api/tenants/{missing}").status_code == 404
    assert client.put(f"/api/tenants/{missing}", json={"phone": "1"}).status_code == 404
    assert client.delete(f"/api/tenants/{missing}").status_code == 404


def test_tenant_lease_status_in_listing(client, p1):
    client.post("/api/tenants", json=tenant_body(
        p1["id"], "U1", lease_end=(TODAY + timedelta(days=90)).isoformat()
    ))
    client.post("/api/tenants", json=tenant_body(
        p1["id"], "U2",
        email="old@example.com",
        lease_start=(TODAY - timedelta(days=400)).isoformat(),
        lease_end=(TODAY - timedelta(days=1)).isoformat(),
    ))

    statuses = [t["lease_status"] for t in client.get("/api/tenants?landlord_id=landlord-1").json()]
    assert statuses == ["Ending Soon", "Expired"]


def test_delete_property_with_tenant_is_409(client, p1):
    tenant = client.post("/api/tenants", json=tenant_body(p1["id"], "U1")).json()

    assert client.delete(f"/api/properties/{p1['id']}").status_code == 409

    client.delete(f"/api/tenants/{tenant['id']}")
    assert client.delete(f"/api/properties/{p1['id']}").status_code == 204
    assert client.get(f"/api/properties/detail/{p1['id']}").status_code == 404


def test_removing_occupied_unit_is_409(client, p1):
    client.post("/api/tenants", json=tenant_body(p1["id"], "U1"))

    response = client.put(f"/api/properties/{p1['id']}", json={
        "units": [{"id": "U2", "name": "A2", "rent": 8000}],
    })
    assert response.status_code == 409
    assert set(units_by_id(client, p1["id"])) == {"U1", "U2"}


def test_payments_and_expenses(client, p1):
    tenant = client.post("/api/tenants", json=tenant_body(p1["id"], "U1")).json()

    response = client.post("/api/payments", json={
        "tenant_id": tenant["id"],
        "amount": 10000,
        "payment_date": TODAY.isoformat(),
        "status": "Paid",
        "method": "M-PESA",
    })
    assert response.status_code == 201, response.text
    payment = response.json()
    assert payment["property_id"] == p1["id"]
    assert payment["unit_id"] == "U1"

    response = client.put(f"/api/payments/{payment['id']}", json={"method": "Cash"})
    assert response.json()["method"] == "Cash"

    assert client.post("/api/payments", json={
        "tenant_id": str(uuid.uuid4()), "amount": 100, "payment_date": TODAY.isoformat(),
    }).status_code == 404
    assert client.post("/api/payments", json={
        "tenant_id": tenant["id"], "amount": -5, "payment_date": TODAY.isoformat(),
    }).status_code == 400

    response = client.post("/api/expenses", json={
        "property_id": p1["id"],
        "category": "Repairs",
        "description": "Plumbing",
        "amount": 2500,
        "expense_date": TODAY.isoformat(),
    })
    assert response.status_code == 201, response.text
    expense = response.json()

    assert client.post("/api/expenses", json={
        "property_id": str(uuid.uuid4()),
        "category": "Repairs",
        "description": "Plumbing",
        "amount": 2500,
        "expense_date": TODAY.isoformat(),
    }).status_code == 404

    assert len(client.get("/api/payments?landlord_id=landlord-1").json()) == 1
    assert client.get("/api/payments?landlord_id=other").json() == []
    assert len(client.get("/api/expenses?landlord_id=landlord-1").json()) == 1

    assert client.delete(f"/api/expenses/{expense['id']}").status_code == 200
    assert client.get(f"/api/expenses/{expense['id']}").status_code == 404
    assert client.delete(f"/api/payments/{payment['id']}").status_code == 200


def test_payments_survive_tenant_deletion(client, p1):
    tenant = client.post("/api/tenants", json=tenant_body(p1["id"], "U1")).json()
    client.post("/api/payments", json={
        "tenant_id": tenant["id"], "amount": 10000, "payment_date": TODAY.isoformat(), "status": "Paid",
    })

    client.delete(f"/api/tenants/{tenant['id']}")
    assert len(client.get("/api/payments?landlord_id=landlord-1").json()) == 1


def test_landlord_and_tax_reports(client, p1):
    t1 = client.post("/api/tenants", json=tenant_body(p1["id"], "U1")).json()
    for amount, payment_status in ((10000, "Paid"), (10000, "Paid"), (10000, "Overdue"), (500, "Pending")):
        client.post("/api/payments", json={
            "tenant_id": t1["id"], "amount": amount,
            "payment_date": TODAY.isoformat(), "status": payment_status,
        })
    for category, amount in (("Repairs", 3000), ("Utilities", 1000), ("Repairs", 1000)):
        client.post("/api/expenses", json={
            "property_id": p1["id"], "category": category, "description": category,
            "amount": amount, "expense_date": TODAY.isoformat(),
        })

    summary = client.get("/api/reports/landlord/landlord-1").json()
    assert summary["total_income"] == 20000
    assert summary["overdue_rent"] == 10000
    assert summary["total_expenses"] == 5000
    assert summary["net_income"] == 15000
    assert summary["total_units"] == 2
    assert summary["occupied_units"] == 1
    assert summary["occupancy_rate"] == 0.5
    assert summary["expenses_by_category"] == {"Repairs": 4000, "Utilities": 1000}
    assert summary["lease_status_counts"] == {"Active": 1}
    row = summary["properties"][0]
    assert row["potential_monthly_income"] == 10000
    assert row["income_received"] == 20000
    assert row["occupancy_rate"] == 0.5

    tax = client.get("/api/reports/tax/landlord-1").json()
    assert tax["net_taxable_income"] == 15000
    assert tax["tax_rate"] == pytest.approx(0.10)
    assert tax["estimated_tax"] == pytest.approx(1500)
    assert tax["income_by_property"] == [
        {"property_id": p1["id"], "name": "Sunrise Apartments", "income": 20000},
    ]


def test_reports_for_landlord_without_data(client):
    summary = client.get("/api/reports/landlord/nobody").json()
    assert summary["occupancy_rate"] == 0
    assert summary["properties"] == []

    tax = client.get("/api/reports/tax/nobody").json()
    assert tax["estimated_tax"] == 0


def add_payment(client, tenant_id, amount, payment_status="Paid"):
    response = client.post("/api/payments", json={
        "tenant_id": tenant_id, "amount": amount,
        "payment_date": TODAY.isoformat(), "status": payment_status,
    })
    assert response.status_code == 201, response.text
    return response.json()


def test_tax_summary_keeps_same_named_properties_apart(client):
    units = [{"id": "A", "name": "A", "rent": 100}]
    first = create_property(client, units=units)
    second = create_property(client, units=units)
    for prop in (first, second):
        tenant = client.post("/api/tenants", json=tenant_body(prop["id"], "A")).json()
        add_payment(client, tenant["id"], 100)

    rows = client.get("/api/reports/tax/landlord-1").json()["income_by_property"]

    assert len(rows) == 2
    assert {row["property_id"]: row["income"] for row in rows} == {first["id"]: 100, second["id"]: 100}
    assert {row["name"] for row in rows} == {"Sunrise Apartments"}


def test_payments_filtered_by_tenant(client, p1):
    t1 = client.post("/api/tenants", json=tenant_body(p1["id"], "U1")).json()
    t2 = client.post("/api/tenants", json=tenant_body(p1["id"], "U2", email="t2@example.com")).json()
    add_payment(client, t1["id"], 10000)
    add_payment(client, t2["id"], 8000)
    add_payment(client, t2["id"], 8000, "Overdue")

    mine = client.get(f"/api/payments?tenant_id={t2['id']}").json()
    assert len(mine) == 2
    assert {p["tenant_id"] for p in mine} == {t2["id"]}
    assert len(client.get("/api/payments").json()) == 3


def test_expense_update_rejects_blank_fields(client, p1):
    expense = client.post("/api/expenses", json={
        "property_id": p1["id"], "category": "Repairs", "description": "Plumbing",
        "amount": 2500, "expense_date": TODAY.isoformat(),
    }).json()

    response = client.put(f"/api/expenses/{expense['id']}", json={"category": "   "})
    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "category"
    assert client.get(f"/api/expenses/{expense['id']}").json()["category"] == "Repairs"

    response = client.put(f"/api/expenses/{expense['id']}", json={"description": " Roof leak "})
    assert response.json()["description"] == "Roof leak"


def test_deposit_refund_lifecycle(client, p1):
    tenant = client.post("/api/tenants", json=tenant_body(p1["id"], "U1")).json()

    response = client.post("/api/deposits", json={
        "tenant_id": tenant["id"], "amount": 20000, "deposit_date": TODAY.isoformat(),
    })
    assert response.status_code == 201, response.text
    deposit = response.json()
    assert deposit["status"] == "Held"
    assert deposit["landlord_id"] == "landlord-1"
    assert deposit["held_amount"] == 20000

    refund_url = f"/api/deposits/{deposit['id']}/refund"
    partial = client.post(refund_url, json={"amount": 5000}).json()
    assert partial["status"] == "Partially Refunded"
    assert partial["held_amount"] == 15000
    assert client.get("/api/reports/landlord/landlord-1").json()["deposits_held"] == 15000
    assert client.get("/api/reports/tax/landlord-1").json()["deposits_held"] == 15000

    assert client.post(refund_url, json={"amount": 20000}).status_code == 400

    full = client.post(refund_url).json()
    assert full["status"] == "Refunded"
    assert full["refunded_amount"] == 20000
    assert full["held_amount"] == 0

    assert client.post(refund_url).status_code == 409
    assert client.get("/api/deposits?status=Refunded").json()[0]["id"] == deposit["id"]
    assert client.get("/api/deposits?status=Held").json() == []


def test_deposit_requires_existing_tenant(client):
    response = client.post("/api/deposits", json={
        "tenant_id": str(uuid.uuid4()), "amount": 20000, "deposit_date": TODAY.isoformat(),
    })
    assert response.status_code == 404
    assert client.post(f"/api/deposits/{uuid.uuid4()}/refund").status_code == 404


def test_audit_log_records_committed_actions(client, p1):
    tenant = client.post("/api/tenants", json=tenant_body(p1["id"], "U1")).json()
    add_payment(client, tenant["id"], 10000)
    rejected = client.post("/api/tenants", json=tenant_body(p1["id"], "U1", email="t2@example.com"))
    assert rejected.status_code == 409
    client.delete(f"/api/tenants/{tenant['id']}")

    entries = client.get("/api/audit?landlord_id=landlord-1").json()

    assert [e["action"] for e in entries] == [
        "tenant.deleted", "payment.recorded", "tenant.created", "property.created",
    ]
    assert entries[0]["message"] == "Deleted tenant: Jane Wanjiku"
    assert entries[2]["entity_id"] == tenant["id"]
    assert client.get("/api/audit?landlord_id=nobody").json() == []
    assert len(client.get("/api/audit?limit=1").json()) == 1
