"""
Tests for transaction endpoints.
"""
from datetime import date
from decimal import Decimal


def _create(client, headers, **fields):
    payload = {"source": "YouTube Ad Revenue", "amount": 150.50, "type": "income"}
    payload.update(fields)
    response = client.post("/api/transactions", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["transaction"]


def test_create_transaction(client, auth_headers):
    """Test transaction creation with defaults."""
    headers = auth_headers()
    response = client.post(
        "/api/transactions",
        json={"source": "Sponsorship", "amount": 1200, "type": "income"},
        headers=headers
    )
    assert response.status_code == 201
    data = response.json()
    assert data["message"] == "Transaction added successfully"
    transaction = data["transaction"]
    assert transaction["source"] == "Sponsorship"
    assert Decimal(transaction["amount"]) == Decimal("1200.00")
    assert transaction["status"] == "completed"
    assert transaction["date"] == date.today().isoformat()


def test_create_then_list_round_trip(client, auth_headers):
    headers = auth_headers()
    created = _create(
        client, headers,
        source="Camera Lens", amount=849.99, type="expense",
        date="2025-10-05", status="pending", description="Wide angle"
    )

    listed = client.get("/api/transactions", headers=headers).json()
    assert len(listed) == 1
    assert listed[0] == created
    assert listed[0]["amount"] == "849.99"
    assert listed[0]["description"] == "Wide angle"


def test_create_transaction_missing_fields(client, auth_headers):
    headers = auth_headers()
    for payload in (
        {"amount": 10, "type": "income"},
        {"source": "Tips", "type": "income"},
        {"source": "Tips", "amount": 10},
        {"source": "", "amount": 10, "type": "income"},
    ):
        response = client.post("/api/transactions", json=payload, headers=headers)
        assert response.status_code == 400, payload


def test_create_transaction_invalid_values(client, auth_headers):
    headers = auth_headers()
    for payload in (
        {"source": "Tips", "amount": 10, "type": "gift"},
        {"source": "Tips", "amount": -5, "type": "income"},
        {"source": "Tips", "amount": 0, "type": "income"},
        {"source": "Tips", "amount": 10.555, "type": "income"},
        {"source": "Tips", "amount": 10, "type": "income", "status": "lost"},
    ):
        response = client.post("/api/transactions", json=payload, headers=headers)
        assert response.status_code == 400, payload


def test_list_newest_first_and_limit(client, auth_headers):
    headers = auth_headers()
    for day in ("2025-01-10", "2025-03-10", "2025-02-10"):
        _create(client, headers, date=day)

    listed = client.get("/api/transactions", headers=headers).json()
    assert [t["date"] for t in listed] == ["2025-03-10", "2025-02-10", "2025-01-10"]

    limited = client.get("/api/transactions?limit=2", headers=headers).json()
    assert [t["date"] for t in limited] == ["2025-03-10", "2025-02-10"]


def test_list_default_limit_is_ten(client, auth_headers):
    headers = auth_headers()
    for day in range(1, 13):
        _create(client, headers, date=f"2025-05-{day:02d}")

    assert len(client.get("/api/transactions", headers=headers).json()) == 10
    assert len(client.get("/api/transactions?limit=100", headers=headers).json()) == 12


def test_list_invalid_limit(client, auth_headers):
    headers = auth_headers()
    assert client.get("/api/transactions?limit=0", headers=headers).status_code == 400


def test_update_transaction(client, auth_headers):
    """Test transaction update."""
    headers = auth_headers()
    created = _create(client, headers)

    response = client.put(
        f"/api/transactions/{created['id']}",
        json={
            "source": "Patreon",
            "amount": 99.5,
            "type": "income",
            "date": "2025-09-01",
            "status": "cancelled"
        },
        headers=headers
    )
    assert response.status_code == 200
    updated = response.json()["transaction"]
    assert updated["source"] == "Patreon"
    assert updated["amount"] == "99.50"
    assert updated["status"] == "cancelled"
    assert updated["date"] == "2025-09-01"


def test_partial_update_keeps_other_fields(client, auth_headers):
    headers = auth_headers()
    created = _create(client, headers, date="2025-04-04")

    response = client.put(
        f"/api/transactions/{created['id']}",
        json={"status": "pending"},
        headers=headers
    )
    assert response.status_code == 200
    updated = response.json()["transaction"]
    assert updated["status"] == "pending"
    assert updated["source"] == created["source"]
    assert updated["amount"] == created["amount"]
    assert updated["date"] == "2025-04-04"


def test_delete_transaction(client, auth_headers):
    """Test transaction deletion."""
    headers = auth_headers()
    created = _create(client, headers)

    response = client.delete(f"/api/transactions/{created['id']}", headers=headers)
    assert response.status_code == 200
    assert response.json() == {"message": "Transaction deleted successfully"}
    assert client.get("/api/transactions", headers=headers).json() == []

    again = client.delete(f"/api/transactions/{created['id']}", headers=headers)
    assert again.status_code == 404


def test_other_users_transactions_are_invisible(client, auth_headers):
    alice = auth_headers(email="alice@example.com", name="Alice")
    bob = auth_headers(email="bob@example.com", name="Bob")
    alice_tx = _create(client, alice, source="Alice Merch")

    assert client.get("/api/transactions", headers=bob).json() == []

    update = client.put(
        f"/api/transactions/{alice_tx['id']}",
        json={"source": "Stolen"},
        headers=bob
    )
    delete = client.delete(f"/api/transactions/{alice_tx['id']}", headers=bob)
    assert update.status_code == 404
    assert delete.status_code == 404

    listed = client.get("/api/transactions", headers=alice).json()
    assert listed == [alice_tx]


def test_not_owned_and_missing_are_indistinguishable(client, auth_headers):
    alice = auth_headers(email="alice@example.com", name="Alice")
    bob = auth_headers(email="bob@example.com", name="Bob")
    alice_tx = _create(client, alice)

    not_owned = client.put(f"/api/transactions/{alice_tx['id']}", json={"status": "pending"}, headers=bob)
    missing = client.put("/api/transactions/999999", json={"status": "pending"}, headers=bob)
    assert not_owned.status_code == missing.status_code == 404
    assert not_owned.json() == missing.json() == {"message": "Transaction not found"}

    not_owned = client.delete(f"/api/transactions/{alice_tx['id']}", headers=bob)
    missing = client.delete("/api/transactions/999999", headers=bob)
    assert not_owned.status_code == missing.status_code == 404
    assert not_owned.json() == missing.json()


def test_user_id_in_body_is_ignored(client, auth_headers, register):
    victim = register(email="victim@example.com", name="Victim")["user"]
    headers = auth_headers(email="attacker@example.com", name="Attacker")

    created = _create(client, headers, user_id=victim["id"])
    assert created["user_id"] != victim["id"]


def test_list_limit_too_large(client, auth_headers):
    headers = auth_headers()
    response = client.get("/api/transactions?limit=99999999999999999999", headers=headers)
    assert response.status_code == 400
    assert "limit" in response.json()["message"]
