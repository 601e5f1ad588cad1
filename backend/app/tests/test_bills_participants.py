"""
Tests for bill and participant endpoints.
"""
from app.tests.utils import create_trip


def test_create_and_list_bills(client, alice, alice_headers, bob, bob_headers):
    trip = create_trip(client, alice_headers, participants=[bob.id])
    response = client.post(
        f"/api/trips/{trip['id']}/bills",
        json={"payer_id": bob.id, "amount": 42.5, "description": "Fuel"},
        headers=alice_headers
    )
    assert response.status_code == 201
    bill = response.json()
    assert bill["payer_id"] == bob.id
    assert bill["amount"] == 42.5

    # Listed participants can read
    response = client.get(f"/api/trips/{trip['id']}/bills", headers=bob_headers)
    assert response.status_code == 200
    assert [b["description"] for b in response.json()] == ["Fuel"]


def test_create_bill_negative_amount(client, alice, alice_headers):
    trip = create_trip(client, alice_headers)
    response = client.post(
        f"/api/trips/{trip['id']}/bills",
        json={"payer_id": alice.id, "amount": -5},
        headers=alice_headers
    )
    assert response.status_code == 400


def test_create_bill_unknown_payer(client, alice_headers):
    trip = create_trip(client, alice_headers)
    response = client.post(
        f"/api/trips/{trip['id']}/bills",
        json={"payer_id": 9999, "amount": 5},
        headers=alice_headers
    )
    assert response.status_code == 404
    assert response.json()["detail"] == "Payer not found"


def test_create_bill_requires_owner(client, alice_headers, bob, bob_headers):
    trip = create_trip(client, alice_headers, participants=[bob.id])
    response = client.post(
        f"/api/trips/{trip['id']}/bills",
        json={"payer_id": bob.id, "amount": 5},
        headers=bob_headers
    )
    assert response.status_code == 403


def test_create_bill_for_missing_trip(client, alice, alice_headers):
    response = client.post(
        "/api/trips/9999/bills",
        json={"payer_id": alice.id, "amount": 5},
        headers=alice_headers
    )
    assert response.status_code == 404
    assert response.json()["detail"] == "Trip not found"


def test_delete_bill(client, alice, alice_headers):
    trip = create_trip(client, alice_headers)
    bill = client.post(
        f"/api/trips/{trip['id']}/bills",
        json={"payer_id": alice.id, "amount": 5},
        headers=alice_headers
    ).json()

    response = client.delete(f"/api/trips/{trip['id']}/bills/{bill['id']}", headers=alice_headers)
    assert response.status_code == 200
    assert client.get(f"/api/trips/{trip['id']}/bills", headers=alice_headers).json() == []

    response = client.delete(f"/api/trips/{trip['id']}/bills/{bill['id']}", headers=alice_headers)
    assert response.status_code == 404
    assert response.json() == {"detail": "Bill not found"}


def test_add_and_list_participants(client, alice_headers, bob, carol):
    trip = create_trip(client, alice_headers)
    for user, paid, owed in [(bob, "10.25", "5"), (carol, "0", "5.25")]:
        response = client.post(
            f"/api/trips/{trip['id']}/participants",
            json={"user_id": user.id, "amount_paid": paid, "amount_owed": owed},
            headers=alice_headers
        )
        assert response.status_code == 201

    response = client.get(f"/api/trips/{trip['id']}/participants", headers=alice_headers)
    assert response.status_code == 200
    assert [(p["username"], p["amount_paid"], p["amount_owed"]) for p in response.json()] == [
        ("bob", 10.25, 5),
        ("carol", 0, 5.25),
    ]


def test_add_participant_twice(client, alice_headers, bob):
    trip = create_trip(client, alice_headers)
    url = f"/api/trips/{trip['id']}/participants"
    assert client.post(url, json={"user_id": bob.id}, headers=alice_headers).status_code == 201

    response = client.post(url, json={"user_id": bob.id}, headers=alice_headers)
    assert response.status_code == 400
    assert response.json()["detail"] == "User is already a participant"


def test_add_unknown_participant(client, alice_headers):
    trip = create_trip(client, alice_headers)
    response = client.post(
        f"/api/trips/{trip['id']}/participants", json={"user_id": 9999}, headers=alice_headers
    )
    assert response.status_code == 404


def test_remove_participant(client, alice_headers, bob, bob_headers):
    trip = create_trip(client, alice_headers, participants=[bob.id])
    url = f"/api/trips/{trip['id']}/participants"
    participant = client.post(url, json={"user_id": bob.id}, headers=alice_headers).json()

    assert client.delete(f"{url}/{participant['id']}", headers=bob_headers).status_code == 403
    assert client.delete(f"{url}/{participant['id']}", headers=alice_headers).status_code == 200
    assert client.delete(f"{url}/{participant['id']}", headers=alice_headers).status_code == 404
