"""
Tests for authentication endpoints and the bearer token dependency.
"""
from datetime import timedelta
from app.core.security import create_access_token
from app.tests.utils import PASSWORD, make_settings


def test_signup(client):
    """Test user signup."""
    response = client.post(
        "/api/auth/signup",
        json={
            "username": "testuser",
            "email": "test@example.com",
            "password": "testpassword123"
        }
    )
    assert response.status_code == 201
    assert response.json()["username"] == "testuser"
    assert "hashed_password" not in response.json()


def test_signup_duplicate_username(client, alice):
    response = client.post(
        "/api/auth/signup",
        json={"username": "alice", "email": "other@example.com", "password": "x"}
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Username already exists"


def test_signup_missing_field_is_bad_request(client):
    response = client.post("/api/auth/signup", json={"username": "nopass"})
    assert response.status_code == 400


def test_login(client, alice):
    """Test user login."""
    response = client.post(
        "/api/auth/login",
        json={"username": "alice", "password": PASSWORD}
    )
    assert response.status_code == 200
    body = response.json()
    assert body["token_type"] == "bearer"

    me = client.get("/api/users/me", headers={"Authorization": f"Bearer {body['access_token']}"})
    assert me.status_code == 200
    assert me.json()["username"] == "alice"


def test_login_invalid_credentials(client, alice):
    """Test login with invalid credentials."""
    response = client.post(
        "/api/auth/login",
        json={"username": "alice", "password": "wrongpassword"}
    )
    assert response.status_code == 401

    response = client.post(
        "/api/auth/login",
        json={"username": "nonexistent", "password": "wrongpassword"}
    )
    assert response.status_code == 401


def test_login_inactive_user(client, db, alice):
    alice.is_active = False
    db.commit()
    response = client.post(
        "/api/auth/login",
        json={"username": "alice", "password": PASSWORD}
    )
    assert response.status_code == 403


def test_missing_token_rejected(client):
    response = client.get("/api/users/me")
    assert response.status_code == 401
    assert response.json()["detail"] == "Not authenticated"
    assert response.headers["www-authenticate"] == "Bearer"


def test_non_bearer_scheme_rejected(client, alice_headers):
    token = alice_headers["Authorization"].split(" ", 1)[1]
    response = client.get("/api/users/me", headers={"Authorization": f"Token {token}"})
    assert response.status_code == 401


def test_expired_token_rejected(client, alice, settings):
    token = create_access_token(
        {"sub": alice.username, "user_id": alice.id},
        settings,
        expires_delta=timedelta(seconds=-10)
    )
    response = client.get("/api/users/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid token"


def test_token_signed_with_other_secret_rejected(client, alice):
    forged = create_access_token(
        {"sub": alice.username, "user_id": alice.id},
        make_settings(SECRET_KEY="someone-elses-secret")
    )
    response = client.get("/api/users/me", headers={"Authorization": f"Bearer {forged}"})
    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid token"


def test_token_for_deleted_user_rejected(client, db, alice, alice_headers):
    db.delete(alice)
    db.commit()
    response = client.get("/api/users/me", headers=alice_headers)
    assert response.status_code == 401
    assert response.json()["detail"] == "User not found"


def test_get_user_by_id(client, alice_headers, bob):
    response = client.get(f"/api/users/{bob.id}", headers=alice_headers)
    assert response.status_code == 200
    assert response.json()["username"] == "bob"

    response = client.get("/api/users/9999", headers=alice_headers)
    assert response.status_code == 404
