"""
Helpers shared by the test modules.
"""
from app.core.config import Settings
from app.core.security import create_access_token, get_password_hash
from app.db.session import init_db
from app.main import create_app
from app.models.user import User

PASSWORD = "testpassword123"
# bcrypt is slow; hash once for every fixture user
PASSWORD_HASH = get_password_hash(PASSWORD)


def make_settings(**overrides) -> Settings:
    values = {
        "DATABASE_URL": "sqlite://",
        "SECRET_KEY": "test-secret",
        "LOG_LEVEL": "WARNING",
    }
    values.update(overrides)
    return Settings(**values)


def make_app(settings: Settings):
    application = create_app(settings)
    init_db(application.state.engine)
    return application


def create_user(db, username: str) -> User:
    user = User(
        username=username,
        email=f"{username}@example.com",
        hashed_password=PASSWORD_HASH
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def bearer(user: User, settings: Settings) -> dict:
    token = create_access_token({"sub": user.username, "user_id": user.id}, settings)
    return {"Authorization": f"Bearer {token}"}


def trip_payload(**overrides) -> dict:
    payload = {
        "name": "Ski Weekend",
        "start_date": "2025-01-10",
        "end_date": "2025-01-12",
    }
    payload.update(overrides)
    return payload


def create_trip(client, headers, **overrides) -> dict:
    response = client.post("/api/trips", json=trip_payload(**overrides), headers=headers)
    assert response.status_code == 201, response.text
    return response.json()
