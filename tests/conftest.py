# tests/conftest.py
import os
import tempfile

# konfiguracja przed importem virtual_art (settings czyta env przy imporcie)
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["CELERY_TASK_ALWAYS_EAGER"] = "true"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="virtual_art_uploads_")
os.environ["DEFAULT_ADMIN_EMAIL"] = "admin@example.com"
os.environ["DEFAULT_ADMIN_PASSWORD"] = "admin123"

import pytest
from unittest.mock import MagicMock
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import virtual_art.data.models  # noqa: F401
from virtual_art.data.database import Base, get_db
from virtual_art.main import create_app
from virtual_art.services.lock_service import get_lock_service
from virtual_art.services.notification_service import NotificationService, get_notification_service
from virtual_art.services.user_service import UserService

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "admin123"

ADDRESS = {
    "firstName": "Jan",
    "lastName": "Kowalski",
    "email": "jan@example.com",
    "phone": "123456789",
    "street": "Dluga 1",
    "city": "Krakow",
    "state": "Malopolska",
    "zipCode": "30-001",
    "country": "Poland",
}


class FakeLockService:
    """Lock checkoutu w pamieci, ta sama semantyka co SET NX."""

    def __init__(self):
        self.held = set()
        self.acquired = []

    def acquire_checkout_lock(self, user_id, token, ttl=30):
        if user_id in self.held:
            return False
        self.held.add(user_id)
        self.acquired.append(user_id)
        return True

    def release_checkout_lock(self, user_id, token):
        self.held.discard(user_id)
        return True


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def lock_service():
    return FakeLockService()


@pytest.fixture
def notifications():
    return MagicMock(spec=NotificationService)


@pytest.fixture
def app(session_factory, lock_service, notifications):
    seed = session_factory()
    try:
        UserService(seed).ensure_default_admin(ADMIN_EMAIL, ADMIN_PASSWORD)
    finally:
        seed.close()

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app = create_app(with_lifespan=False)
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_lock_service] = lambda: lock_service
    app.dependency_overrides[get_notification_service] = lambda: notifications
    return app


@pytest.fixture
def client(app):
    return TestClient(app)


def auth(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def register(client):
    """Rejestruje konto i zwraca {id, token, headers}."""

    def _register(email, user_type="user", password="secret123", **extra):
        resp = client.post(
            "/api/auth/register",
            json={
                "email": email,
                "password": password,
                "full_name": email.split("@")[0].title(),
                "user_type": user_type,
                **extra,
            },
        )
        assert resp.status_code == 201, resp.text
        data = resp.json()
        return {"id": data["user"]["id"], "token": data["token"], "headers": auth(data["token"])}

    return _register


@pytest.fixture
def admin(client):
    resp = client.post("/api/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert resp.status_code == 200, resp.text
    data = resp.json()
    return {"id": data["user"]["id"], "token": data["token"], "headers": auth(data["token"])}


@pytest.fixture
def artist(register):
    return register("artist@example.com", user_type="artist")


@pytest.fixture
def buyer(register):
    return register("buyer@example.com")


@pytest.fixture
def publish_artwork(client, artist, admin):
    """Tworzy dzielo artysty i zatwierdza je jako admin."""

    def _publish(title="Sunset", price=500, category="painting"):
        resp = client.post(
            "/api/artworks/",
            json={"title": title, "category": category, "price": price, "image_url": f"/img/{title}.jpg"},
            headers=artist["headers"],
        )
        assert resp.status_code == 201, resp.text
        artwork_id = resp.json()["id"]
        resp = client.put(f"/api/artworks/{artwork_id}", json={"status": "published"}, headers=admin["headers"])
        assert resp.status_code == 200, resp.text
        return resp.json()

    return _publish


@pytest.fixture
def address_payload():
    return dict(ADDRESS)


@pytest.fixture
def buyer_address(client, buyer, address_payload):
    resp = client.post("/api/address/add", json=address_payload, headers=buyer["headers"])
    assert resp.status_code == 200, resp.text
    return resp.json()["address"]
