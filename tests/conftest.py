"""Shared fixtures: isolated SQLite store per test, app client over https, hub token factory."""

import time

import pytest
from fastapi.testclient import TestClient
from jose import jwt
from sqlalchemy.orm import sessionmaker

from valencio.config import settings
from valencio.database import build_engine, get_db, init_db
from valencio.main import app

BASE_URL = "https://testserver"
HUB_SECRET = "hub-test-secret"
ADMIN_PIN = "1234"


@pytest.fixture(autouse=True)
def _test_settings(monkeypatch):
    monkeypatch.setattr(settings, "ADMIN_PIN", ADMIN_PIN)
    monkeypatch.setattr(settings, "ADMIN_PIN_HASH", "")
    monkeypatch.setattr(settings, "COOKIE_SECRET", "cookie-test-secret")
    monkeypatch.setattr(settings, "HUB_JWT_SECRET", HUB_SECRET)
    monkeypatch.setattr(settings, "HUB_VERIFY_SIGNATURE", False)


@pytest.fixture()
def session_factory(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'store.db'}")
    init_db(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture()
def client(session_factory):
    def _get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _get_db
    # Secure cookies are only replayed over https
    yield TestClient(app, base_url=BASE_URL)
    app.dependency_overrides.clear()


@pytest.fixture()
def make_token():
    """Build a hub token. exp_in is seconds from now; None leaves exp out."""

    def _make(role="admin", exp_in=3600, secret=HUB_SECRET, **claims):
        payload = dict(claims)
        if role is not None:
            payload["role"] = role
        if exp_in is not None:
            payload["exp"] = int(time.time()) + exp_in
        return jwt.encode(payload, secret, algorithm="HS256")

    return _make


@pytest.fixture()
def admin_client(client, make_token):
    r = client.post("/api/auth/activate", json={"token": make_token(), "pin": ADMIN_PIN})
    assert r.status_code == 200
    return client
