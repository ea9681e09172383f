# tests/conftest.py

import os
import tempfile

# app.db 가 import 시점에 엔진을 만들기 때문에 app import 전에 설정
os.environ.setdefault("DATABASE_URL_OVERRIDE", "sqlite://")
os.environ.setdefault("UPLOAD_DIR", os.path.join(tempfile.mkdtemp(), "uploads"))
os.environ.setdefault("PHOTO_STORAGE", "local")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import Settings
from app.core.storage import LocalPhotoStorage
from app.db import get_db
from app.main import create_app
from app.models import Base

from .fakes import FakeIdentityProvider, TOKENS, bearer


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def identity_provider() -> FakeIdentityProvider:
    return FakeIdentityProvider(dict(TOKENS))


@pytest.fixture()
def photo_storage(tmp_path) -> LocalPhotoStorage:
    return LocalPhotoStorage(str(tmp_path / "uploads" / "pets"))


@pytest.fixture()
def app(session_factory, identity_provider, photo_storage, tmp_path):
    settings = Settings(
        DATABASE_URL_OVERRIDE="sqlite://",
        UPLOAD_DIR=str(tmp_path / "uploads" / "pets"),
        MAX_UPLOAD_BYTES=1024,
        LOG_LEVEL="WARNING",
    )
    app = create_app(
        settings=settings,
        identity_provider=identity_provider,
        photo_storage=photo_storage,
    )

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    return app


@pytest.fixture()
def client(app) -> TestClient:
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def alice(client) -> dict:
    """로그인까지 마친 사용자의 Authorization 헤더"""
    headers = bearer("alice-token")
    assert client.post("/api/auth/login", headers=headers).status_code == 200
    return headers


@pytest.fixture()
def bob(client) -> dict:
    headers = bearer("bob-token")
    assert client.post("/api/auth/login", headers=headers).status_code == 200
    return headers


@pytest.fixture()
def pet_id(client, alice) -> int:
    resp = client.post("/api/pets", headers=alice, data={"name": "Choco", "species": "canine"})
    assert resp.status_code == 201
    return resp.json()["pet"]["pet_id"]
