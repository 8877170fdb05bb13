import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from projex.config import settings
from projex.database import Base, get_db
from projex.main import app

TEST_DB_URL = "sqlite:///./test_projex.db"
OWNER_EMAIL = "owner@x.com"
OTHER_EMAIL = "other@x.com"
PASSWORD = "pw123"

# 테스트에서는 최소 work factor 로 해싱 시간을 줄인다.
settings.BCRYPT_ROUNDS = 4

engine = create_engine(TEST_DB_URL, connect_args={"check_same_thread": False})
TestingSession = sessionmaker(autoflush=False, bind=engine)


def override_get_db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def owner_headers(client):
    register(client, OWNER_EMAIL)
    return auth_headers(client, OWNER_EMAIL)


@pytest.fixture
def other_headers(client):
    register(client, OTHER_EMAIL)
    return auth_headers(client, OTHER_EMAIL)


@pytest.fixture
def project(client, owner_headers):
    return create_project(client, owner_headers, name="Launch")


def register(client, email: str, password: str = PASSWORD):
    resp = client.post("/api/auth/register", json={"email": email, "password": password})
    assert resp.status_code == 201, resp.text
    return resp


def get_token(client, email: str, password: str = PASSWORD) -> str:
    resp = client.post("/api/auth/login", json={"email": email, "password": password})
    assert resp.status_code == 200, resp.text
    return resp.json()["access_token"]


def auth_headers(client, email: str, password: str = PASSWORD) -> dict:
    return {"Authorization": f"Bearer {get_token(client, email, password)}"}


def create_project(client, headers: dict, **fields) -> dict:
    resp = client.post("/api/projects", json=fields, headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()
