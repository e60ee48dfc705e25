import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine
from shamir_recovery.main import app
from shamir_recovery.models.reconstruction_record import ReconstructionRecord
from shamir_recovery.services.database_service import get_session

SAMPLE = {
    "keys": {"n": 4, "k": 3},
    "1": {"base": "10", "value": "4"},
    "2": {"base": "2", "value": "111"},
    "3": {"base": "10", "value": "12"},
    "6": {"base": "4", "value": "213"},
}

SHARE_SET = {
    "name": "quadratic",
    "n": 3,
    "k": 3,
    "shares": [
        {"index": 1, "base": 10, "value": "3"},
        {"index": 2, "base": "2", "value": "110"},
        {"index": 3, "base": 16, "value": "B"},
    ],
}


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    return engine


@pytest.fixture
def client(engine):
    def get_test_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = get_test_session
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_reconstruct_share_set(client, engine):
    resp = client.post("/reconstruct/", json=SHARE_SET)
    assert resp.status_code == 200
    body = resp.json()
    assert body["name"] == "quadratic"
    assert body["secret"] == "2"
    assert body["error_kind"] is None

    with Session(engine) as session:
        record = session.get(ReconstructionRecord, body["record_id"])
        assert record.secret == "2"
        assert record.threshold == 3


def test_reconstruct_document(client):
    resp = client.post("/reconstruct/document", params={"name": "input1"}, json=SAMPLE)
    assert resp.status_code == 200
    assert resp.json()["secret"] == "3"


def test_reconstruct_document_without_metadata(client):
    document = {k: v for k, v in SAMPLE.items() if k != "keys"}
    resp = client.post("/reconstruct/document", params={"name": "broken"}, json=document)
    assert resp.status_code == 422


def test_reconstruct_reports_invalid_digit(client):
    document = dict(SAMPLE, **{"2": {"base": "2", "value": "121"}})
    resp = client.post("/reconstruct/document", params={"name": "bad"}, json=document)
    assert resp.status_code == 200
    body = resp.json()
    assert body["secret"] is None
    assert body["error_kind"] == "invalid_digit"
    assert body["error"].startswith("share 2:")


def test_reconstruct_rejects_bad_schema(client):
    share_set = dict(SHARE_SET, k=0)
    resp = client.post("/reconstruct/", json=share_set)
    assert resp.status_code == 422


def test_batch_isolates_failures(client):
    short = dict(SHARE_SET, name="short", shares=SHARE_SET["shares"][:2])
    resp = client.post("/reconstruct/batch", json=[SHARE_SET, short])
    assert resp.status_code == 200
    first, second = resp.json()
    assert first["secret"] == "2"
    assert second["error_kind"] == "threshold_not_met"
    assert second["secret"] is None


def test_get_stored_reconstruction(client):
    created = client.post("/reconstruct/", json=SHARE_SET).json()
    resp = client.get(f"/reconstruct/{created['record_id']}")
    assert resp.status_code == 200
    assert resp.json() == created


def test_get_missing_reconstruction(client):
    resp = client.get("/reconstruct/999")
    assert resp.status_code == 404
