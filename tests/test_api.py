import pytest
from fastapi.testclient import TestClient
from splitledger.core.config import settings
from splitledger.db.session import get_db
from splitledger.main import app
from splitledger.services.ledger_store import LedgerStore


@pytest.fixture
def client(session_factory):
    def override_get_db():
        with session_factory() as session:
            yield session

    app.state.ledger = LedgerStore()
    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def ledger_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "LEDGER_DIR", str(tmp_path))
    return tmp_path


@pytest.fixture
def abc(client):
    for name in ("A", "B", "C"):
        res = client.post("/api/v1/users/", json={"name": name})
        assert res.status_code == 201
    return client


def test_root(client):
    assert client.get("/").json() == {"message": "Splitledger is live"}


def test_register_and_list_users(abc):
    res = abc.get("/api/v1/users/")

    assert res.status_code == 200
    assert res.json() == [{"name": "A"}, {"name": "B"}, {"name": "C"}]


def test_blank_user_name_rejected(client):
    res = client.post("/api/v1/users/", json={"name": "   "})

    assert res.status_code == 422


def test_get_unknown_user(client):
    res = client.get("/api/v1/users/ghost")

    assert res.status_code == 404


def test_equal_expense_and_settlement(abc):
    res = abc.post("/api/v1/expenses/equal", json={
        "payer": "A", "amount": 90, "participants": ["A", "B", "C"]
    })
    assert res.status_code == 201
    assert res.json()["shares"] == {"A": 30.0, "B": 30.0, "C": 30.0}

    balances = abc.get("/api/v1/balances").json()
    assert balances["net"] == {"A": 60.0, "B": -30.0, "C": -30.0}

    settlements = abc.get("/api/v1/settlements").json()
    assert sorted((s["from_user"], s["to_user"], s["amount"]) for s in settlements) == [
        ("B", "A", 30.0),
        ("C", "A", 30.0),
    ]

    assert abc.get("/api/v1/users/A").json() == {"name": "A", "balance": 60.0}


def test_exact_expense(abc):
    res = abc.post("/api/v1/expenses/exact", json={
        "payer": "B",
        "amount": 50,
        "shares": [{"name": "A", "amount": 20}, {"name": "C", "amount": 30}],
    })

    assert res.status_code == 201
    assert len(abc.get("/api/v1/expenses/").json()) == 1


def test_ledger_errors_map_to_400(abc):
    res = abc.post("/api/v1/expenses/exact", json={
        "payer": "Z", "amount": 10, "shares": [{"name": "A", "amount": 10}]
    })

    assert res.status_code == 400
    assert res.json() == {"detail": "Unknown payer: Z", "kind": "UnknownUser"}
    assert abc.get("/api/v1/expenses/").json() == []


def test_share_mismatch(abc):
    res = abc.post("/api/v1/expenses/exact", json={
        "payer": "A", "amount": 10, "shares": [{"name": "B", "amount": 9}]
    })

    assert res.status_code == 400
    assert res.json()["kind"] == "ShareMismatch"


def test_empty_participants(abc):
    res = abc.post("/api/v1/expenses/equal", json={
        "payer": "A", "amount": 10, "participants": []
    })

    assert res.json()["kind"] == "EmptyParticipants"


def test_non_positive_amount_rejected(abc):
    res = abc.post("/api/v1/expenses/equal", json={
        "payer": "A", "amount": -5, "participants": ["B"]
    })

    assert res.status_code == 422


def test_file_save_and_load(abc, ledger_dir):
    abc.post("/api/v1/expenses/equal", json={"payer": "A", "amount": 90, "participants": ["A", "B", "C"]})
    path = "ledger.txt"

    res = abc.post("/api/v1/storage/save", json={"path": path})
    assert res.json() == {"status": "saved", "users": 3, "expenses": 1, "path": path}

    app.state.ledger = LedgerStore()
    res = abc.post("/api/v1/storage/load", json={"path": path})
    assert res.json()["expenses"] == 1
    assert abc.get("/api/v1/balances").json()["net"] == {"A": 60.0, "B": -30.0, "C": -30.0}
    assert (ledger_dir / "ledger.txt").exists()


def test_load_missing_file(client, ledger_dir):
    res = client.post("/api/v1/storage/load", json={"path": "missing.txt"})

    assert res.status_code == 400
    assert res.json()["kind"] == "FileUnavailable"


@pytest.mark.parametrize("path", ["/etc/passwd", "../outside.txt", "nested/../../outside.txt", "."])
def test_storage_paths_stay_inside_ledger_dir(abc, ledger_dir, path):
    save = abc.post("/api/v1/storage/save", json={"path": path})
    load = abc.post("/api/v1/storage/load", json={"path": path})

    assert save.status_code == 400
    assert load.status_code == 400
    assert not (ledger_dir.parent / "outside.txt").exists()
    assert len(app.state.ledger.users) == 3


def test_default_file_lands_in_ledger_dir(abc, ledger_dir):
    res = abc.post("/api/v1/storage/save", json={})

    assert res.json()["path"] == settings.LEDGER_FILE
    assert (ledger_dir / settings.LEDGER_FILE).exists()


def test_snapshot_save_and_load(abc):
    abc.post("/api/v1/expenses/equal", json={"payer": "B", "amount": 30, "participants": ["C"]})

    assert abc.post("/api/v1/storage/snapshot/save").json()["expenses"] == 1

    app.state.ledger = LedgerStore()
    res = abc.post("/api/v1/storage/snapshot/load")

    assert res.json() == {"status": "loaded", "users": 3, "expenses": 1, "path": None}
    assert abc.get("/api/v1/balances").json()["net"] == {"A": 0.0, "B": 30.0, "C": -30.0}


def test_system_routes(abc):
    assert abc.get("/api/v1/system/health").json() == {"status": "ok"}
    assert abc.get("/api/v1/system/health/db").json()["db"] is True

    metrics = abc.get("/api/v1/system/metrics").json()
    assert metrics == {
        "users": 3,
        "expenses": 0,
        "settled": True,
        "snapshot": {"users": 0, "expenses": 0},
    }
