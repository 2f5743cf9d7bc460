import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from splitledger.db.session import init_db
from splitledger.services.ledger_store import LedgerStore


@pytest.fixture
def ledger():
    """Ledger with A, B and C registered and nothing recorded."""
    store = LedgerStore()
    for name in ("A", "B", "C"):
        store.register_user(name)
    return store


@pytest.fixture
def db_engine(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'ledger.db'}")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return sessionmaker(bind=db_engine, expire_on_commit=False)


@pytest.fixture
def db_session(session_factory):
    with session_factory() as session:
        yield session
