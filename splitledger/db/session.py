from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from splitledger.core.config import settings

Base = declarative_base()

engine = create_engine(
    settings.DATABASE_URL,
    echo=False,
    pool_pre_ping=True
)

SessionLocal = sessionmaker(
    bind=engine,
    expire_on_commit=False
)


def init_db(bind=engine):
    # models must be imported so their tables are registered on Base
    from splitledger.models import ledger_user, ledger_expense  # noqa: F401

    Base.metadata.create_all(bind=bind)


def get_db():
    with SessionLocal() as session:
        yield session
