from sqlalchemy import Column, Integer, String
from splitledger.db.session import Base

class LedgerUser(Base):
    __tablename__ = "ledger_users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True, nullable=False)
    position = Column(Integer, nullable=False)
