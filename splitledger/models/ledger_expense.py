from sqlalchemy import Column, Integer, String, Float, ForeignKey
from sqlalchemy.orm import relationship
from splitledger.db.session import Base

class LedgerExpense(Base):
    __tablename__ = "ledger_expenses"

    id = Column(Integer, primary_key=True, index=True)
    position = Column(Integer, nullable=False)
    payer = Column(String, nullable=False)
    amount = Column(Float, nullable=False)

    shares = relationship(
        "ExpenseShare",
        back_populates="expense",
        cascade="all, delete-orphan",
        order_by="ExpenseShare.id"
    )

class ExpenseShare(Base):
    __tablename__ = "ledger_expense_shares"

    id = Column(Integer, primary_key=True, index=True)
    expense_id = Column(Integer, ForeignKey("ledger_expenses.id", ondelete="CASCADE"), nullable=False)
    name = Column(String, nullable=False)
    amount = Column(Float, nullable=False)

    expense = relationship("LedgerExpense", back_populates="shares")
