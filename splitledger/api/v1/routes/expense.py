from fastapi import APIRouter, Depends
from splitledger.core.dependencies import get_ledger
from splitledger.schemas.expense import EqualExpenseCreate, ExactExpenseCreate, ExpenseOut
from splitledger.services.ledger_store import LedgerStore

router = APIRouter()

@router.post("/equal", response_model=ExpenseOut, status_code=201)
def add_equal_expense(data: EqualExpenseCreate, ledger: LedgerStore = Depends(get_ledger)):
    return ledger.record_equal_expense(data.payer, data.amount, data.participants)

@router.post("/exact", response_model=ExpenseOut, status_code=201)
def add_exact_expense(data: ExactExpenseCreate, ledger: LedgerStore = Depends(get_ledger)):
    tokens = [(s.name, s.amount) for s in data.shares]
    return ledger.record_exact_expense(data.payer, data.amount, tokens)

@router.get("/", response_model=list[ExpenseOut])
def all_expenses(ledger: LedgerStore = Depends(get_ledger)):
    return ledger.expenses
