from fastapi import APIRouter, Depends
from splitledger.core.dependencies import get_ledger, ensure_user
from splitledger.schemas.user import UserCreate, UserOut, UserBalanceOut
from splitledger.services.ledger_store import LedgerStore

router = APIRouter()

@router.post("/", response_model=UserOut, status_code=201)
def add_user(data: UserCreate, ledger: LedgerStore = Depends(get_ledger)):
    ledger.register_user(data.name)
    return UserOut(name=data.name)

@router.get("/", response_model=list[UserOut])
def list_users(ledger: LedgerStore = Depends(get_ledger)):
    return [UserOut(name=u) for u in ledger.users]

@router.get("/{name}", response_model=UserBalanceOut)
def get_user(name: str, ledger: LedgerStore = Depends(get_ledger)):
    ensure_user(ledger, name)
    return UserBalanceOut(name=name, balance=ledger.get_balances()[name])
