from fastapi import APIRouter, Depends
from splitledger.core.dependencies import get_ledger
from splitledger.schemas.balances import LedgerBalanceOut
from splitledger.schemas.settlements import Settlement
from splitledger.services.ledger_store import LedgerStore

router = APIRouter()

@router.get("/balances", response_model=LedgerBalanceOut)
def get_balances(ledger: LedgerStore = Depends(get_ledger)):
    net = ledger.get_balances()
    return LedgerBalanceOut(net=net, settlements=ledger.get_settlement())

@router.get("/settlements", response_model=list[Settlement])
def get_settlements(ledger: LedgerStore = Depends(get_ledger)):
    return ledger.get_settlement()
