from fastapi import Request, HTTPException
from splitledger.services.ledger_store import LedgerStore

def get_ledger(request: Request) -> LedgerStore:
    ledger = getattr(request.app.state, "ledger", None)

    if ledger is None:
        raise HTTPException(status_code=503, detail="Ledger is not initialised")

    return ledger

def ensure_user(ledger: LedgerStore, name: str):
    if not ledger.is_user(name):
        raise HTTPException(404, f"User {name} does not exist")
