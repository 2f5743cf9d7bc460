from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from splitledger.core.dependencies import get_ledger
from splitledger.db.session import get_db
from splitledger.services.ledger_store import LedgerStore
from splitledger.services.system_services import check_db_service, system_metrics, system_health

router = APIRouter()

@router.get("/health/db")
def check_db(db: Session = Depends(get_db)):
    return check_db_service(db.get_bind())

@router.get("/metrics")
def metrics(
    ledger: LedgerStore = Depends(get_ledger),
    db: Session = Depends(get_db)
):
    return system_metrics(ledger, db)

@router.get("/health")
def health():
    return system_health()
