from sqlalchemy import text
from sqlalchemy.orm import Session
from splitledger.services.balance_service import is_settled
from splitledger.services.snapshot_services import snapshot_counts

def check_db_service(bind):
    try:
        with bind.connect() as conn:
            conn.execute(text("SELECT 1"))
        return {"db": True, "message": "Database is connected"}
    except Exception as e:
        return {"db": False, "error": str(e)}

def system_health():
    return {
        "status": "ok"
    }

def system_metrics(ledger, db: Session):
    return {
        "users": len(ledger.users),
        "expenses": len(ledger.expenses),
        "settled": is_settled(ledger.get_balances()),
        "snapshot": snapshot_counts(db)
    }
