from pathlib import Path, PurePath
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from splitledger.core.config import settings
from splitledger.core.dependencies import get_ledger
from splitledger.db.session import get_db
from splitledger.schemas.storage import StorageRequest, StorageOut
from splitledger.services.ledger_store import LedgerStore
from splitledger.services.persistence import save_ledger, load_ledger
from splitledger.services.snapshot_services import save_snapshot, load_snapshot

router = APIRouter()

def _resolve_path(raw: Optional[str]) -> Path:
    """
    Client paths are relative names inside LEDGER_DIR, never anywhere else.
    """
    name = PurePath(raw or settings.LEDGER_FILE)

    if not name.parts or name.is_absolute() or name.anchor or ".." in name.parts:
        raise HTTPException(400, "Path must be relative to the ledger directory")

    base = Path(settings.LEDGER_DIR).resolve()
    full = (base / name).resolve()

    if not full.is_relative_to(base):
        raise HTTPException(400, "Path must be relative to the ledger directory")

    return full

def _summary(status: str, ledger: LedgerStore, path=None) -> StorageOut:
    return StorageOut(status=status, users=len(ledger.users), expenses=len(ledger.expenses), path=path)

@router.post("/save", response_model=StorageOut)
def save_file(data: StorageRequest, ledger: LedgerStore = Depends(get_ledger)):
    save_ledger(ledger, _resolve_path(data.path))
    return _summary("saved", ledger, data.path or settings.LEDGER_FILE)

@router.post("/load", response_model=StorageOut)
def load_file(data: StorageRequest, ledger: LedgerStore = Depends(get_ledger)):
    load_ledger(ledger, _resolve_path(data.path))
    return _summary("loaded", ledger, data.path or settings.LEDGER_FILE)

@router.post("/snapshot/save", response_model=StorageOut)
def save_db(ledger: LedgerStore = Depends(get_ledger), db: Session = Depends(get_db)):
    save_snapshot(db, ledger)
    return _summary("saved", ledger)

@router.post("/snapshot/load", response_model=StorageOut)
def load_db(ledger: LedgerStore = Depends(get_ledger), db: Session = Depends(get_db)):
    load_snapshot(db, ledger)
    return _summary("loaded", ledger)
