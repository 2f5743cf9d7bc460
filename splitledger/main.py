import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from splitledger.api.v1.routes.expense import router as expense_router
from splitledger.api.v1.routes.settlement import router as settlement_router
from splitledger.api.v1.routes.storage import router as storage_router
from splitledger.api.v1.routes.system import router as system_router
from splitledger.api.v1.routes.user import router as user_router
from splitledger.core.config import settings
from splitledger.core.exceptions import LedgerError
from splitledger.db.session import init_db
from splitledger.services.ledger_store import LedgerStore

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("Splitledger : database tables ready")
    yield

app = FastAPI(title=settings.APP_TITLE, lifespan=lifespan)

# one ledger per process
app.state.ledger = LedgerStore()

@app.exception_handler(LedgerError)
async def ledger_error_handler(request: Request, exc: LedgerError):
    return JSONResponse(
        status_code=400,
        content={"detail": exc.message, "kind": exc.kind.value}
    )

@app.get("/")
async def root():
    return {"message": "Splitledger is live"}

app.include_router(system_router, prefix="/api/v1/system")
app.include_router(user_router, prefix="/api/v1/users")
app.include_router(expense_router, prefix="/api/v1/expenses")
app.include_router(settlement_router, prefix="/api/v1")
app.include_router(storage_router, prefix="/api/v1/storage")

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, port=8000)
