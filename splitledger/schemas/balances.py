from pydantic import BaseModel
from splitledger.schemas.settlements import Settlement

class LedgerBalanceOut(BaseModel):
    net: dict[str, float]
    settlements: list[Settlement]
