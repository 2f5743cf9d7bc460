from pydantic import BaseModel
from typing import Optional

class StorageRequest(BaseModel):
    path: Optional[str] = None

class StorageOut(BaseModel):
    status: str
    users: int
    expenses: int
    path: Optional[str] = None
