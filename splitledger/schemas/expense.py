from pydantic import BaseModel, PositiveFloat
from typing import Dict, List

class Expense(BaseModel):
    payer: str
    amount: float
    shares: Dict[str, float]

    class Config:
        frozen = True

class EqualExpenseCreate(BaseModel):
    payer: str
    amount: PositiveFloat
    participants: List[str]

class ShareInput(BaseModel):
    name: str
    amount: float

class ExactExpenseCreate(BaseModel):
    payer: str
    amount: PositiveFloat
    shares: List[ShareInput]

class ExpenseOut(BaseModel):
    payer: str
    amount: float
    shares: Dict[str, float]

    class Config:
        from_attributes = True
