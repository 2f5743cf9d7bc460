from pydantic import BaseModel

class Settlement(BaseModel):
    from_user: str
    to_user: str
    amount: float

    class Config:
        frozen = True
