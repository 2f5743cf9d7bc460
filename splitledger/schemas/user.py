from pydantic import BaseModel, field_validator

class UserCreate(BaseModel):
    name: str

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v

class UserOut(BaseModel):
    name: str

class UserBalanceOut(UserOut):
    balance: float
