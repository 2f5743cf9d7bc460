from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    APP_TITLE: str = "Splitledger"
    LEDGER_DIR: str = "."
    LEDGER_FILE: str = "ledger.txt"
    DATABASE_URL: str = "sqlite:///splitledger.db"
    LOG_LEVEL: str = "WARNING"

    class Config:
        env_file = ".env"
        env_prefix = "SPLITLEDGER_"

settings = Settings()
