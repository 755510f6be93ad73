from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    DB_URL: str = "sqlite+aiosqlite:///./item_database.db"
    DB_ECHO: bool = False

    LOG_LEVEL: str = "INFO"
    CURRENCY_SYMBOL: str = "$"

    class Config:
        env_file = ".env"

settings = Settings()
