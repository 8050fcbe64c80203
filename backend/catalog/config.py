from pydantic_settings import BaseSettings
from typing import List, Literal

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./catalog.db"
    APP_HOST: str = "127.0.0.1"
    APP_PORT: int = 8000
    FRONTEND_ORIGINS: List[str] = ["http://localhost:3000"]
    # "sql" persists through SQLAlchemy, "memory" serves the fixture catalog
    REPOSITORY_BACKEND: Literal["sql", "memory"] = "sql"
    RESET_DB: bool = False
    SEED_DEMO_DATA: bool = True
    LOG_LEVEL: str = "INFO"
    SQL_ECHO: bool = False

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

settings = Settings()
