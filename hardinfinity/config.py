import os
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parents[1]
load_dotenv(ROOT_DIR / ".env")


class Settings:
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./hardinfinity.db")
    AUTO_CREATE_SCHEMA: bool = os.getenv("AUTO_CREATE_SCHEMA", "0") == "1"
    DB_POOL_TIMEOUT: int = int(os.getenv("DB_POOL_TIMEOUT", "30"))
    DB_STATEMENT_TIMEOUT_MS: int = int(os.getenv("DB_STATEMENT_TIMEOUT_MS", "15000"))
    AUTH_SECRET_KEY: str = os.getenv("AUTH_SECRET_KEY", "").strip()
    AUTH_ALGORITHM: str = os.getenv("AUTH_ALGORITHM", "HS256").strip()
    AUTH_AUDIENCE: str = os.getenv("AUTH_AUDIENCE", "").strip()
    DEFAULT_PROGRAM_LENGTH: int = int(os.getenv("DEFAULT_PROGRAM_LENGTH", "75"))
    DEFAULT_STRIKES_LIMIT: int = int(os.getenv("DEFAULT_STRIKES_LIMIT", "3"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = os.getenv("LOG_FORMAT", "text").strip().lower()
    CORS_ORIGINS: list[str] = [
        item.strip()
        for item in os.getenv("CORS_ORIGINS", "*").split(",")
        if item.strip()
    ]


settings = Settings()
