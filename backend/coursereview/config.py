"""Application settings loaded from environment variables and backend/.env."""

from pydantic_settings import BaseSettings
from typing import List
from pathlib import Path


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./coursereview.db"
    SECRET_KEY: str = "change-me-to-a-random-secret-key"
    DEBUG: bool = True
    ALLOWED_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:8000"]
    API_PREFIX: str = "/api"
    LOG_LEVEL: str = "INFO"

    # MySQL connection; takes precedence over DATABASE_URL when MYSQL_HOST is set
    MYSQL_HOST: str = ""
    MYSQL_USER: str = ""
    MYSQL_PASSWORD: str = ""
    MYSQL_DATABASE: str = ""

    # JWT
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 480

    # Version numbering
    VERSION_RETRY_LIMIT: int = 3

    def database_url(self) -> str:
        host = str(self.MYSQL_HOST or "").strip()
        if not host:
            return self.DATABASE_URL
        return (
            f"mysql+pymysql://{self.MYSQL_USER}:{self.MYSQL_PASSWORD}"
            f"@{host}/{self.MYSQL_DATABASE}?charset=utf8mb4"
        )

    class Config:
        # load backend/.env regardless of the working directory
        env_file = str(Path(__file__).resolve().parents[1] / ".env")


settings = Settings()
