from functools import lru_cache
from typing import Optional

from pydantic import model_validator
from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL

class Settings(BaseSettings):
    PROJECT_NAME: str = "Storefront API"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    # MySQL connection parts (credentials have no defaults)
    DB_HOST: str = "127.0.0.1"
    DB_PORT: int = 3306
    DB_USER: Optional[str] = None
    DB_PASSWORD: Optional[str] = None
    DB_NAME: Optional[str] = None

    # Full SQLAlchemy URL, overrides the DB_* parts (e.g. sqlite for local runs)
    DATABASE_URL: Optional[str] = None

    # Pool
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 0
    DB_ECHO: bool = False

    # Startup connectivity probe
    DB_CONNECT_RETRIES: int = 3
    DB_CONNECT_RETRY_DELAY: float = 2.0

    @model_validator(mode="after")
    def check_database_credentials(self) -> "Settings":
        if self.DATABASE_URL:
            return self
        missing = [
            name for name in ("DB_USER", "DB_PASSWORD", "DB_NAME")
            if getattr(self, name) is None
        ]
        if missing:
            raise ValueError(
                f"Missing database settings: {', '.join(missing)} (or set DATABASE_URL)"
            )
        return self

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return URL.create(
            "mysql+pymysql",
            username=self.DB_USER,
            password=self.DB_PASSWORD,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME,
        ).render_as_string(hide_password=False)

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Settings are read from the environment once per process."""
    return Settings()
