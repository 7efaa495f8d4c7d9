from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import List, Optional

class Settings(BaseSettings):
    POSTGRES_HOST: str = "postgres"
    POSTGRES_PORT: int = 5432
    POSTGRES_DB: str = "products"
    POSTGRES_USER: str = "products"
    POSTGRES_PASSWORD: str = "products"
    # Full SQLAlchemy URL; takes precedence over the POSTGRES_* parts when set
    DATABASE_URL: Optional[str] = None

    SERVICE_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    RUN_MIGRATIONS: bool = True

    # Inventory service, used for stock checks
    INVENTORY_SERVICE_URL: str = "http://localhost:8081"
    INVENTORY_SERVICE_TIMEOUT: float = 5.0

    # Front-end origins allowed to call the catalog
    CORS_ORIGINS: List[str] = ["http://localhost:4200"]

    class Config:
        env_file = ".env"

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return f"postgresql+psycopg2://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

@lru_cache
def get_settings() -> Settings:
    return Settings()
