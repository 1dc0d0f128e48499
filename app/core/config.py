from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    APP_ENV: str = "local"
    APP_NAME: str = "storefront-api"
    APP_VERSION: str = "1.0.0"
    LOG_LEVEL: str = "INFO"

    JWT_SECRET: str = "change_me_access"
    JWT_REFRESH_SECRET: str = "change_me_refresh"
    JWT_TTL_MINUTES: int = 60
    JWT_REFRESH_TTL_DAYS: int = 7

    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:3001,http://localhost:3002,http://localhost:3003"

    STORE_BACKEND: str = "memory"  # memory | sql
    DATABASE_URL: str = "sqlite+pysqlite:///./storefront.db"
    REDIS_URL: str = "redis://localhost:6379/0"

    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_WINDOW_SECONDS: int = 900
    RATE_LIMIT_MAX_REQUESTS: int = 1000

    @property
    def cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]

    @property
    def is_production(self) -> bool:
        return self.APP_ENV.strip().lower() == "production"

settings = Settings()
