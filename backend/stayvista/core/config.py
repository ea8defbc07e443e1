# stayvista/core/config.py
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Mongo
    MONGO_URL: str = "mongodb://localhost:27017"
    MONGO_DB_NAME: str = "stayVista"

    # Session tokens
    JWT_SECRET_KEY: str = "change-me"
    ALGORITHM: str = "HS256"
    TOKEN_EXPIRE_DAYS: int = 365
    TOKEN_COOKIE_NAME: str = "token"

    ENVIRONMENT: str = "development"
    CORS_ORIGINS: List[str] = ["http://localhost:5173", "http://localhost:5174"]

    # Stripe
    STRIPE_SECRET: str = ""
    PAYMENT_CURRENCY: str = "usd"

    # Mail
    SMTP_SERVER: str = "smtp.gmail.com"
    SMTP_PORT: int = 465
    SMTP_USER: str = ""
    SMTP_PASSWORD: str = ""

    # The first sign-in with this email is stored as admin
    ADMIN_EMAIL: Optional[str] = None

    # Notification outbox worker
    OUTBOX_POLL_SECONDS: int = 30
    OUTBOX_STALE_SECONDS: int = 60

    LOG_DIR: Optional[str] = None
    LOG_LEVEL: str = "INFO"

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"


settings = Settings()
