from pathlib import Path
from typing import List, Optional

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.service.booking.domain.enum.checkout_policy import CheckoutPolicy


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Booking Backend'
    VERSION: str = '0.1.0'
    DEBUG: bool = False
    LOG_TO_FILE: bool = False

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = ['*']

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and not v.startswith('['):
            return [i.strip() for i in v.split(',')]
        elif isinstance(v, list):
            return v
        return []

    # PostgreSQL
    POSTGRES_SERVER: str = 'localhost'
    POSTGRES_USER: str = 'postgres'
    POSTGRES_PASSWORD: SecretStr = SecretStr('postgres')
    POSTGRES_DB: str = 'booking_orders'
    POSTGRES_PORT: int = 5432

    # Connection pool: bounded at 10, waiters give up after DB_POOL_TIMEOUT seconds
    DB_POOL_SIZE: int = 10
    DB_POOL_MAX_OVERFLOW: int = 0
    DB_POOL_TIMEOUT: float = 10.0
    DB_POOL_RECYCLE: int = 3600
    DB_POOL_PRE_PING: bool = True

    @property
    def DATABASE_URL_ASYNC(self) -> str:
        password = self.POSTGRES_PASSWORD.get_secret_value()
        return f'postgresql+asyncpg://{self.POSTGRES_USER}:{password}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}'

    # Shopify (optional; store URL plus either token enables the gateway)
    SHOPIFY_STORE_URL: Optional[str] = None
    SHOPIFY_ACCESS_TOKEN: Optional[SecretStr] = None
    SHOPIFY_STOREFRONT_TOKEN: Optional[SecretStr] = None
    SHOPIFY_API_VERSION: str = '2024-01'
    SHOPIFY_TIMEOUT_SECONDS: float = 5.0

    CHECKOUT_POLICY: CheckoutPolicy = CheckoutPolicy.LENIENT

    @field_validator('SHOPIFY_STORE_URL', mode='after')
    @classmethod
    def normalize_store_url(cls, v: Optional[str]) -> Optional[str]:
        if not v:
            return None
        v = v.strip()
        for scheme in ('https://', 'http://'):
            if v.startswith(scheme):
                v = v[len(scheme) :]
        return v.rstrip('/') or None


settings = Settings()  # type: ignore
