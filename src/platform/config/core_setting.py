import json
from pathlib import Path
from typing import Annotated, List

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Portal'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production

    # Security
    SECRET_KEY: SecretStr = SecretStr('test_secret_key_change_in_production')
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24
    ALGORITHM: str = 'HS256'

    # CORS
    # Comma separated in env files; NoDecode keeps pydantic-settings from JSON-parsing it
    BACKEND_CORS_ORIGINS: Annotated[List[str], NoDecode] = []

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and v.strip().startswith('['):
            return json.loads(v)
        if isinstance(v, str):
            return [i.strip() for i in v.split(',') if i.strip()]
        elif isinstance(v, list):
            return v
        return []

    # PostgreSQL
    POSTGRES_USER: str = 'postgres'
    POSTGRES_PASSWORD: SecretStr = SecretStr('postgres')
    POSTGRES_SERVER: str = 'localhost'
    POSTGRES_PORT: int = 5432
    POSTGRES_DB: str = 'portal'

    # asyncpg pool
    ASYNCPG_POOL_MIN_SIZE: int = 2
    ASYNCPG_POOL_MAX_SIZE: int = 10
    ASYNCPG_POOL_COMMAND_TIMEOUT: float = 30.0

    # Reservation insert runs check + insert in one SERIALIZABLE transaction when enabled
    RESERVATION_SERIALIZABLE_INSERT: bool = False

    @property
    def DATABASE_URL_ASYNC(self) -> str:
        password = self.POSTGRES_PASSWORD.get_secret_value()
        return f'postgresql+asyncpg://{self.POSTGRES_USER}:{password}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}'

    @property
    def DATABASE_DSN(self) -> str:
        password = self.POSTGRES_PASSWORD.get_secret_value()
        return f'postgresql://{self.POSTGRES_USER}:{password}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}'


settings = Settings()  # type: ignore
