from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file='.env', case_sensitive=True, extra='ignore')
    SQLALCHEMY_DATABASE_URL: str = 'sqlite+aiosqlite:///./file_store.db'
    METADATA_BACKEND: Literal['memory', 'sql'] = 'memory'
    FILE_STORAGE_DIR: str = './files'
    FILE_STAGING_DIR: str = './temp'
    IO_TIMEOUT_S: float = 30.0
    DEFAULT_PAGE_SIZE: int = 20
    JWT_SECRET_KEY: str = 'change-me'
    JWT_ALGORITHM: str = 'HS256'
    SKIP_AUTH: bool = False
    LOG_LEVEL: str = 'INFO'
    API_HOST: str = '0.0.0.0'
    API_PORT: int = 8000


settings = Settings()
