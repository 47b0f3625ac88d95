from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	# Application
	APP_NAME: str = 'Currency Rate Cache'
	DEBUG: bool = False

	LOG_LEVEL: str = 'INFO'
	LOG_JSON: bool = False

	# Rate store
	STORE_BACKEND: Literal['redis', 'sql'] = 'redis'
	STORE_KEY_PREFIX: str = ''
	REDIS_URL: str = 'redis://localhost:6379'
	DATABASE_URL: str = 'sqlite+aiosqlite:///./currency_rates.db'

	# Remote rate source
	RATE_PROVIDER: Literal['openexchange', 'fixerio'] = 'openexchange'
	OPENEXCHANGE_APP_ID: str = ''
	FIXERIO_API_KEY: str = ''
	HTTP_TIMEOUT_SECONDS: int = 10
	HTTP_RETRY_ATTEMPTS: int = 3

	DEFAULT_CURRENCY: str = 'USD'

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
