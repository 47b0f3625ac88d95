import logging

from redis.asyncio import Redis

from application.services import ConversionService, CurrencyService, RateCacheService
from config.settings import Settings, get_settings
from infrastructure.cache.redis_cache import RedisKeyValueStore
from infrastructure.persistence.database import Database
from infrastructure.persistence.rate_store import RateStore
from infrastructure.persistence.repositories.key_value import SqlKeyValueStore
from infrastructure.providers import ExchangeRateProvider, FixerIOProvider, OpenExchangeProvider

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	store: RedisKeyValueStore | SqlKeyValueStore | None = None
	provider: ExchangeRateProvider | None = None
	currency_service: CurrencyService | None = None


deps = AppDependencies()


def build_provider(settings: Settings) -> ExchangeRateProvider:
	if settings.RATE_PROVIDER == 'fixerio':
		return FixerIOProvider(
			settings.FIXERIO_API_KEY,
			timeout=settings.HTTP_TIMEOUT_SECONDS,
			retry_attempts=settings.HTTP_RETRY_ATTEMPTS,
		)
	return OpenExchangeProvider(
		settings.OPENEXCHANGE_APP_ID,
		timeout=settings.HTTP_TIMEOUT_SECONDS,
		retry_attempts=settings.HTTP_RETRY_ATTEMPTS,
	)


async def init_dependencies() -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	settings = get_settings()

	if settings.STORE_BACKEND == 'sql':
		db = Database(settings.DATABASE_URL)
		await db.create_tables()
		deps.store = SqlKeyValueStore(db)
	else:
		deps.store = RedisKeyValueStore(Redis.from_url(settings.REDIS_URL, decode_responses=True))

	deps.provider = build_provider(settings)

	rate_service = RateCacheService(
		provider=deps.provider,
		rate_store=RateStore(deps.store, key_prefix=settings.STORE_KEY_PREFIX),
	)
	deps.currency_service = CurrencyService(
		rate_service=rate_service,
		conversion_service=ConversionService(),
		default_currency=settings.DEFAULT_CURRENCY,
	)
	logger.info(f'Dependencies initialized ({settings.STORE_BACKEND} store, {deps.provider.name} provider)')


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.store:
		await deps.store.close()
	if deps.provider:
		await deps.provider.close()

	logger.info('Cleanup complete')


def get_currency_service() -> CurrencyService:
	if deps.currency_service is None:
		raise RuntimeError('Currency service not initialized')
	return deps.currency_service
