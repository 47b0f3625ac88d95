from .conversion_service import ConversionService
from .currency_service import CurrencyService, parse_amount
from .rate_service import FRESHNESS_THRESHOLD_SECONDS, RateCacheService

__all__ = [
	'ConversionService',
	'CurrencyService',
	'FRESHNESS_THRESHOLD_SECONDS',
	'RateCacheService',
	'parse_amount',
]
