import asyncio
import logging
import math

from application.services.conversion_service import ConversionService
from application.services.rate_service import RateCacheService

logger = logging.getLogger(__name__)


def parse_amount(text: str | None) -> float | None:
	"""Parse user input into a positive amount, or None when there is nothing to convert."""
	if text is None:
		return None
	try:
		amount = float(text.strip())
	except ValueError:
		return None
	if not math.isfinite(amount) or amount <= 0:
		return None
	return amount


class CurrencyService:
	def __init__(
		self,
		rate_service: RateCacheService,
		conversion_service: ConversionService,
		default_currency: str = 'USD',
	):
		self.rate_service = rate_service
		self.conversion_service = conversion_service
		self.default_currency = default_currency
		self._refresh_lock = asyncio.Lock()

	async def refresh_rates(self) -> list[str]:
		async with self._refresh_lock:
			rates = await self.rate_service.get_latest_rates()
			self.conversion_service.update_rates(rates)

		currencies = sorted(rate.currency for rate in rates)
		logger.info(f'Loaded rates for {len(currencies)} currencies')
		return currencies

	def default_currency_index(self, currencies: list[str]) -> int:
		try:
			return currencies.index(self.default_currency)
		except ValueError:
			return 0

	async def list_currencies(self) -> list[str]:
		return await self.rate_service.get_sorted_currency_list()

	async def convert(self, from_currency: str, to_currency: str, amount: float) -> float:
		if not self.conversion_service.rates:
			await self.refresh_rates()
		return self.conversion_service.convert(from_currency, to_currency, amount)

	async def convert_to_all(self, from_currency: str, amount: float) -> list[tuple[str, float]]:
		if not self.conversion_service.rates:
			await self.refresh_rates()
		return self.conversion_service.convert_to_all(from_currency, amount)
