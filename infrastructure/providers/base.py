from typing import Protocol

from domain.models.currency import RateSnapshot


class ExchangeRateProvider(Protocol):
	@property
	def name(self) -> str: ...

	async def fetch_rates(self) -> RateSnapshot:
		"""Return every rate quoted against the provider's base currency.

		Raises ProviderError on any transport, API or payload failure.
		"""
		...

	async def close(self) -> None: ...
