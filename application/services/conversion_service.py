import threading
from collections.abc import Iterable

from domain.exceptions.currency import ConversionError
from domain.models.currency import Rate


class ConversionService:
	"""Converts amounts using the most recently loaded rate table.

	Rates are units of a currency per one unit of the provider's base, so an
	amount moves to base by dividing by the source rate and out of base by
	multiplying by the target rate.
	"""

	def __init__(self):
		self._lock = threading.Lock()
		self._table: dict[str, float] = {}

	@property
	def rates(self) -> list[Rate]:
		table = self._current_table()
		return [Rate(currency=code, rate=value) for code, value in table.items()]

	def update_rates(self, rates: Iterable[Rate]) -> None:
		# Later duplicates overwrite earlier ones.
		table = {rate.currency: rate.rate for rate in rates}
		with self._lock:
			self._table = table

	def _current_table(self) -> dict[str, float]:
		# The lock guards only the reference swap. A published table is never
		# mutated, so callers compute on it after the lock is released.
		with self._lock:
			return self._table

	def convert(self, from_currency: str, to_currency: str, amount: float) -> float:
		if from_currency == to_currency:
			return amount

		table = self._current_table()
		if not table:
			raise ConversionError(from_currency, to_currency)

		try:
			if from_currency in table and to_currency in table:
				return (amount / table[from_currency]) * table[to_currency]

			converted = self._convert_via_mediator(from_currency, to_currency, amount, table)
		except ZeroDivisionError as e:
			raise ConversionError(from_currency, to_currency) from e

		if converted is not None:
			return converted

		raise ConversionError(from_currency, to_currency)

	def convert_to_all(self, from_currency: str, amount: float) -> list[tuple[str, float]]:
		if amount <= 0:
			return []

		table = self._current_table()
		from_rate = table.get(from_currency)
		if not from_rate:
			return []

		return [(code, (amount / from_rate) * rate) for code, rate in table.items()]

	@staticmethod
	def _convert_via_mediator(
		from_currency: str, to_currency: str, amount: float, table: dict[str, float]
	) -> float | None:
		"""Try one intermediate currency; the first usable candidate wins.

		Candidates are scanned in table order and only a single hop is
		attempted. Every rate shares the provider's base, so a hop needs the
		source and target rates as well as the mediator's own.

		This path is structurally unreachable from ``convert``: a hop needs
		both end rates, and when both are present the direct formula has
		already returned. It only ever returns None there, and is kept as
		the second step of the lookup order.
		"""
		from_rate = table.get(from_currency)
		to_rate = table.get(to_currency)
		if from_rate is None or to_rate is None:
			return None

		for mediator_rate in table.values():
			if mediator_rate == 0:
				continue
			amount_in_mediator = amount / from_rate * mediator_rate
			return amount_in_mediator / mediator_rate * to_rate

		return None
