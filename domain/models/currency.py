import json
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field

from domain.exceptions.currency import SnapshotDecodeError

# Sentinel for "no fetch recorded yet"; always older than the freshness threshold.
NEVER_FETCHED: float = sys.float_info.min


@dataclass(frozen=True)
class Rate:
	currency: str
	rate: float  # units of `currency` per 1 unit of the provider's base currency


@dataclass(frozen=True)
class RateSnapshot:
	"""Every currency-to-rate entry returned by one successful fetch."""

	rates: dict[str, float] = field(default_factory=dict)

	def to_rates(self) -> list[Rate]:
		return [Rate(currency=code, rate=value) for code, value in self.rates.items()]

	def to_json(self) -> str:
		return json.dumps({'rates': self.rates})

	@classmethod
	def from_json(cls, data: str | bytes | Mapping) -> 'RateSnapshot':
		"""Decode a snapshot from a JSON document or an already decoded mapping.

		Only the ``rates`` field is read, so full provider responses
		(``base``, ``timestamp``, ``license``...) decode as well.
		"""
		if isinstance(data, (str, bytes)):
			try:
				data = json.loads(data)
			except ValueError as e:
				raise SnapshotDecodeError(f'Invalid json data: {e}') from e

		if not isinstance(data, Mapping):
			raise SnapshotDecodeError('Snapshot payload must be a JSON object')

		raw_rates = data.get('rates')
		if not isinstance(raw_rates, Mapping):
			raise SnapshotDecodeError("Snapshot payload is missing the 'rates' object")

		rates: dict[str, float] = {}
		for code, value in raw_rates.items():
			# bool is an int subclass but never a rate
			if isinstance(value, bool) or not isinstance(value, (int, float)):
				raise SnapshotDecodeError(f'Rate for {code} is not a number: {value!r}')
			rates[str(code)] = float(value)

		return cls(rates=rates)
