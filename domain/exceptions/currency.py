class CurrencyException(Exception):
	pass


class ProviderError(CurrencyException):
	pass


class CacheError(CurrencyException):
	pass


class SnapshotNotFoundError(CacheError):
	pass


class SnapshotDecodeError(CurrencyException):
	pass


class RateFetchError(CurrencyException):
	pass


class ConversionError(CurrencyException):
	def __init__(self, from_currency: str, to_currency: str):
		self.from_currency = from_currency
		self.to_currency = to_currency
		super().__init__(
			f'Unable to convert from {from_currency} to {to_currency} using available exchange rates.'
		)
