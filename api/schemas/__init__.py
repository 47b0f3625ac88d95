from .responses import (
	ConversionResponse,
	ConvertedAmount,
	CurrencyListResponse,
	FanOutConversionResponse,
)

__all__ = [
	'ConversionResponse',
	'ConvertedAmount',
	'CurrencyListResponse',
	'FanOutConversionResponse',
]
