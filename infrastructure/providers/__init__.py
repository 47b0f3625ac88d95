from .base import ExchangeRateProvider
from .fixerio import FixerIOProvider
from .openexchange import OpenExchangeProvider

__all__ = ['ExchangeRateProvider', 'FixerIOProvider', 'OpenExchangeProvider']
