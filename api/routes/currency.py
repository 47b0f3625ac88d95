from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from api.dependencies import get_currency_service
from api.schemas import (
	ConversionResponse,
	ConvertedAmount,
	CurrencyListResponse,
	FanOutConversionResponse,
)
from application.services import CurrencyService, parse_amount

router = APIRouter(prefix='/api', tags=['currency'])

CurrencyCode = Annotated[str, Path(min_length=3, max_length=5)]


@router.get(
	'/currencies',
	response_model=CurrencyListResponse,
	status_code=status.HTTP_200_OK,
	summary='List currencies with known rates',
)
async def list_currencies(
	service: Annotated[CurrencyService, Depends(get_currency_service)],
) -> CurrencyListResponse:
	currencies = await service.list_currencies()
	return CurrencyListResponse(
		currencies=currencies, default_index=service.default_currency_index(currencies)
	)


@router.post(
	'/rates/refresh',
	response_model=CurrencyListResponse,
	status_code=status.HTTP_200_OK,
	summary='Load the latest rates into the converter',
)
async def refresh_rates(
	service: Annotated[CurrencyService, Depends(get_currency_service)],
) -> CurrencyListResponse:
	currencies = await service.refresh_rates()
	return CurrencyListResponse(
		currencies=currencies, default_index=service.default_currency_index(currencies)
	)


@router.get(
	'/convert/{from_currency}/{to_currency}/{amount}',
	response_model=ConversionResponse,
	status_code=status.HTTP_200_OK,
	summary='Convert currency amount',
)
async def convert_currency(
	from_currency: CurrencyCode,
	to_currency: CurrencyCode,
	amount: Annotated[float, Path(gt=0)],
	service: Annotated[CurrencyService, Depends(get_currency_service)],
) -> ConversionResponse:
	from_currency = from_currency.upper()
	to_currency = to_currency.upper()
	converted = await service.convert(from_currency, to_currency, amount)
	return ConversionResponse(
		from_currency=from_currency,
		to_currency=to_currency,
		amount=amount,
		converted_amount=converted,
	)


@router.get(
	'/convert/{from_currency}/{amount}',
	response_model=FanOutConversionResponse,
	status_code=status.HTTP_200_OK,
	summary='Convert an amount into every known currency',
)
async def convert_to_all_currencies(
	from_currency: CurrencyCode,
	amount: str,
	service: Annotated[CurrencyService, Depends(get_currency_service)],
) -> FanOutConversionResponse:
	from_currency = from_currency.upper()
	parsed = parse_amount(amount)
	results = [] if parsed is None else await service.convert_to_all(from_currency, parsed)
	return FanOutConversionResponse(
		from_currency=from_currency,
		amount=parsed,
		results=[ConvertedAmount(currency=code, amount=value) for code, value in results],
	)
