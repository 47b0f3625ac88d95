from pydantic import BaseModel, ConfigDict, Field


class ConversionResponse(BaseModel):
	from_currency: str = Field(..., description='Source currency code')
	to_currency: str = Field(..., description='Target currency code')
	amount: float = Field(..., description='Original amount requested')
	converted_amount: float = Field(..., description='Converted amount')

	model_config = ConfigDict(
		json_schema_extra={
			'example': {
				'from_currency': 'USD',
				'to_currency': 'EUR',
				'amount': 100.0,
				'converted_amount': 85.0,
			}
		}
	)


class ConvertedAmount(BaseModel):
	currency: str = Field(..., description='Target currency code')
	amount: float = Field(..., description='Amount expressed in the target currency')


class FanOutConversionResponse(BaseModel):
	from_currency: str = Field(..., description='Source currency code')
	amount: float | None = Field(None, description='Parsed amount, or null when the input is not a positive number')
	results: list[ConvertedAmount] = Field(
		default_factory=list, description='Empty when the amount is missing, invalid or not positive'
	)


class CurrencyListResponse(BaseModel):
	currencies: list[str] = Field(description='Currency codes sorted alphabetically')
	default_index: int = Field(0, description='Position of the default currency in the list')

	model_config = ConfigDict(
		json_schema_extra={'examples': [{'currencies': ['EUR', 'GBP', 'JPY', 'USD'], 'default_index': 3}]}
	)
