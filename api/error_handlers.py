import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from domain.exceptions.currency import ConversionError, RateFetchError

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
	@app.exception_handler(ConversionError)
	async def conversion_error_handler(request: Request, exc: ConversionError):
		return JSONResponse(
			status_code=422,
			content={
				'detail': str(exc),
				'from_currency': exc.from_currency,
				'to_currency': exc.to_currency,
			},
		)

	@app.exception_handler(RateFetchError)
	async def rate_fetch_error_handler(request: Request, exc: RateFetchError):
		logger.error(f'Rate fetch error: {exc} (cause: {exc.__cause__})')
		return JSONResponse(
			status_code=503, content={'detail': 'Failed to fetch the latest exchange rates.'}
		)
