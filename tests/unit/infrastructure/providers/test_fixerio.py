# nosec B101


import pytest
from unittest.mock import Mock, AsyncMock
import httpx

from infrastructure.providers.fixerio import FixerIOProvider
from domain.exceptions.currency import ProviderError


@pytest.mark.asyncio
async def test_fetch_rates_success_returns_snapshot():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_response = Mock()
    mock_response.json.return_value = {
        'success': True,
        'timestamp': 1519296206,
        'base': 'EUR',
        'date': '2025-09-20',
        'rates': {'EUR': 1, 'USD': 1.23396, 'GBP': 0.882047, 'JPY': 132.360679},
    }
    mock_response.raise_for_status = Mock()
    mock_client.get.return_value = mock_response

    provider = FixerIOProvider(api_key='test_key', client=mock_client)

    snapshot = await provider.fetch_rates()

    assert snapshot.rates['USD'] == 1.23396
    assert snapshot.rates['EUR'] == 1.0
    call_args = mock_client.get.call_args
    assert 'http://data.fixer.io/api/latest' in call_args[0][0]
    assert call_args[1]['params']['access_key'] == 'test_key'
    assert 'base' not in call_args[1]['params']


@pytest.mark.asyncio
async def test_fetch_rates_api_returns_error():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_response = Mock()
    mock_response.json.return_value = {
        'success': False,
        'error': {
            'code': 101,
            'info': 'Invalid API key'
        }
    }
    mock_response.raise_for_status = Mock()
    mock_client.get.return_value = mock_response

    provider = FixerIOProvider(api_key="invalid_key", client=mock_client)

    with pytest.raises(ProviderError) as exc_info:
        await provider.fetch_rates()

    assert 'Invalid API key' in str(exc_info.value)


@pytest.mark.asyncio
async def test_fetch_rates_http_429_rate_limit():
    mock_client = AsyncMock(spec=httpx.AsyncClient)

    error_response = Mock()
    error_response.status_code = 429
    error_response.text = 'Too Many Requests'

    mock_client.get.side_effect = httpx.HTTPStatusError(
        'Rate limited',
        request=Mock(),
        response=error_response
    )

    provider = FixerIOProvider(api_key='test_key', client=mock_client)

    with pytest.raises(ProviderError) as exc_info:
        await provider.fetch_rates()

    assert 'HTTP error 429' in str(exc_info.value)


@pytest.mark.asyncio
async def test_fetch_rates_network_error():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get.side_effect = httpx.ConnectError('Failed to connect')

    provider = FixerIOProvider(api_key='test_key', client=mock_client, retry_attempts=1)

    with pytest.raises(ProviderError) as exc_info:
        await provider.fetch_rates()

    assert 'request failed: ConnectError' in str(exc_info.value)
