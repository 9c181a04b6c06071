import pytest
import requests
from unittest.mock import Mock
from decimal import Decimal

from apps.converter.domain.exceptions import MalformedResponseError, NetworkError
from apps.converter.infrastructure.providers.exchangerate_host import ExchangeRateHostProvider


@pytest.fixture
def provider():
    return ExchangeRateHostProvider()


@pytest.fixture
def mock_requests_get(mocker):
    return mocker.patch("requests.get")


@pytest.fixture
def json_response():
    def factory(payload):
        mock_response = Mock()
        mock_response.json.return_value = payload
        mock_response.raise_for_status.return_value = None
        return mock_response
    return factory


def test_get_exchange_rate_data_success(provider, mock_requests_get, json_response, settings):
    """
    Test that get_exchange_rate_data returns the correct Decimal value
    when the API call is successful.
    """
    settings.EXCHANGERATE_HOST_URL = "https://api.exchangerate.host"
    settings.EXCHANGERATE_HOST_ACCESS_KEY = ""
    mock_requests_get.return_value = json_response({
        "success": True,
        "base": "EUR",
        "date": "2024-05-21",
        "rates": {"PHP": 63.2}
    })

    rate = provider.get_exchange_rate_data("EUR", "PHP")

    assert rate == Decimal("63.2")
    mock_requests_get.assert_called_once()

    url = mock_requests_get.call_args[0][0]
    assert url.startswith("https://api.exchangerate.host/latest")
    assert "base=EUR" in url
    assert "symbols=PHP" in url
    assert "access_key" not in url


def test_access_key_and_timeout(provider, mock_requests_get, json_response, settings):
    settings.EXCHANGERATE_HOST_ACCESS_KEY = "secret"
    settings.LIVE_RATE_TIMEOUT = 3.0
    mock_requests_get.return_value = json_response({"rates": {"USD": 0.017}})

    provider.get_exchange_rate_data("PHP", "USD")

    call_args = mock_requests_get.call_args
    assert "access_key=secret" in call_args[0][0]
    assert call_args[1]["timeout"] == 3.0


def test_integer_rate(provider, mock_requests_get, json_response):
    mock_requests_get.return_value = json_response({"rates": {"PHP": 58}})

    assert provider.get_exchange_rate_data("USD", "PHP") == Decimal("58")


@pytest.mark.parametrize("error", [
    requests.exceptions.Timeout("timed out"),
    requests.exceptions.ConnectionError("refused"),
    requests.exceptions.RequestException("boom"),
])
def test_transport_errors_raise_network_error(provider, mock_requests_get, error):
    """
    Test that transport failures surface as NetworkError.
    """
    mock_requests_get.side_effect = error

    with pytest.raises(NetworkError):
        provider.get_exchange_rate_data("PHP", "USD")


def test_http_status_error_raises_network_error(provider, mock_requests_get):
    mock_response = Mock()
    mock_response.raise_for_status.side_effect = requests.exceptions.HTTPError("503 Server Error")
    mock_requests_get.return_value = mock_response

    with pytest.raises(NetworkError):
        provider.get_exchange_rate_data("PHP", "USD")

    mock_response.json.assert_not_called()


def test_invalid_json_raises_malformed(provider, mock_requests_get):
    mock_response = Mock()
    mock_response.raise_for_status.return_value = None
    mock_response.json.side_effect = ValueError("Expecting value")
    mock_requests_get.return_value = mock_response

    with pytest.raises(MalformedResponseError):
        provider.get_exchange_rate_data("PHP", "USD")


@pytest.mark.parametrize("payload", [
    [],
    "rates",
    {},
    {"success": False, "error": {"code": 101, "type": "missing_access_key"}},
    {"rates": None},
    {"rates": {}},
    {"rates": {"EUR": 0.016}},
    {"rates": {"USD": "0.017"}},
    {"rates": {"USD": None}},
    {"rates": {"USD": True}},
    {"rates": {"USD": 0}},
    {"rates": {"USD": -1.5}},
    {"rates": {"USD": float("nan")}},
    {"rates": {"USD": float("inf")}},
])
def test_malformed_payloads(provider, mock_requests_get, json_response, payload):
    """
    Test that any body without a positive numeric rate for the target is malformed.
    """
    mock_requests_get.return_value = json_response(payload)

    with pytest.raises(MalformedResponseError):
        provider.get_exchange_rate_data("PHP", "USD")


def test_network_failure_logs_warning(provider, mock_requests_get, caplog):
    mock_requests_get.side_effect = requests.exceptions.ConnectionError("refused")

    with pytest.raises(NetworkError):
        provider.get_exchange_rate_data("PHP", "USD")

    assert "Could not reach exchangerate.host for PHP/USD" in caplog.text


def test_http_error_does_not_leak_access_key(provider, mock_requests_get, settings, caplog):
    """
    Test that the warning and the error name the status code, not the URL.
    """
    settings.EXCHANGERATE_HOST_ACCESS_KEY = "secret"
    failed_response = Mock(status_code=401)
    failed_response.raise_for_status.side_effect = requests.exceptions.HTTPError(
        "401 Client Error: Unauthorized for url: https://api.exchangerate.host/latest?access_key=secret",
        response=failed_response,
    )
    mock_requests_get.return_value = failed_response

    with pytest.raises(NetworkError) as exc_info:
        provider.get_exchange_rate_data("PHP", "USD")

    assert "401" in str(exc_info.value)
    assert "secret" not in str(exc_info.value)
    assert "HTTP error 401 from exchangerate.host for PHP/USD" in caplog.text
    assert "secret" not in caplog.text


def test_malformed_rate_logs_warning(provider, mock_requests_get, json_response, caplog):
    mock_requests_get.return_value = json_response({"rates": {"USD": "0.017"}})

    with pytest.raises(MalformedResponseError):
        provider.get_exchange_rate_data("PHP", "USD")

    assert "No numeric rate for USD" in caplog.text
