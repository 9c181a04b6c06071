import pytest
from decimal import Decimal

from apps.converter.domain.exceptions import MalformedResponseError
from apps.converter.infrastructure.providers.mock import MockProvider


@pytest.fixture
def provider():
    return MockProvider()


def test_get_exchange_rate_data_success(provider):
    """
    Test that MockProvider generates a valid rate for supported currency pairs.
    """
    rate = provider.get_exchange_rate_data("USD", "PHP")

    assert isinstance(rate, Decimal)
    # USD/PHP should be around 58.5 with ±2% variation
    assert Decimal("57.3") < rate < Decimal("59.7")


def test_get_exchange_rate_data_deterministic(provider):
    """
    Test that same inputs produce same output.
    """
    rate1 = provider.get_exchange_rate_data("EUR", "PHP")
    rate2 = provider.get_exchange_rate_data("EUR", "PHP")

    assert rate1 == rate2


def test_get_exchange_rate_data_cross_rate(provider):
    """
    Test cross rate calculation (PHP to EUR).
    """
    rate = provider.get_exchange_rate_data("PHP", "EUR")

    # 0.93 / 58.5 = 0.0159 with variation
    assert Decimal("0.0155") < rate < Decimal("0.0163")


def test_get_exchange_rate_data_unsupported_currency(provider):
    with pytest.raises(MalformedResponseError):
        provider.get_exchange_rate_data("USD", "XXX")


def test_get_exchange_rate_data_precision(provider):
    """
    Test that rates are rounded to 6 decimal places.
    """
    rate = provider.get_exchange_rate_data("USD", "EUR")

    assert rate == rate.quantize(Decimal("0.000001"))
