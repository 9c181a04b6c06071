import pytest
from decimal import Decimal
from unittest.mock import MagicMock

from apps.converter.domain.exceptions import MalformedResponseError, NetworkError


@pytest.fixture(autouse=True)
def no_live_provider(settings):
    """Disable live lookups unless a test opts in."""
    settings.LIVE_RATE_PROVIDER = ""


@pytest.fixture
def live_provider():
    """Provider double returning a fixed rate."""
    def factory(rate):
        provider = MagicMock()
        provider.get_exchange_rate_data.return_value = Decimal(rate)
        return provider
    return factory


@pytest.fixture
def unreachable_provider():
    provider = MagicMock()
    provider.get_exchange_rate_data.side_effect = NetworkError("Connection refused")
    return provider


@pytest.fixture
def malformed_provider():
    provider = MagicMock()
    provider.get_exchange_rate_data.side_effect = MalformedResponseError("No numeric rate for USD in response")
    return provider
