"""
Provider Registry - Maps ProviderName enum to adapter classes.
The LIVE_RATE_PROVIDER setting picks which adapter serves live lookups.
"""

import logging

from django.conf import settings
from django.db import models

from apps.converter.domain.interfaces import BaseExchangeRateProvider
from apps.converter.infrastructure.providers.exchangerate_host import ExchangeRateHostProvider
from apps.converter.infrastructure.providers.mock import MockProvider


logger = logging.getLogger(__name__)


class ProviderName(models.TextChoices):
    """
    Enum with available providers.
    To add a new provider:
    1. Add an entry here
    2. Implement the BaseExchangeRateProvider interface
    3. Register it in PROVIDER_REGISTRY below
    """

    EXCHANGERATE_HOST = "exchangerate_host", "exchangerate.host"
    MOCK = "mock", "Mock"


# Registry: Maps ProviderName enum to the corresponding adapter class
PROVIDER_REGISTRY: dict[str, type[BaseExchangeRateProvider]] = {
    ProviderName.EXCHANGERATE_HOST: ExchangeRateHostProvider,
    ProviderName.MOCK: MockProvider,
}


def get_provider_instance(provider_name: str) -> BaseExchangeRateProvider | None:
    """
    Get an instance of a provider by its name.

    Args:
        provider_name: The provider name from ProviderName enum

    Returns:
        Instance of the provider adapter, or None if not found
    """
    provider_class = PROVIDER_REGISTRY.get(provider_name)

    if provider_class is None:
        logger.warning("Provider '%s' not found in registry", provider_name)
        return None

    return provider_class()


def get_live_provider() -> BaseExchangeRateProvider | None:
    """
    Get the provider configured for live lookups.

    Returns:
        Provider instance, or None when LIVE_RATE_PROVIDER is empty or unknown
    """
    provider_name = getattr(settings, "LIVE_RATE_PROVIDER", "")

    if not provider_name:
        return None

    return get_provider_instance(provider_name)
