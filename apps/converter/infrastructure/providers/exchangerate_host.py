import logging
import math
from decimal import Decimal

import requests
from django.conf import settings

from apps.converter.domain.exceptions import MalformedResponseError, NetworkError
from apps.converter.domain.interfaces import BaseExchangeRateProvider


logger = logging.getLogger(__name__)


class ExchangeRateHostProvider(BaseExchangeRateProvider):
    """
    exchangerate.host API provider.
    Uses the /latest endpoint, asking for a single target symbol.
    """

    def get_exchange_rate_data(
        self,
        source_currency: str,
        exchanged_currency: str
    ) -> Decimal:
        """
        Fetch the latest exchange rate from exchangerate.host.

        Args:
            source_currency: Base currency code (e.g. PHP)
            exchanged_currency: Target currency code (e.g. USD)

        Returns:
            Exchange rate as Decimal

        Raises:
            NetworkError: on timeout, connection failure or non-2xx status
            MalformedResponseError: when the body has no numeric rate for the target
        """
        # Format: https://api.exchangerate.host/latest?base=PHP&symbols=USD
        url = (
            f"{settings.EXCHANGERATE_HOST_URL}/latest"
            f"?base={source_currency}"
            f"&symbols={exchanged_currency}"
        )
        logger.debug("Requesting live rate: %s", url)

        access_key = settings.EXCHANGERATE_HOST_ACCESS_KEY
        if access_key:
            url = f"{url}&access_key={access_key}"

        try:
            response = requests.get(url, timeout=settings.LIVE_RATE_TIMEOUT)
            response.raise_for_status()
        except requests.exceptions.Timeout as e:
            logger.warning("Timeout calling exchangerate.host for %s/%s", source_currency, exchanged_currency)
            raise NetworkError(
                f"Timeout calling exchangerate.host for {source_currency}/{exchanged_currency}"
            ) from e
        except requests.exceptions.HTTPError as e:
            # str(e) carries the full URL, access key included
            status_code = e.response.status_code if e.response is not None else None
            logger.warning(
                "HTTP error %s from exchangerate.host for %s/%s",
                status_code,
                source_currency,
                exchanged_currency,
            )
            raise NetworkError(f"HTTP error {status_code} from exchangerate.host") from e
        except requests.exceptions.RequestException as e:
            logger.warning(
                "Could not reach exchangerate.host for %s/%s: %s",
                source_currency,
                exchanged_currency,
                e.__class__.__name__,
            )
            raise NetworkError(f"Could not reach exchangerate.host: {e.__class__.__name__}") from e

        try:
            data = response.json()
        except ValueError as e:
            logger.warning("Invalid JSON from exchangerate.host for %s/%s", source_currency, exchanged_currency)
            raise MalformedResponseError(f"Invalid JSON from exchangerate.host: {e}") from e

        # Response format: {"base": "PHP", "rates": {"USD": 0.017}}
        rates = data.get("rates") if isinstance(data, dict) else None
        if not isinstance(rates, dict):
            logger.warning("Response from exchangerate.host has no 'rates' mapping: %.200r", data)
            raise MalformedResponseError("Response from exchangerate.host has no 'rates' mapping")

        return parse_rate_value(rates.get(exchanged_currency), exchanged_currency)


def parse_rate_value(value, exchanged_currency: str) -> Decimal:
    """Validate a raw JSON rate and convert it to Decimal."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        logger.warning("No numeric rate for %s in response, got %r", exchanged_currency, value)
        raise MalformedResponseError(f"No numeric rate for {exchanged_currency} in response")
    if not math.isfinite(value) or value <= 0:
        logger.warning("Rate for %s is not a positive number: %s", exchanged_currency, value)
        raise MalformedResponseError(f"Rate for {exchanged_currency} is not a positive number: {value}")
    return Decimal(str(value))
