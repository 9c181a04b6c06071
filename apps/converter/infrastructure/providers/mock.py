"""
Mock provider for offline development.
Generates deterministic, realistic exchange rates.
"""

import random
from decimal import Decimal

from apps.converter.domain.exceptions import MalformedResponseError
from apps.converter.domain.interfaces import BaseExchangeRateProvider


class MockProvider(BaseExchangeRateProvider):
    """
    Mock provider that generates exchange rates without network access.
    Useful for:
    - Running the converter without an exchangerate.host access key
    - Exercising the live path in tests
    """

    # Units of each currency per 1 USD
    BASE_RATES = {
        "USD": Decimal("1.0"),
        "EUR": Decimal("0.93"),
        "PHP": Decimal("58.5"),
    }

    def get_exchange_rate_data(
        self,
        source_currency: str,
        exchanged_currency: str
    ) -> Decimal:
        """
        Generate a mock exchange rate with small variation.

        Args:
            source_currency: Base currency code
            exchanged_currency: Target currency code

        Returns:
            Mock exchange rate as Decimal, rounded to 6 decimal places
        """
        source_rate = self.BASE_RATES.get(source_currency)
        target_rate = self.BASE_RATES.get(exchanged_currency)

        if source_rate is None or target_rate is None:
            raise MalformedResponseError(
                f"MockProvider: Unsupported currency pair {source_currency}/{exchanged_currency}"
            )

        base_rate = target_rate / source_rate

        # ±2%, seeded by the pair so repeated calls agree
        generator = random.Random(f"{source_currency}{exchanged_currency}")
        variation = Decimal(str(generator.uniform(0.98, 1.02)))

        return (base_rate * variation).quantize(Decimal("0.000001"))
