"""
Static fallback rates, used only when the live provider is unavailable.
"""

from decimal import Decimal
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple


class StaticRateTable:
    """
    Read-only table of source -> target multipliers.

    The table does not have to be symmetric or complete. Missing pairs are
    resolved by the service through the pivot currency.
    """

    def __init__(self, rates: Mapping[str, Mapping[str, object]]):
        frozen = {}
        for source_currency, targets in rates.items():
            row = {}
            for exchanged_currency, value in targets.items():
                rate_value = Decimal(str(value))
                if rate_value <= 0:
                    raise ValueError(
                        f"Static rate {source_currency}/{exchanged_currency} must be positive, got {value}"
                    )
                row[exchanged_currency] = rate_value
            frozen[source_currency] = MappingProxyType(row)
        self._rates = MappingProxyType(frozen)

    def lookup_direct(self, source_currency: str, exchanged_currency: str) -> Optional[Decimal]:
        row = self._rates.get(source_currency)
        if row is None:
            return None
        return row.get(exchanged_currency)

    def pairs(self) -> List[Tuple[str, str, Decimal]]:
        return [
            (source_currency, exchanged_currency, rate_value)
            for source_currency, row in self._rates.items()
            for exchanged_currency, rate_value in row.items()
        ]


# Approximate values: 1 unit of the outer key equals N units of the inner key
STATIC_RATE_TABLE = StaticRateTable({
    "PHP": {"USD": "0.017", "EUR": "0.016"},
    "USD": {"PHP": "58.5", "EUR": "0.93"},
    "EUR": {"PHP": "63.0", "USD": "1.08"},
})
