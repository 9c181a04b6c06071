"""
Pure domain entities (POPOs).
No dependency on Django or the ORM.
"""

import math
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum

from apps.converter.domain.exceptions import InvalidAmountError, UnsupportedCurrencyError


SUPPORTED_CURRENCIES = ("PHP", "USD", "EUR")
PIVOT_CURRENCY = "USD"


class Provenance(str, Enum):
    """Which resolution path produced a rate."""

    IDENTICAL = "identical"
    LIVE = "live"
    STATIC_DIRECT = "static-direct"
    STATIC_PIVOTED = "static-pivoted"

    @property
    def is_fallback(self) -> bool:
        return self in (Provenance.STATIC_DIRECT, Provenance.STATIC_PIVOTED)


def parse_amount(value) -> Decimal:
    """
    Parse a user supplied amount into a finite Decimal.

    Args:
        value: Decimal, int, float or str (whitespace is stripped)

    Returns:
        The amount as Decimal

    Raises:
        InvalidAmountError: value is missing, unparseable, NaN or infinite
    """
    if value is None or isinstance(value, bool):
        raise InvalidAmountError(f"Invalid amount: {value!r}")

    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value).strip())
        except (InvalidOperation, ValueError):
            raise InvalidAmountError(f"Invalid amount: {value!r}") from None

    # Values past the float range (e.g. 1e400) count as infinite
    if not amount.is_finite() or not math.isfinite(float(amount)):
        raise InvalidAmountError(f"Amount must be a finite number, got {value!r}")

    return amount


def ensure_supported(code: str) -> str:
    if code not in SUPPORTED_CURRENCIES:
        raise UnsupportedCurrencyError(
            f"Unsupported currency '{code}'. Expected one of: {', '.join(SUPPORTED_CURRENCIES)}"
        )
    return code


@dataclass(frozen=True)
class ConversionRequest:

    amount: Decimal
    source_currency: str
    exchanged_currency: str

    def __post_init__(self):
        if not self.amount.is_finite():
            raise InvalidAmountError(f"Amount must be a finite number, got {self.amount}")
        ensure_supported(self.source_currency)
        ensure_supported(self.exchanged_currency)


@dataclass(frozen=True)
class ResolvedRate:

    rate: Decimal
    provenance: Provenance


@dataclass(frozen=True)
class ConversionResult:

    source_currency: str
    exchanged_currency: str
    amount: Decimal
    rate: Decimal
    converted_amount: Decimal
    provenance: Provenance

    @property
    def is_fallback(self) -> bool:
        return self.provenance.is_fallback
