"""
Presentation helpers shared by the REST API and the HTML converter page.
Turns domain results into display strings; the domain itself never rounds.
"""

from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation
from typing import Dict, Tuple

from apps.converter.domain.models import ConversionResult, Provenance


DISPLAY_PRECISION = Decimal("0.000001")

INVALID_AMOUNT_MESSAGE = "Please enter a valid amount"
NO_RATE_MESSAGE = "No fallback rate available for that pair"

STATUS_MESSAGES = {
    Provenance.IDENTICAL: "Same currency - no conversion needed",
    Provenance.LIVE: "Live rate loaded",
    Provenance.STATIC_DIRECT: "Live rates unavailable - using fallback static rates",
    Provenance.STATIC_PIVOTED: "Live rates unavailable - using fallback static rates",
}


def format_number(value: Decimal) -> str:
    """
    Format a number with thousands separators and at most 6 fraction digits.

    >>> format_number(Decimal("1234.5"))
    '1,234.5'
    """
    try:
        value = value.quantize(DISPLAY_PRECISION, rounding=ROUND_HALF_EVEN)
    except InvalidOperation:
        # Too many digits to quantize; show as-is
        pass

    text = f"{value:,f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


def status_message(provenance: Provenance) -> str:
    return STATUS_MESSAGES[provenance]


def swap_currencies(source_currency: str, exchanged_currency: str) -> Tuple[str, str]:
    return exchanged_currency, source_currency


def present_conversion(result: ConversionResult) -> Dict:
    """Build the response payload for a successful conversion."""
    return {
        "source_currency": result.source_currency,
        "exchanged_currency": result.exchanged_currency,
        "amount": str(result.amount),
        "rate": str(result.rate),
        "converted_amount": str(result.converted_amount),
        "provenance": result.provenance.value,
        "converted_display": f"{format_number(result.converted_amount)} {result.exchanged_currency}",
        "rate_info": (
            f"Rate: 1 {result.source_currency} = "
            f"{format_number(result.rate)} {result.exchanged_currency}"
        ),
        "status": status_message(result.provenance),
        "is_fallback": result.is_fallback,
    }
